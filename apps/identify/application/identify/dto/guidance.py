"""Guidance DTOs - 가이드 카탈로그 조회 결과."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from apps.identify.domain.enums import MaterialCategory


class FallbackKind(str, Enum):
    """폴백 안내 종류 (요청 종류별 degraded result)."""

    UNKNOWN_ITEM = "unknown_item"
    UNKNOWN_PRODUCT = "unknown_product"
    SEARCH_MISS = "search_miss"


@dataclass(frozen=True, slots=True)
class CategoryGuidance:
    """카테고리별 배출 안내."""

    category: MaterialCategory
    recyclable_instructions: str
    non_recyclable_instructions: str
    impact: str
    alternatives: tuple[str, ...]

    def instructions_for(self, recyclable: bool) -> str:
        """재활용 여부에 맞는 안내문."""
        if recyclable:
            return self.recyclable_instructions
        return self.non_recyclable_instructions


@dataclass(frozen=True, slots=True)
class FallbackGuidance:
    """degraded result용 고정 안내 triple."""

    item: str | None
    instructions: str
    alternatives: tuple[str, ...]
    impact: str
