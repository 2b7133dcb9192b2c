"""Guidance Catalog Port - 배출 안내 정적 테이블."""

from __future__ import annotations

from abc import ABC, abstractmethod

from apps.identify.application.identify.dto import (
    CategoryGuidance,
    FallbackGuidance,
    FallbackKind,
)
from apps.identify.domain.enums import MaterialCategory


class GuidanceCatalogPort(ABC):
    """가이드 카탈로그 포트.

    카테고리 → (instructions, impact, alternatives) 읽기 전용 매핑.
    """

    @abstractmethod
    def get_guidance(self, category: MaterialCategory) -> CategoryGuidance:
        """카테고리 안내 조회 (모든 enum 멤버에 대해 항상 존재)."""

    @abstractmethod
    def get_fallback(self, kind: FallbackKind) -> FallbackGuidance:
        """degraded result 안내 조회."""

    @abstractmethod
    def list_guidance(self) -> list[CategoryGuidance]:
        """전체 카테고리 안내 (enum 선언 순서)."""
