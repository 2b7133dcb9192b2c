"""Identification Result Value Object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from apps.identify.domain.enums import MaterialCategory, ResultSource


@dataclass(frozen=True, slots=True)
class IdentificationResult:
    """식별 결과 (canonical shape).

    instructions / alternatives / impact는 백엔드 원문이 아니라
    항상 로컬 가이드 카탈로그에서 (category, recyclable)로 조회한 값.

    Attributes:
        item: 품목명
        category: 재질 카테고리 (항상 enum 멤버)
        recyclable: 재활용 가능 여부
        instructions: 배출 방법 안내
        alternatives: 대안 행동 목록 (순서 유지)
        impact: 환경 영향 설명
        source: 결과 출처 (canonical 필드 아님)
    """

    item: str
    category: MaterialCategory
    recyclable: bool
    instructions: str
    alternatives: tuple[str, ...]
    impact: str
    source: ResultSource = ResultSource.DEGRADED

    @property
    def is_degraded(self) -> bool:
        """폴백 결과 여부."""
        return self.source == ResultSource.DEGRADED

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환 (API 응답 / 이력 저장용)."""
        return {
            "item": self.item,
            "category": self.category.value,
            "recyclable": self.recyclable,
            "instructions": self.instructions,
            "alternatives": list(self.alternatives),
            "impact": self.impact,
            "source": self.source.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> IdentificationResult:
        """딕셔너리에서 복원 (이력 조회용)."""
        return cls(
            item=data.get("item", ""),
            category=MaterialCategory.coerce(data.get("category")),
            recyclable=bool(data.get("recyclable", False)),
            instructions=data.get("instructions", ""),
            alternatives=tuple(data.get("alternatives", [])),
            impact=data.get("impact", ""),
            source=ResultSource(data.get("source", ResultSource.DEGRADED.value)),
        )
