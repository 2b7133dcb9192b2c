"""Get Categories Query - 카테고리 안내 목록 조회."""

from __future__ import annotations

from dataclasses import dataclass

from apps.identify.application.identify.ports import GuidanceCatalogPort


@dataclass
class CategoryInfo:
    """카테고리 DTO."""

    name: str
    recyclable_instructions: str
    non_recyclable_instructions: str
    impact: str
    alternatives: list[str]


class GetCategoriesQuery:
    """카테고리 목록 조회 Query."""

    def __init__(self, catalog: GuidanceCatalogPort):
        """초기화.

        Args:
            catalog: 가이드 카탈로그
        """
        self._catalog = catalog

    def execute(self) -> list[CategoryInfo]:
        """카테고리 목록 조회 실행."""
        return [
            CategoryInfo(
                name=guidance.category.value,
                recyclable_instructions=guidance.recyclable_instructions,
                non_recyclable_instructions=guidance.non_recyclable_instructions,
                impact=guidance.impact,
                alternatives=list(guidance.alternatives),
            )
            for guidance in self._catalog.list_guidance()
        ]
