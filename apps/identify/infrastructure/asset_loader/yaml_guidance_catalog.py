"""YAML Guidance Catalog - GuidanceCatalogPort 구현체.

disposal_guidance.yaml 1회 로딩 후 불변 DTO로 보관.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from apps.identify.application.identify.dto import (
    CategoryGuidance,
    FallbackGuidance,
    FallbackKind,
)
from apps.identify.application.identify.ports import GuidanceCatalogPort
from apps.identify.domain.enums import MaterialCategory

logger = logging.getLogger(__name__)

GUIDANCE_FILENAME = "disposal_guidance.yaml"


class YamlGuidanceCatalog(GuidanceCatalogPort):
    """YAML 기반 가이드 카탈로그.

    모든 MaterialCategory 멤버와 모든 FallbackKind가 파일에 있어야 한다.
    누락 시 초기화 단계에서 KeyError.
    """

    def __init__(self, assets_path: str | Path):
        """초기화.

        Args:
            assets_path: 정적 에셋 경로 (data/ 포함)
        """
        filepath = Path(assets_path) / "data" / GUIDANCE_FILENAME
        if not filepath.exists():
            raise FileNotFoundError(f"Guidance catalog not found: {filepath}")

        with filepath.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        self._guidance = MappingProxyType(self._build_guidance(data))
        self._fallbacks = MappingProxyType(self._build_fallbacks(data))
        logger.info(
            "Guidance catalog loaded (path=%s, categories=%d)",
            filepath,
            len(self._guidance),
        )

    @staticmethod
    def _build_guidance(data: dict[str, Any]) -> dict[MaterialCategory, CategoryGuidance]:
        categories = data["categories"]
        alternatives = data.get("alternatives", {})
        default_alternatives = tuple(data["default_alternatives"])

        guidance = {}
        for category in MaterialCategory:
            entry = categories[category.value]
            guidance[category] = CategoryGuidance(
                category=category,
                recyclable_instructions=entry["instructions"]["recyclable"],
                non_recyclable_instructions=entry["instructions"]["non_recyclable"],
                impact=entry["impact"],
                alternatives=tuple(alternatives.get(category.value, default_alternatives)),
            )
        return guidance

    @staticmethod
    def _build_fallbacks(data: dict[str, Any]) -> dict[FallbackKind, FallbackGuidance]:
        fallbacks = data["fallbacks"]
        return {
            kind: FallbackGuidance(
                item=fallbacks[kind.value].get("item"),
                instructions=fallbacks[kind.value]["instructions"],
                alternatives=tuple(fallbacks[kind.value]["alternatives"]),
                impact=fallbacks[kind.value]["impact"],
            )
            for kind in FallbackKind
        }

    def get_guidance(self, category: MaterialCategory) -> CategoryGuidance:
        return self._guidance[category]

    def get_fallback(self, kind: FallbackKind) -> FallbackGuidance:
        return self._fallbacks[kind]

    def list_guidance(self) -> list[CategoryGuidance]:
        return [self._guidance[category] for category in MaterialCategory]
