"""Result Factory - 백엔드 응답 → canonical IdentificationResult.

카테고리 coercion + 가이드 카탈로그 조회를 한 곳에서 수행하여
어느 백엔드가 응답하든 동일한 문구를 보장.
"""

from __future__ import annotations

from apps.identify.application.identify.dto import FallbackKind
from apps.identify.application.identify.ports import GuidanceCatalogPort
from apps.identify.domain.enums import CaptureMode, MaterialCategory, ResultSource
from apps.identify.domain.value_objects import (
    IdentificationRequest,
    IdentificationResult,
    TextQuery,
)

UNKNOWN_ITEM_LABEL = "Unknown Item"


class ResultFactory:
    """IdentificationResult 생성기."""

    def __init__(self, catalog: GuidanceCatalogPort):
        """초기화.

        Args:
            catalog: 가이드 카탈로그 Port
        """
        self._catalog = catalog

    def build(
        self,
        item: str,
        category: object,
        recyclable: bool,
        source: ResultSource,
    ) -> IdentificationResult:
        """백엔드 결과를 canonical shape으로 변환.

        Args:
            item: 품목명
            category: 백엔드가 반환한 카테고리 (임의 문자열 허용)
            recyclable: 재활용 가능 여부
            source: 결과 출처

        Returns:
            IdentificationResult (category는 항상 enum 멤버)
        """
        coerced = MaterialCategory.coerce(category)
        guidance = self._catalog.get_guidance(coerced)
        return IdentificationResult(
            item=item,
            category=coerced,
            recyclable=recyclable,
            instructions=guidance.instructions_for(recyclable),
            alternatives=guidance.alternatives,
            impact=guidance.impact,
            source=source,
        )

    def degraded(self, request: IdentificationRequest) -> IdentificationResult:
        """모든 백엔드 실패 시 요청 종류별 고정 결과.

        - 일반 이미지: Unknown Item
        - 바코드: Unknown Product
        - 텍스트 검색: 사용자 검색어 유지
        """
        if isinstance(request, TextQuery):
            fallback = self._catalog.get_fallback(FallbackKind.SEARCH_MISS)
            item = request.text.strip()
        elif request.mode == CaptureMode.BARCODE:
            fallback = self._catalog.get_fallback(FallbackKind.UNKNOWN_PRODUCT)
            item = fallback.item or UNKNOWN_ITEM_LABEL
        else:
            fallback = self._catalog.get_fallback(FallbackKind.UNKNOWN_ITEM)
            item = fallback.item or UNKNOWN_ITEM_LABEL

        return IdentificationResult(
            item=item,
            category=MaterialCategory.MIXED,
            recyclable=False,
            instructions=fallback.instructions,
            alternatives=fallback.alternatives,
            impact=fallback.impact,
            source=ResultSource.DEGRADED,
        )
