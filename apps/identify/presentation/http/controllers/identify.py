"""Identify API Controller.

메인 API 엔드포인트:
- POST /identify/image: 일반 이미지 식별
- POST /identify/barcode: 바코드 이미지 식별
- POST /identify/search: 텍스트 검색
- GET /identify/categories: 카테고리 안내 목록
- GET /identify/status: 백엔드 가용성 / 현재 전략
- POST /identify/strategy/toggle: 우선순위 전환 (debug only)

식별 엔드포인트는 항상 200 + 결과를 반환 (백엔드 전체 실패 시 degraded result).
X-User-ID 헤더가 있으면 스캔 이력/통계에 기록하며, 기록 실패는 응답에 영향 없음.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Header, HTTPException
from pydantic import BaseModel, Field

from apps.identify.application.common.exceptions import HistoryStoreError
from apps.identify.application.identify.commands import IdentifyItemCommand
from apps.identify.application.identify.queries.get_service_status import STRATEGY_LABELS
from apps.identify.application.stats.commands import RecordScanCommand
from apps.identify.domain.enums import CaptureMode
from apps.identify.domain.value_objects import (
    IdentificationRequest,
    IdentificationResult,
    ImageCapture,
    TextQuery,
)
from apps.identify.metrics import STATS_RECORD_COUNTER
from apps.identify.setup.dependencies import (
    GetCategoriesQueryDep,
    IdentifyCommandDep,
    RecordScanCommandDep,
    ServiceStatusQueryDep,
    SettingsDep,
    ToggleStrategyCommandDep,
)

router = APIRouter(prefix="/identify", tags=["identify"])
logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Schemas
# ─────────────────────────────────────────────────────────────────────────────


class ImageIdentifyRequest(BaseModel):
    """이미지 식별 요청 스키마."""

    image_base64: str = Field(
        description="base64 이미지 (data:image/...;base64, prefix 허용)",
    )


class SearchRequest(BaseModel):
    """텍스트 검색 요청 스키마."""

    query: str = Field(description="검색어", examples=["pizza box"])


class IdentificationResponse(BaseModel):
    """식별 결과 스키마."""

    item: str
    category: str
    recyclable: bool
    instructions: str
    alternatives: list[str]
    impact: str
    source: str = Field(description="local_model, remote_ai, degraded")

    @classmethod
    def from_result(cls, result: IdentificationResult) -> IdentificationResponse:
        return cls(**result.to_dict())


class CategoryResponse(BaseModel):
    """카테고리 안내 스키마."""

    name: str
    recyclable_instructions: str
    non_recyclable_instructions: str
    impact: str
    alternatives: list[str]


class ServiceStatusResponse(BaseModel):
    """서비스 상태 스키마."""

    local_model_available: bool
    local_model_endpoint: str | None = None
    candidate_endpoints: list[str]
    remote_ai_url: str
    strategy: str = Field(description="LOCAL_FIRST, REMOTE_FIRST")
    fallback_enabled: bool
    confidence_threshold: float


class StrategyToggleResponse(BaseModel):
    """전략 전환 응답 스키마."""

    primary_backend: str
    strategy: str


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────


async def _resolve(
    request: IdentificationRequest,
    command: IdentifyItemCommand,
    record_command: RecordScanCommand,
    user_id: str | None,
) -> IdentificationResponse:
    result = await command.execute(request)
    if user_id:
        await _record_scan(record_command, user_id, result)
    return IdentificationResponse.from_result(result)


async def _record_scan(
    record_command: RecordScanCommand,
    user_id: str,
    result: IdentificationResult,
) -> None:
    """스캔 기록 (실패해도 식별 응답은 그대로 반환)."""
    try:
        await record_command.execute(user_id, result)
    except HistoryStoreError as e:
        STATS_RECORD_COUNTER.labels(status="failed").inc()
        logger.warning(
            "scan_record_skipped",
            extra={"user_id": user_id, "operation": e.operation, "error": e.message},
        )
        return
    STATS_RECORD_COUNTER.labels(status="success").inc()


# ─────────────────────────────────────────────────────────────────────────────
# Endpoints
# ─────────────────────────────────────────────────────────────────────────────


@router.post(
    "/image",
    response_model=IdentificationResponse,
    summary="Identify a recyclable item from a photo",
)
async def identify_image(
    payload: ImageIdentifyRequest,
    command: IdentifyCommandDep,
    record_command: RecordScanCommandDep,
    x_user_id: str | None = Header(None, alias="X-User-ID"),
) -> IdentificationResponse:
    """사진으로 품목을 식별합니다.

    로컬 모델 → 원격 AI 순서(기본값)로 시도하며,
    모두 실패하면 "Unknown Item" 결과를 반환합니다.
    """
    request = ImageCapture(image_base64=payload.image_base64, mode=CaptureMode.ITEM)
    return await _resolve(request, command, record_command, x_user_id)


@router.post(
    "/barcode",
    response_model=IdentificationResponse,
    summary="Identify a product from a barcode photo",
)
async def identify_barcode(
    payload: ImageIdentifyRequest,
    command: IdentifyCommandDep,
    record_command: RecordScanCommandDep,
    x_user_id: str | None = Header(None, alias="X-User-ID"),
) -> IdentificationResponse:
    """바코드 사진으로 제품을 식별합니다 (원격 AI 전용)."""
    request = ImageCapture(image_base64=payload.image_base64, mode=CaptureMode.BARCODE)
    return await _resolve(request, command, record_command, x_user_id)


@router.post(
    "/search",
    response_model=IdentificationResponse,
    summary="Look up recycling guidelines by name",
)
async def search(
    payload: SearchRequest,
    command: IdentifyCommandDep,
    record_command: RecordScanCommandDep,
    x_user_id: str | None = Header(None, alias="X-User-ID"),
) -> IdentificationResponse:
    """품목명으로 재활용 방법을 검색합니다."""
    request = TextQuery(text=payload.query)
    return await _resolve(request, command, record_command, x_user_id)


@router.get(
    "/categories",
    response_model=list[CategoryResponse],
    summary="Material categories with disposal guidance",
)
def get_categories(query: GetCategoriesQueryDep) -> list[CategoryResponse]:
    """재질 카테고리별 배출 안내를 반환합니다."""
    return [
        CategoryResponse(
            name=info.name,
            recyclable_instructions=info.recyclable_instructions,
            non_recyclable_instructions=info.non_recyclable_instructions,
            impact=info.impact,
            alternatives=info.alternatives,
        )
        for info in query.execute()
    ]


@router.get(
    "/status",
    response_model=ServiceStatusResponse,
    summary="Backend availability and active strategy",
)
async def get_status(query: ServiceStatusQueryDep) -> ServiceStatusResponse:
    """로컬 모델 가용성과 현재 Resolver 설정을 반환합니다."""
    status = await query.execute()
    return ServiceStatusResponse(
        local_model_available=status.local_model_available,
        local_model_endpoint=status.local_model_endpoint,
        candidate_endpoints=status.candidate_endpoints,
        remote_ai_url=status.remote_ai_url,
        strategy=status.strategy,
        fallback_enabled=status.fallback_enabled,
        confidence_threshold=status.confidence_threshold,
    )


@router.post(
    "/strategy/toggle",
    response_model=StrategyToggleResponse,
    summary="Swap primary and secondary backends (debug only)",
)
def toggle_strategy(
    settings: SettingsDep,
    command: ToggleStrategyCommandDep,
) -> StrategyToggleResponse:
    """primary/secondary 백엔드를 교체합니다.

    IDENTIFY_DEBUG_ENDPOINTS_ENABLED=true 일 때만 노출 (그 외 404).
    """
    if not settings.debug_endpoints_enabled:
        raise HTTPException(status_code=404, detail="Not Found")

    primary = command.execute()
    return StrategyToggleResponse(
        primary_backend=primary.value,
        strategy=STRATEGY_LABELS[primary],
    )
