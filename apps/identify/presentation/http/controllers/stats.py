"""Stats API Controller.

- GET /identify/stats: 사용자 참여 통계 + 최근 스캔 이력
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Header
from pydantic import BaseModel

from apps.identify.application.common.exceptions import UnauthorizedError
from apps.identify.presentation.http.controllers.identify import IdentificationResponse
from apps.identify.setup.dependencies import GetStatsQueryDep

router = APIRouter(prefix="/identify", tags=["stats"])


class StatsResponse(BaseModel):
    """참여 통계 스키마."""

    items_scanned: int
    co2_saved_kg: float
    streak: int
    level: int
    last_scan_date: str | None = None
    history: list[IdentificationResponse]


def get_current_user_id(
    x_user_id: str | None = Header(None, alias="X-User-ID"),
) -> str:
    """Ext-Authz에서 주입된 사용자 ID 추출.

    Raises:
        UnauthorizedError: X-User-ID 헤더가 없는 경우 (401)
    """
    if not x_user_id:
        raise UnauthorizedError()
    return x_user_id


CurrentUserId = Annotated[str, Depends(get_current_user_id)]


@router.get(
    "/stats",
    response_model=StatsResponse,
    summary="Recycling stats and recent scans of the current user",
)
async def get_stats(user_id: CurrentUserId, query: GetStatsQueryDep) -> StatsResponse:
    """현재 사용자의 통계와 최근 스캔 이력(최신순)을 반환합니다."""
    view = await query.execute(user_id)
    return StatsResponse(
        **view.stats.to_dict(),
        history=[IdentificationResponse.from_result(r) for r in view.history],
    )
