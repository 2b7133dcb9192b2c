"""Record Scan Command - 식별 결과를 이력/통계에 반영."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from apps.identify.application.stats.ports import ScanHistoryStorePort
from apps.identify.domain.entities import RecyclingStats
from apps.identify.domain.entities.recycling_stats import DEFAULT_CO2_PER_RECYCLABLE_KG
from apps.identify.domain.value_objects import IdentificationResult

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 50


class RecordScanCommand:
    """스캔 기록 Command."""

    def __init__(
        self,
        store: ScanHistoryStorePort,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
        co2_per_recyclable_kg: float = DEFAULT_CO2_PER_RECYCLABLE_KG,
        today: Callable[[], date] = date.today,
    ):
        """초기화.

        Args:
            store: 이력 저장소
            history_limit: 보관할 최근 이력 수
            co2_per_recyclable_kg: 재활용 품목당 CO₂ 절감량
            today: 오늘 날짜 공급자 (테스트 주입용)
        """
        self._store = store
        self._history_limit = history_limit
        self._co2_per_recyclable_kg = co2_per_recyclable_kg
        self._today = today

    async def execute(self, user_id: str, result: IdentificationResult) -> RecyclingStats:
        """기록 실행.

        Args:
            user_id: 사용자 ID
            result: 식별 결과

        Returns:
            갱신된 통계
        """
        today = self._today()

        def apply(stats: RecyclingStats) -> None:
            stats.record(
                recyclable=result.recyclable,
                today=today,
                co2_per_recyclable_kg=self._co2_per_recyclable_kg,
            )

        await self._store.push_history(user_id, result, self._history_limit)
        stats = await self._store.update_stats(user_id, apply)

        logger.info(
            "scan_recorded",
            extra={
                "user_id": user_id,
                "items_scanned": stats.items_scanned,
                "level": stats.level,
                "streak": stats.streak,
            },
        )
        return stats
