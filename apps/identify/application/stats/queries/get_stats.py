"""Get Stats Query - 사용자 통계 + 최근 이력."""

from __future__ import annotations

from dataclasses import dataclass, field

from apps.identify.application.stats.ports import ScanHistoryStorePort
from apps.identify.domain.entities import RecyclingStats
from apps.identify.domain.value_objects import IdentificationResult


@dataclass
class StatsView:
    """통계 조회 결과."""

    stats: RecyclingStats
    history: list[IdentificationResult] = field(default_factory=list)


class GetStatsQuery:
    """통계 조회 Query."""

    def __init__(self, store: ScanHistoryStorePort, history_limit: int = 50):
        self._store = store
        self._history_limit = history_limit

    async def execute(self, user_id: str) -> StatsView:
        """조회 실행 (기록 없는 사용자는 초기 통계)."""
        stats = await self._store.get_stats(user_id) or RecyclingStats()
        history = await self._store.get_history(user_id, self._history_limit)
        return StatsView(stats=stats, history=history)
