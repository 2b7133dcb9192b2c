"""Scan History Store Port - 스캔 이력 / 통계 저장소."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from apps.identify.domain.entities import RecyclingStats
from apps.identify.domain.value_objects import IdentificationResult


class ScanHistoryStorePort(ABC):
    """스캔 이력 저장소 Port.

    사용자별 통계 1건 + 최근 N건 식별 결과 (최신순).
    """

    @abstractmethod
    async def get_stats(self, user_id: str) -> RecyclingStats | None:
        """통계 조회 (없으면 None)."""
        raise NotImplementedError

    @abstractmethod
    async def update_stats(
        self,
        user_id: str,
        mutate: Callable[[RecyclingStats], None],
    ) -> RecyclingStats:
        """통계 원자적 갱신 (read-modify-write).

        같은 사용자의 동시 갱신이 서로를 덮어쓰지 않아야 한다.
        충돌 시 최신 값으로 mutate를 다시 적용할 수 있으므로 mutate는 부수효과가 없어야 함.

        Args:
            user_id: 사용자 ID
            mutate: 통계 변경 함수 (기록 없으면 초기 통계에 적용)

        Returns:
            저장된 통계
        """
        raise NotImplementedError

    @abstractmethod
    async def push_history(
        self,
        user_id: str,
        result: IdentificationResult,
        limit: int,
    ) -> None:
        """이력 맨 앞에 추가 후 limit건으로 자르기."""
        raise NotImplementedError

    @abstractmethod
    async def get_history(self, user_id: str, limit: int) -> list[IdentificationResult]:
        """최근 이력 조회 (최신순)."""
        raise NotImplementedError
