"""Get Service Status Query - 백엔드 가용성 / 현재 전략 조회."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from apps.identify.application.identify.commands import IdentifyItemCommand
from apps.identify.application.identify.ports import HealthCheckPort
from apps.identify.domain.enums import BackendKind

logger = logging.getLogger(__name__)

STRATEGY_LABELS: dict[BackendKind, str] = {
    BackendKind.LOCAL_MODEL: "LOCAL_FIRST",
    BackendKind.REMOTE_AI: "REMOTE_FIRST",
}


@dataclass
class ServiceStatus:
    """서비스 상태 DTO."""

    local_model_available: bool
    local_model_endpoint: str | None
    candidate_endpoints: list[str]
    remote_ai_url: str
    strategy: str
    fallback_enabled: bool
    confidence_threshold: float


class GetServiceStatusQuery:
    """서비스 상태 조회 Query.

    원격 AI는 항상 사용 가능하다고 가정하고 로컬 모델만 프로브.
    """

    def __init__(
        self,
        identify_command: IdentifyItemCommand,
        local_model_health: HealthCheckPort,
        remote_ai_url: str,
    ):
        """초기화.

        Args:
            identify_command: Resolver (현재 설정 조회용)
            local_model_health: 로컬 모델 health check
            remote_ai_url: 원격 AI 엔드포인트
        """
        self._identify = identify_command
        self._health = local_model_health
        self._remote_ai_url = remote_ai_url

    async def execute(self) -> ServiceStatus:
        """상태 조회 실행."""
        config = self._identify.config
        endpoint = await self._health.is_available(config.candidate_endpoints)

        logger.debug(
            "service_status_checked",
            extra={"local_model_endpoint": endpoint},
        )

        return ServiceStatus(
            local_model_available=endpoint is not None,
            local_model_endpoint=endpoint,
            candidate_endpoints=list(config.candidate_endpoints),
            remote_ai_url=self._remote_ai_url,
            strategy=STRATEGY_LABELS[config.primary_backend],
            fallback_enabled=config.fallback_enabled,
            confidence_threshold=config.confidence_threshold,
        )
