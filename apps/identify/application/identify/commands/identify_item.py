"""Identify Item Command - 식별 Resolver.

백엔드 strategy 리스트를 순서대로 시도:
1. ResolverConfig.backend_order로 primary → secondary 순서 결정
2. 요청을 지원하지 않는 백엔드는 건너뜀 (로컬 모델은 일반 이미지 전용)
3. 첫 성공 결과 반환, BackendFailure는 fallback 활성 시에만 다음 백엔드로
4. 모두 실패하면 요청 종류별 degraded result

execute()는 total: 백엔드 실패를 호출자에게 전파하지 않는다.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence

from apps.identify.application.common.exceptions import BackendFailure
from apps.identify.application.identify.ports import IdentificationBackendPort
from apps.identify.application.identify.services import ResultFactory
from apps.identify.domain.enums import BackendKind
from apps.identify.domain.value_objects import (
    IdentificationRequest,
    IdentificationResult,
    ResolverConfig,
    TextQuery,
)
from apps.identify.metrics import (
    BACKEND_ATTEMPT_COUNTER,
    BACKEND_ATTEMPT_LATENCY,
    RESOLVED_RESULT_COUNTER,
)

logger = logging.getLogger(__name__)


def request_kind(request: IdentificationRequest) -> str:
    """로깅/메트릭용 요청 종류 라벨."""
    if isinstance(request, TextQuery):
        return "search"
    return request.mode.value


class IdentifyItemCommand:
    """품목 식별 Command (Resolver).

    설정은 호출 시작 시점에 한 번만 읽고 전체 호출 동안 그 스냅샷을 사용.
    replace_config()는 참조 교체만 하므로 진행 중인 요청에 영향 없음.
    """

    def __init__(
        self,
        backends: Sequence[IdentificationBackendPort],
        result_factory: ResultFactory,
        config: ResolverConfig,
    ):
        """초기화.

        Args:
            backends: 식별 백엔드 목록 (kind별 1개)
            result_factory: 결과 생성기 (degraded result 포함)
            config: 초기 Resolver 설정
        """
        self._backends: dict[BackendKind, IdentificationBackendPort] = {
            backend.kind: backend for backend in backends
        }
        self._result_factory = result_factory
        self._config = config

    @property
    def config(self) -> ResolverConfig:
        """현재 설정."""
        return self._config

    def replace_config(self, config: ResolverConfig) -> ResolverConfig:
        """설정 전체 교체.

        Returns:
            이전 설정
        """
        previous, self._config = self._config, config
        logger.info(
            "resolver_config_replaced",
            extra={
                "primary_backend": config.primary_backend.value,
                "fallback_enabled": config.fallback_enabled,
            },
        )
        return previous

    def plan(
        self,
        request: IdentificationRequest,
        config: ResolverConfig,
    ) -> list[IdentificationBackendPort]:
        """요청에 대해 시도할 백엔드 순서.

        요청을 지원하지 않는 백엔드는 fallback 설정과 무관하게 건너뛴다.
        (바코드/텍스트는 로컬 우선 + fallback 비활성이어도 원격 AI로 간다.)
        fallback_enabled=False면 지원 가능한 첫 백엔드 하나만 시도.
        """
        plan = []
        for kind in config.backend_order:
            backend = self._backends.get(kind)
            if backend is None or not backend.supports(request):
                continue
            plan.append(backend)
            if not config.fallback_enabled:
                break
        return plan

    async def execute(self, request: IdentificationRequest) -> IdentificationResult:
        """식별 실행.

        Args:
            request: 식별 요청

        Returns:
            첫 성공 백엔드 결과 또는 degraded result
        """
        config = self._config
        kind = request_kind(request)

        for backend in self.plan(request, config):
            start = time.perf_counter()
            try:
                result = await backend.query(request, config)
            except BackendFailure as e:
                elapsed = time.perf_counter() - start
                BACKEND_ATTEMPT_LATENCY.labels(backend=backend.kind.value).observe(elapsed)
                BACKEND_ATTEMPT_COUNTER.labels(backend=backend.kind.value, outcome=e.kind).inc()
                logger.warning(
                    "identify_backend_failed",
                    extra={
                        "backend": backend.kind.value,
                        "request_kind": kind,
                        "failure": e.kind,
                        "reason": e.reason,
                        "elapsed_ms": elapsed * 1000,
                    },
                )
                continue

            elapsed = time.perf_counter() - start
            BACKEND_ATTEMPT_LATENCY.labels(backend=backend.kind.value).observe(elapsed)
            BACKEND_ATTEMPT_COUNTER.labels(backend=backend.kind.value, outcome="success").inc()
            RESOLVED_RESULT_COUNTER.labels(request_kind=kind, source=result.source.value).inc()
            logger.info(
                "identify_resolved",
                extra={
                    "backend": backend.kind.value,
                    "request_kind": kind,
                    "item": result.item,
                    "category": result.category.value,
                    "recyclable": result.recyclable,
                    "elapsed_ms": elapsed * 1000,
                },
            )
            return result

        result = self._result_factory.degraded(request)
        RESOLVED_RESULT_COUNTER.labels(request_kind=kind, source=result.source.value).inc()
        logger.warning(
            "identify_degraded",
            extra={
                "request_kind": kind,
                "primary_backend": config.primary_backend.value,
                "fallback_enabled": config.fallback_enabled,
            },
        )
        return result
