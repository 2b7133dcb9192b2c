"""Local Model Backend - IdentificationBackendPort 구현체.

로컬 네트워크 이미지 분류 모델:
- POST {base_url}/predict  body: {"file": "<base64>"}
- GET  {base_url}/health

후보 URL을 순서대로 하나씩 시도 (병렬 fan-out 없음).
후보별 실패(타임아웃, 네트워크 오류, non-2xx, 형식 오류, 낮은 confidence)는
다음 후보로 넘어가며, 마지막 후보의 실패가 이 백엔드의 최종 실패.
request_timeout_ms는 후보 1회 호출 전체(응답 body 수신 포함)의 deadline.
"""

from __future__ import annotations

import asyncio
import logging

import httpx
from pydantic import ValidationError

from apps.identify.application.common.exceptions import (
    BackendFailure,
    LowConfidence,
    MalformedResponse,
    NetworkFailure,
    ProtocolFailure,
)
from apps.identify.application.identify.ports import (
    HealthCheckPort,
    IdentificationBackendPort,
)
from apps.identify.application.identify.services import ResultFactory
from apps.identify.domain.enums import BackendKind, CaptureMode, ResultSource
from apps.identify.domain.value_objects import (
    IdentificationRequest,
    IdentificationResult,
    ImageCapture,
    ResolverConfig,
)
from apps.identify.infrastructure.backends.config import (
    BACKEND_LIMITS,
    DEFAULT_TIMEOUT,
    HEALTH_CHECK_TIMEOUT,
)
from apps.identify.infrastructure.backends.local_model.schemas import LocalPrediction

logger = logging.getLogger(__name__)

PREDICT_PATH = "/predict"
HEALTH_PATH = "/health"


class LocalModelBackend(IdentificationBackendPort, HealthCheckPort):
    """로컬 이미지 분류 모델 HTTP 클라이언트."""

    def __init__(self, result_factory: ResultFactory):
        """초기화.

        Args:
            result_factory: 응답 → canonical 결과 변환기
        """
        self._result_factory = result_factory
        self._client: httpx.AsyncClient | None = None

    @property
    def kind(self) -> BackendKind:
        return BackendKind.LOCAL_MODEL

    async def _get_client(self) -> httpx.AsyncClient:
        """HTTP 클라이언트 lazy 초기화 (커넥션 풀 공유)."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=DEFAULT_TIMEOUT,
                limits=BACKEND_LIMITS,
                headers={"Content-Type": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def supports(self, request: IdentificationRequest) -> bool:
        """일반 이미지 스캔만 지원 (바코드/텍스트 불가)."""
        return isinstance(request, ImageCapture) and request.mode == CaptureMode.ITEM

    async def query(
        self,
        request: IdentificationRequest,
        config: ResolverConfig,
    ) -> IdentificationResult:
        """후보 URL 순차 시도 후 결과 반환.

        Raises:
            BackendFailure: 모든 후보 실패 시 마지막 후보의 실패
                (NetworkFailure, ProtocolFailure, MalformedResponse, LowConfidence)
        """
        if not self.supports(request):
            raise MalformedResponse(self.kind.value, "unsupported request kind")

        client = await self._get_client()
        payload = {"file": request.payload}
        timeout = httpx.Timeout(config.request_timeout_seconds)
        total = len(config.candidate_endpoints)
        last_failure: BackendFailure | None = None

        for attempt, base_url in enumerate(config.candidate_endpoints, start=1):
            url = f"{base_url.rstrip('/')}{PREDICT_PATH}"
            logger.debug(
                "Local model request",
                extra={"url": url, "attempt": attempt, "total": total},
            )

            try:
                # 전체 호출 deadline (httpx timeout은 phase별로만 적용)
                response = await asyncio.wait_for(
                    client.post(url, json=payload, timeout=timeout),
                    timeout=config.request_timeout_seconds,
                )
            except (httpx.TimeoutException, asyncio.TimeoutError):
                last_failure = NetworkFailure(self.kind.value, f"timeout ({url})")
                logger.warning(
                    "Local model timeout",
                    extra={"url": url, "attempt": attempt, "timeout_ms": config.request_timeout_ms},
                )
                continue
            except (httpx.RequestError, httpx.InvalidURL) as e:
                last_failure = NetworkFailure(self.kind.value, f"{type(e).__name__} ({url})")
                logger.warning(
                    "Local model network error",
                    extra={"url": url, "attempt": attempt, "error": str(e)},
                )
                continue

            if not response.is_success:
                last_failure = ProtocolFailure(self.kind.value, response.status_code)
                logger.warning(
                    "Local model HTTP error",
                    extra={
                        "url": url,
                        "attempt": attempt,
                        "status_code": response.status_code,
                        "detail": response.text[:200],
                    },
                )
                continue

            try:
                return self._to_result(response, config)
            except (MalformedResponse, LowConfidence) as e:
                last_failure = e
                if attempt < total:
                    logger.info(
                        "Local model answer rejected, trying next candidate",
                        extra={"url": url, "attempt": attempt, "failure": e.kind},
                    )
                continue

        raise last_failure or NetworkFailure(self.kind.value, "no candidate endpoints")

    def _to_result(
        self,
        response: httpx.Response,
        config: ResolverConfig,
    ) -> IdentificationResult:
        """2xx 응답 검증 및 변환."""
        try:
            prediction = LocalPrediction.model_validate(response.json())
        except ValueError as e:
            # ValidationError도 ValueError 하위 타입
            reason = "invalid prediction" if isinstance(e, ValidationError) else "invalid JSON"
            logger.error(
                "Local model response parsing error",
                extra={"reason": reason, "error": str(e)[:300]},
            )
            raise MalformedResponse(self.kind.value, reason) from e

        if prediction.confidence < config.confidence_threshold:
            logger.info(
                "Local model confidence below threshold",
                extra={
                    "class_name": prediction.class_name,
                    "confidence": prediction.confidence,
                    "threshold": config.confidence_threshold,
                },
            )
            raise LowConfidence(
                self.kind.value,
                prediction.confidence,
                config.confidence_threshold,
            )

        return self._result_factory.build(
            item=prediction.class_name,
            category=prediction.category,
            recyclable=prediction.is_recyclable,
            source=ResultSource.LOCAL_MODEL,
        )

    async def is_available(self, endpoints: tuple[str, ...]) -> str | None:
        """health 엔드포인트에 200으로 응답하는 첫 base URL."""
        client = await self._get_client()
        for base_url in endpoints:
            url = f"{base_url.rstrip('/')}{HEALTH_PATH}"
            try:
                response = await client.get(url, timeout=HEALTH_CHECK_TIMEOUT)
            except (httpx.RequestError, httpx.InvalidURL) as e:
                logger.debug(
                    "Local model health check failed",
                    extra={"url": url, "error": str(e)},
                )
                continue
            if response.status_code == 200:
                return base_url
        return None
