"""Remote AI Backend - IdentificationBackendPort 구현체.

단일 고정 엔드포인트 (호스트 재시도 없음):
- POST {url}  body: {"messages": [{role, content}, ...]}
- 200 응답: {"completion": "<JSON 문자열>"}

요청 종류별 시스템 프롬프트:
- 일반 이미지: image_identification
- 바코드 이미지: barcode_identification
- 텍스트 검색: text_search
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from apps.identify.application.common.exceptions import (
    MalformedResponse,
    NetworkFailure,
    ProtocolFailure,
)
from apps.identify.application.identify.ports import (
    IdentificationBackendPort,
    PromptRepositoryPort,
)
from apps.identify.application.identify.services import ResultFactory
from apps.identify.domain.enums import BackendKind, CaptureMode, ResultSource
from apps.identify.domain.value_objects import (
    IdentificationRequest,
    IdentificationResult,
    ResolverConfig,
    TextQuery,
)
from apps.identify.infrastructure.backends.config import BACKEND_LIMITS, DEFAULT_TIMEOUT
from apps.identify.infrastructure.backends.remote_ai.schemas import (
    CompletionEnvelope,
    GenerativeAnswer,
)

logger = logging.getLogger(__name__)

DEFAULT_REMOTE_AI_URL = "https://toolkit.rork.com/text/llm/"

IMAGE_PROMPT = "image_identification"
BARCODE_PROMPT = "barcode_identification"
SEARCH_PROMPT = "text_search"

IMAGE_USER_TEXT = "Identify this item and tell me if it's recyclable."
BARCODE_USER_TEXT = "Scan this barcode and identify the product's recycling information."
SEARCH_USER_TEMPLATE = "What are the recycling guidelines for: {query}"


class RemoteAIBackend(IdentificationBackendPort):
    """원격 생성형 AI HTTP 클라이언트."""

    def __init__(
        self,
        prompt_repository: PromptRepositoryPort,
        result_factory: ResultFactory,
        url: str = DEFAULT_REMOTE_AI_URL,
    ):
        """초기화.

        Args:
            prompt_repository: 시스템 프롬프트 로더
            result_factory: 응답 → canonical 결과 변환기
            url: completion 엔드포인트
        """
        self._prompts = prompt_repository
        self._result_factory = result_factory
        self._url = url
        self._client: httpx.AsyncClient | None = None

    @property
    def kind(self) -> BackendKind:
        return BackendKind.REMOTE_AI

    @property
    def url(self) -> str:
        return self._url

    async def _get_client(self) -> httpx.AsyncClient:
        """HTTP 클라이언트 lazy 초기화."""
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
        """이미지(일반/바코드) + 텍스트 모두 지원."""
        return True

    def build_messages(self, request: IdentificationRequest) -> list[dict[str, Any]]:
        """요청 종류별 messages 구성.

        Args:
            request: 식별 요청

        Returns:
            [system, user] 메시지 목록
        """
        if isinstance(request, TextQuery):
            return [
                {"role": "system", "content": self._prompts.get_prompt(SEARCH_PROMPT)},
                {
                    "role": "user",
                    "content": SEARCH_USER_TEMPLATE.format(query=request.text.strip()),
                },
            ]

        if request.mode == CaptureMode.BARCODE:
            prompt_name, user_text = BARCODE_PROMPT, BARCODE_USER_TEXT
        else:
            prompt_name, user_text = IMAGE_PROMPT, IMAGE_USER_TEXT

        return [
            {"role": "system", "content": self._prompts.get_prompt(prompt_name)},
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": user_text},
                    {"type": "image", "image": request.image_base64},
                ],
            },
        ]

    async def query(
        self,
        request: IdentificationRequest,
        config: ResolverConfig,
    ) -> IdentificationResult:
        """completion 요청 후 결과 반환.

        Raises:
            NetworkFailure: 타임아웃/연결 오류
            ProtocolFailure: non-2xx
            MalformedResponse: completion 누락, JSON 파싱 실패, 필수 필드 누락
        """
        client = await self._get_client()
        body = {"messages": self.build_messages(request)}

        logger.debug("Remote AI request", extra={"url": self._url})

        try:
            # 전체 호출 deadline (httpx timeout은 phase별로만 적용)
            response = await asyncio.wait_for(
                client.post(
                    self._url,
                    json=body,
                    timeout=httpx.Timeout(config.request_timeout_seconds),
                ),
                timeout=config.request_timeout_seconds,
            )
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            logger.warning(
                "Remote AI timeout",
                extra={"url": self._url, "timeout_ms": config.request_timeout_ms},
            )
            raise NetworkFailure(self.kind.value, "timeout") from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.warning(
                "Remote AI network error",
                extra={"url": self._url, "error": str(e)},
            )
            raise NetworkFailure(self.kind.value, type(e).__name__) from e

        if not response.is_success:
            logger.error(
                "Remote AI HTTP error",
                extra={"status_code": response.status_code, "detail": response.text[:200]},
            )
            raise ProtocolFailure(self.kind.value, response.status_code)

        answer = self._parse(response)
        return self._result_factory.build(
            item=answer.item,
            category=answer.category,
            recyclable=answer.recyclable,
            source=ResultSource.REMOTE_AI,
        )

    def _parse(self, response: httpx.Response) -> GenerativeAnswer:
        """응답 body → completion → 내부 JSON 검증."""
        try:
            envelope = CompletionEnvelope.model_validate(response.json())
        except ValueError as e:
            logger.error(
                "Remote AI response without completion",
                extra={"error": str(e)[:300]},
            )
            raise MalformedResponse(self.kind.value, "missing completion") from e

        try:
            return GenerativeAnswer.model_validate_json(envelope.completion)
        except ValidationError as e:
            logger.error(
                "Remote AI completion parsing error",
                extra={"completion": envelope.completion[:300], "error": str(e)[:300]},
            )
            raise MalformedResponse(self.kind.value, "invalid completion") from e
