"""Identification Backend Port - 식별 백엔드 추상화."""

from __future__ import annotations

from abc import ABC, abstractmethod

from apps.identify.domain.enums import BackendKind
from apps.identify.domain.value_objects import (
    IdentificationRequest,
    IdentificationResult,
    ResolverConfig,
)


class IdentificationBackendPort(ABC):
    """식별 백엔드 포트 (strategy).

    Local Model, Remote AI 등 구현체를 순서 있는 리스트로 주입.
    Resolver는 성공할 때까지 순서대로 시도.
    """

    @property
    @abstractmethod
    def kind(self) -> BackendKind:
        """백엔드 종류."""

    @abstractmethod
    def supports(self, request: IdentificationRequest) -> bool:
        """요청 종류 처리 가능 여부."""

    @abstractmethod
    async def query(
        self,
        request: IdentificationRequest,
        config: ResolverConfig,
    ) -> IdentificationResult:
        """요청 식별.

        Args:
            request: 식별 요청
            config: 호출 시점 Resolver 설정 (요청 중 불변)

        Returns:
            식별 결과

        Raises:
            BackendFailure: 네트워크/프로토콜/응답 형식/confidence 실패
        """

    async def close(self) -> None:
        """리소스 정리 (HTTP 커넥션 풀 등)."""
        return None
