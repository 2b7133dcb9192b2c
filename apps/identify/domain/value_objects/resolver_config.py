"""Resolver Config Value Object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from apps.identify.domain.enums import BackendKind
from apps.identify.domain.exceptions import InvalidResolverConfigError


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """식별 Resolver 설정.

    프로세스 시작 시 1회 생성되는 불변 객체.
    변경은 항상 객체 전체 교체 (부분 수정 금지).

    Attributes:
        primary_backend: 우선 백엔드
        fallback_enabled: 실패 시 반대편 백엔드 시도 여부
        confidence_threshold: 로컬 모델 최소 confidence (0.0 ~ 1.0)
        candidate_endpoints: 로컬 모델 base URL 후보 (순서대로 시도)
        request_timeout_ms: 요청별 타임아웃 (ms)
    """

    primary_backend: BackendKind = BackendKind.LOCAL_MODEL
    fallback_enabled: bool = True
    confidence_threshold: float = 0.7
    candidate_endpoints: tuple[str, ...] = ("http://localhost:8000",)
    request_timeout_ms: int = 30000

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence_threshold <= 1.0:
            raise InvalidResolverConfigError("confidence_threshold must be within [0, 1]")
        if self.request_timeout_ms <= 0:
            raise InvalidResolverConfigError("request_timeout_ms must be positive")
        if not self.candidate_endpoints:
            raise InvalidResolverConfigError("candidate_endpoints must not be empty")

    @property
    def backend_order(self) -> tuple[BackendKind, BackendKind]:
        """선호 순서 (primary → secondary).

        fallback_enabled는 요청을 처리할 수 있는 첫 백엔드가 실패했을 때
        다음 백엔드를 시도할지만 결정 (Resolver.plan 참고).
        """
        return (self.primary_backend, self.primary_backend.other)

    @property
    def request_timeout_seconds(self) -> float:
        """httpx 타임아웃 (초)."""
        return self.request_timeout_ms / 1000

    def with_swapped_priority(self) -> ResolverConfig:
        """primary/secondary를 바꾼 새 설정."""
        return replace(self, primary_backend=self.primary_backend.other)
