"""식별 백엔드 실패 예외.

모든 BackendFailure는 Resolver 내부에서 "이 백엔드 실패" 신호로만 쓰이며
호출자에게 전파되지 않는다.

- NetworkFailure: 연결 거부, DNS 실패, 타임아웃
- ProtocolFailure: non-2xx HTTP status
- MalformedResponse: JSON 파싱 실패 / 필수 필드 누락
- LowConfidence: 로컬 모델 confidence gate (전송 오류 아님)
"""

from __future__ import annotations

from apps.identify.application.common.exceptions.base import ApplicationError


class BackendFailure(ApplicationError):
    """백엔드 실패 베이스."""

    kind = "backend_failure"

    def __init__(self, backend: str, reason: str) -> None:
        self.backend = backend
        self.reason = reason
        super().__init__(f"{backend}: {reason}")


class NetworkFailure(BackendFailure):
    """네트워크 오류 (타임아웃 포함)."""

    kind = "network"


class ProtocolFailure(BackendFailure):
    """non-2xx 응답."""

    kind = "protocol"

    def __init__(self, backend: str, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(backend, f"HTTP {status_code}")


class MalformedResponse(BackendFailure):
    """응답 형식 오류."""

    kind = "malformed"


class LowConfidence(BackendFailure):
    """confidence < threshold."""

    kind = "low_confidence"

    def __init__(self, backend: str, confidence: float, threshold: float) -> None:
        self.confidence = confidence
        self.threshold = threshold
        super().__init__(backend, f"confidence {confidence:.3f} below threshold {threshold:.3f}")
