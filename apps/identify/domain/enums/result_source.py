"""Result Source Enum."""

from enum import Enum


class ResultSource(str, Enum):
    """식별 결과 출처 (로깅/메트릭용, canonical 필드 아님)."""

    LOCAL_MODEL = "local_model"
    REMOTE_AI = "remote_ai"
    DEGRADED = "degraded"
