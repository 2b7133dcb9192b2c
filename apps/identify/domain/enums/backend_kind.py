"""Backend Kind Enum.

식별 백엔드 종류. 우선순위/폴백 정책은 ResolverConfig가 결정.
"""

from enum import Enum


class BackendKind(str, Enum):
    """식별 백엔드.

    - LOCAL_MODEL: 로컬 네트워크 이미지 분류 모델 (/predict)
    - REMOTE_AI: 원격 생성형 AI completion 엔드포인트
    """

    LOCAL_MODEL = "local_model"
    REMOTE_AI = "remote_ai"

    @property
    def other(self) -> "BackendKind":
        """반대편 백엔드."""
        if self is BackendKind.LOCAL_MODEL:
            return BackendKind.REMOTE_AI
        return BackendKind.LOCAL_MODEL
