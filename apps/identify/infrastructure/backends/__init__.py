"""Identification Backend Adapters.

- local_model/: 로컬 이미지 분류 모델 (multi-host, confidence gate)
- remote_ai/: 원격 생성형 AI completion
"""

from apps.identify.infrastructure.backends.local_model import LocalModelBackend
from apps.identify.infrastructure.backends.remote_ai import RemoteAIBackend

__all__ = ["LocalModelBackend", "RemoteAIBackend"]
