"""Remote AI Backend."""

from apps.identify.infrastructure.backends.remote_ai.client import RemoteAIBackend

__all__ = ["RemoteAIBackend"]
