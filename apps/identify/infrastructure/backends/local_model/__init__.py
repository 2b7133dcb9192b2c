"""Local Model Backend."""

from apps.identify.infrastructure.backends.local_model.client import LocalModelBackend

__all__ = ["LocalModelBackend"]
