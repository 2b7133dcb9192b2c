"""Identify Domain Value Objects."""

from apps.identify.domain.value_objects.identification_request import (
    IdentificationRequest,
    ImageCapture,
    TextQuery,
    strip_data_uri,
)
from apps.identify.domain.value_objects.identification_result import (
    IdentificationResult,
)
from apps.identify.domain.value_objects.resolver_config import ResolverConfig

__all__ = [
    "IdentificationRequest",
    "IdentificationResult",
    "ImageCapture",
    "ResolverConfig",
    "TextQuery",
    "strip_data_uri",
]
