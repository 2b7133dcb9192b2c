"""Identify DTOs."""

from apps.identify.application.identify.dto.guidance import (
    CategoryGuidance,
    FallbackGuidance,
    FallbackKind,
)

__all__ = ["CategoryGuidance", "FallbackGuidance", "FallbackKind"]
