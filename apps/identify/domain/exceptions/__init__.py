"""Identify 도메인 예외."""

from apps.identify.domain.exceptions.base import DomainError
from apps.identify.domain.exceptions.identification import (
    EmptyImageError,
    EmptyQueryError,
    InvalidResolverConfigError,
)

__all__ = [
    "DomainError",
    "EmptyImageError",
    "EmptyQueryError",
    "InvalidResolverConfigError",
]
