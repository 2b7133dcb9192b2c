"""Identify 애플리케이션 예외."""

from apps.identify.application.common.exceptions.auth import UnauthorizedError
from apps.identify.application.common.exceptions.backend import (
    BackendFailure,
    LowConfidence,
    MalformedResponse,
    NetworkFailure,
    ProtocolFailure,
)
from apps.identify.application.common.exceptions.base import ApplicationError
from apps.identify.application.common.exceptions.storage import HistoryStoreError

__all__ = [
    "ApplicationError",
    "BackendFailure",
    "HistoryStoreError",
    "LowConfidence",
    "MalformedResponse",
    "NetworkFailure",
    "ProtocolFailure",
    "UnauthorizedError",
]
