"""Identify application services."""

from apps.identify.application.identify.services.result_factory import ResultFactory

__all__ = ["ResultFactory"]
