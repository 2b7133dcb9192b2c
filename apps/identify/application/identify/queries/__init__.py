"""Identify Queries."""

from apps.identify.application.identify.queries.get_categories import (
    CategoryInfo,
    GetCategoriesQuery,
)
from apps.identify.application.identify.queries.get_service_status import (
    GetServiceStatusQuery,
    ServiceStatus,
)

__all__ = [
    "CategoryInfo",
    "GetCategoriesQuery",
    "GetServiceStatusQuery",
    "ServiceStatus",
]
