"""HTTP Controllers."""

from apps.identify.presentation.http.controllers.health import router as health_router
from apps.identify.presentation.http.controllers.identify import router as identify_router
from apps.identify.presentation.http.controllers.stats import router as stats_router

__all__ = ["health_router", "identify_router", "stats_router"]
