"""Identify Ports (ABC).

Clean Architecture의 Port 정의.
Infrastructure 레이어에서 구현체를 제공.
"""

from apps.identify.application.identify.ports.guidance_catalog import (
    GuidanceCatalogPort,
)
from apps.identify.application.identify.ports.health_check import HealthCheckPort
from apps.identify.application.identify.ports.identification_backend import (
    IdentificationBackendPort,
)
from apps.identify.application.identify.ports.prompt_repository import (
    PromptRepositoryPort,
)

__all__ = [
    "GuidanceCatalogPort",
    "HealthCheckPort",
    "IdentificationBackendPort",
    "PromptRepositoryPort",
]
