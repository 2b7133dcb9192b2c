"""Identify Domain Enums."""

from apps.identify.domain.enums.backend_kind import BackendKind
from apps.identify.domain.enums.capture_mode import CaptureMode
from apps.identify.domain.enums.material_category import MaterialCategory
from apps.identify.domain.enums.result_source import ResultSource

__all__ = ["BackendKind", "CaptureMode", "MaterialCategory", "ResultSource"]
