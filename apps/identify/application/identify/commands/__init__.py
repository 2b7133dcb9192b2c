"""Identify Commands."""

from apps.identify.application.identify.commands.identify_item import (
    IdentifyItemCommand,
    request_kind,
)
from apps.identify.application.identify.commands.toggle_strategy import (
    ToggleStrategyCommand,
)

__all__ = ["IdentifyItemCommand", "ToggleStrategyCommand", "request_kind"]
