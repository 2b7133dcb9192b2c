"""Toggle Strategy Command - 백엔드 우선순위 전환 (debug)."""

from __future__ import annotations

import logging

from apps.identify.application.identify.commands.identify_item import (
    IdentifyItemCommand,
)
from apps.identify.domain.enums import BackendKind

logger = logging.getLogger(__name__)


class ToggleStrategyCommand:
    """primary/secondary 백엔드 교체.

    설정 객체를 통째로 교체하므로 진행 중인 요청은 이전 설정으로 끝난다.
    """

    def __init__(self, identify_command: IdentifyItemCommand):
        self._identify = identify_command

    def execute(self) -> BackendKind:
        """전환 실행.

        Returns:
            새 primary 백엔드
        """
        swapped = self._identify.config.with_swapped_priority()
        self._identify.replace_config(swapped)
        logger.info(
            "resolver_strategy_toggled",
            extra={"primary_backend": swapped.primary_backend.value},
        )
        return swapped.primary_backend
