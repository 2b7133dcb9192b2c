"""File Prompt Repository - PromptRepositoryPort 구현체.

파일 시스템 기반 프롬프트 로딩.
"""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path

from apps.identify.application.identify.ports import PromptRepositoryPort

logger = logging.getLogger(__name__)


class FilePromptRepository(PromptRepositoryPort):
    """파일 시스템 기반 프롬프트 리포지토리."""

    def __init__(self, assets_path: str | Path):
        """초기화.

        Args:
            assets_path: 정적 에셋 경로 (prompts/ 포함)
        """
        self._prompts_dir = Path(assets_path) / "prompts"
        self._cache: dict[str, str] = {}
        logger.info(
            "FilePromptRepository initialized (path=%s)",
            self._prompts_dir,
        )

    def get_prompt(self, name: str) -> str:
        """프롬프트 템플릿 로딩.

        Args:
            name: 프롬프트 이름 (확장자 제외)

        Returns:
            프롬프트 문자열
        """
        if name in self._cache:
            return self._cache[name]

        filepath = self._prompts_dir / f"{name}.txt"
        if not filepath.exists():
            raise FileNotFoundError(f"Prompt not found: {filepath}")

        with filepath.open("r", encoding="utf-8") as f:
            content = f.read().strip()

        # SHA1 해시로 로딩 검증
        digest = hashlib.sha1(content.encode("utf-8")).hexdigest()
        logger.info(
            "Prompt loaded (path=%s, len=%d, sha1=%s)",
            filepath,
            len(content),
            digest,
        )

        self._cache[name] = content
        return content
