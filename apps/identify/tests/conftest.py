"""Pytest configuration for identify tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# 저장소 루트를 path에 추가 (apps.identify 임포트)
repo_root = Path(__file__).parent.parent.parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from apps.identify.application.identify.services import ResultFactory  # noqa: E402
from apps.identify.infrastructure.asset_loader import (  # noqa: E402
    FilePromptRepository,
    YamlGuidanceCatalog,
)

ASSETS_PATH = Path(__file__).parent.parent / "infrastructure" / "assets"


@pytest.fixture
def anyio_backend():
    """Use asyncio backend for anyio."""
    return "asyncio"


@pytest.fixture(scope="session")
def assets_path() -> Path:
    """정적 에셋 경로."""
    return ASSETS_PATH


@pytest.fixture(scope="session")
def catalog(assets_path: Path) -> YamlGuidanceCatalog:
    """실제 YAML 가이드 카탈로그."""
    return YamlGuidanceCatalog(assets_path)


@pytest.fixture(scope="session")
def prompt_repository(assets_path: Path) -> FilePromptRepository:
    """실제 프롬프트 저장소."""
    return FilePromptRepository(assets_path)


@pytest.fixture
def result_factory(catalog: YamlGuidanceCatalog) -> ResultFactory:
    """카탈로그 기반 Result Factory."""
    return ResultFactory(catalog)
