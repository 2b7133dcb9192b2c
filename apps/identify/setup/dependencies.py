"""Identify Dependencies - FastAPI Dependency Injection.

Resolver(IdentifyItemCommand)는 설정 스냅샷을 보유하므로 프로세스 단위 싱글톤.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from apps.identify.application.identify.commands import (
    IdentifyItemCommand,
    ToggleStrategyCommand,
)
from apps.identify.application.identify.ports import (
    GuidanceCatalogPort,
    PromptRepositoryPort,
)
from apps.identify.application.identify.queries import (
    GetCategoriesQuery,
    GetServiceStatusQuery,
)
from apps.identify.application.identify.services import ResultFactory
from apps.identify.application.stats.commands import RecordScanCommand
from apps.identify.application.stats.ports import ScanHistoryStorePort
from apps.identify.application.stats.queries import GetStatsQuery
from apps.identify.infrastructure.asset_loader import (
    FilePromptRepository,
    YamlGuidanceCatalog,
)
from apps.identify.infrastructure.backends import LocalModelBackend, RemoteAIBackend
from apps.identify.infrastructure.persistence_redis import RedisScanHistoryStore
from apps.identify.setup.config import Settings, get_settings

logger = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────────────────────────
# Infrastructure Dependencies
# ─────────────────────────────────────────────────────────────────────────────


@lru_cache
def get_guidance_catalog() -> GuidanceCatalogPort:
    """가이드 카탈로그 인스턴스 반환."""
    return YamlGuidanceCatalog(get_settings().assets_path)


@lru_cache
def get_prompt_repository() -> PromptRepositoryPort:
    """프롬프트 저장소 인스턴스 반환."""
    return FilePromptRepository(get_settings().assets_path)


@lru_cache
def get_result_factory() -> ResultFactory:
    """Result Factory 인스턴스 반환."""
    return ResultFactory(get_guidance_catalog())


@lru_cache
def get_local_model_backend() -> LocalModelBackend:
    """로컬 모델 백엔드 인스턴스 반환."""
    return LocalModelBackend(result_factory=get_result_factory())


@lru_cache
def get_remote_ai_backend() -> RemoteAIBackend:
    """원격 AI 백엔드 인스턴스 반환."""
    return RemoteAIBackend(
        prompt_repository=get_prompt_repository(),
        result_factory=get_result_factory(),
        url=get_settings().remote_ai_url,
    )


@lru_cache
def get_scan_history_store() -> ScanHistoryStorePort:
    """스캔 이력 저장소 인스턴스 반환."""
    return RedisScanHistoryStore(redis_url=get_settings().redis_cache_url)


# ─────────────────────────────────────────────────────────────────────────────
# Application Dependencies (Commands / Queries)
# ─────────────────────────────────────────────────────────────────────────────


@lru_cache
def get_identify_command() -> IdentifyItemCommand:
    """Resolver 인스턴스 반환 (싱글톤)."""
    return IdentifyItemCommand(
        backends=[get_local_model_backend(), get_remote_ai_backend()],
        result_factory=get_result_factory(),
        config=get_settings().resolver_config(),
    )


def get_toggle_strategy_command(
    identify_command: Annotated[IdentifyItemCommand, Depends(get_identify_command)],
) -> ToggleStrategyCommand:
    """Toggle Strategy Command 인스턴스 반환."""
    return ToggleStrategyCommand(identify_command)


def get_service_status_query(
    identify_command: Annotated[IdentifyItemCommand, Depends(get_identify_command)],
) -> GetServiceStatusQuery:
    """Service Status Query 인스턴스 반환."""
    return GetServiceStatusQuery(
        identify_command=identify_command,
        local_model_health=get_local_model_backend(),
        remote_ai_url=get_settings().remote_ai_url,
    )


def get_categories_query(
    catalog: Annotated[GuidanceCatalogPort, Depends(get_guidance_catalog)],
) -> GetCategoriesQuery:
    """Get Categories Query 인스턴스 반환."""
    return GetCategoriesQuery(catalog)


def get_record_scan_command(
    store: Annotated[ScanHistoryStorePort, Depends(get_scan_history_store)],
) -> RecordScanCommand:
    """Record Scan Command 인스턴스 반환."""
    settings = get_settings()
    return RecordScanCommand(
        store=store,
        history_limit=settings.history_limit,
        co2_per_recyclable_kg=settings.co2_per_recyclable_kg,
    )


def get_stats_query(
    store: Annotated[ScanHistoryStorePort, Depends(get_scan_history_store)],
) -> GetStatsQuery:
    """Get Stats Query 인스턴스 반환."""
    return GetStatsQuery(store=store, history_limit=get_settings().history_limit)


# ─────────────────────────────────────────────────────────────────────────────
# Lifecycle
# ─────────────────────────────────────────────────────────────────────────────


async def close_resources() -> None:
    """생성된 HTTP/Redis 클라이언트 종료 (lifespan shutdown)."""
    if get_local_model_backend.cache_info().currsize:
        await get_local_model_backend().close()
    if get_remote_ai_backend.cache_info().currsize:
        await get_remote_ai_backend().close()
    if get_scan_history_store.cache_info().currsize:
        await get_scan_history_store().close()
    logger.info("identify_resources_closed")


# ─────────────────────────────────────────────────────────────────────────────
# Type Aliases for Dependency Injection
# ─────────────────────────────────────────────────────────────────────────────


SettingsDep = Annotated[Settings, Depends(get_settings)]
IdentifyCommandDep = Annotated[IdentifyItemCommand, Depends(get_identify_command)]
ToggleStrategyCommandDep = Annotated[
    ToggleStrategyCommand, Depends(get_toggle_strategy_command)
]
ServiceStatusQueryDep = Annotated[GetServiceStatusQuery, Depends(get_service_status_query)]
GetCategoriesQueryDep = Annotated[GetCategoriesQuery, Depends(get_categories_query)]
RecordScanCommandDep = Annotated[RecordScanCommand, Depends(get_record_scan_command)]
GetStatsQueryDep = Annotated[GetStatsQuery, Depends(get_stats_query)]
