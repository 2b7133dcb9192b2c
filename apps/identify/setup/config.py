"""Identify Service Configuration.

외부화 원칙:
- 자주 바뀌는 정책(백엔드 우선순위, threshold, 후보 URL) → env/ConfigMap
- 내부 서비스 주소 → env (로컬은 localhost, prod는 k8s DNS)
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from apps.identify.domain.enums import BackendKind
from apps.identify.domain.value_objects import ResolverConfig

DEFAULT_CORS_ORIGINS = "http://localhost:8081,http://localhost:19006"
DEFAULT_LOCAL_MODEL_URLS = "http://localhost:8000"


class Settings(BaseSettings):
    """Identify Service 설정.

    운영 환경에서는 반드시 env로 주입할 것.
    """

    # === Service Identity ===
    service_name: str = Field("identify-api", description="Service name")
    service_version: str = Field("1.0.0", description="Service version")
    environment: str = Field("dev", description="Environment (local, dev, staging, prod)")

    # === Resolver 정책 ===
    primary_backend: BackendKind = Field(
        BackendKind.LOCAL_MODEL,
        description="우선 백엔드 (local_model, remote_ai)",
    )
    fallback_enabled: bool = Field(True, description="primary 실패 시 반대편 백엔드 시도")
    confidence_threshold: float = Field(
        0.7,
        ge=0.0,
        le=1.0,
        description="로컬 모델 최소 confidence",
    )
    request_timeout_ms: int = Field(30000, ge=1, description="백엔드 요청 타임아웃 (ms)")

    # === Local Model (콤마 구분, 순서대로 시도) ===
    local_model_urls_str: str = Field(
        DEFAULT_LOCAL_MODEL_URLS,
        description="로컬 모델 base URL 후보 (콤마 구분). prod에서는 단일 endpoint 권장.",
    )

    @property
    def local_model_urls(self) -> tuple[str, ...]:
        """로컬 모델 후보 URL 파싱."""
        return tuple(u.strip() for u in self.local_model_urls_str.split(",") if u.strip())

    # === Remote AI ===
    remote_ai_url: str = Field(
        "https://toolkit.rork.com/text/llm/",
        description="원격 생성형 AI completion 엔드포인트",
    )

    # === Redis ===
    redis_cache_url: str = Field(
        "redis://localhost:6379/1",
        description="Redis Cache URL (스캔 이력/통계). prod에서는 env 필수.",
    )

    # === Stats ===
    history_limit: int = Field(50, ge=1, le=500, description="보관할 최근 스캔 수")
    co2_per_recyclable_kg: float = Field(
        0.5,
        ge=0.0,
        description="재활용 품목 1건당 CO₂ 절감 추정치 (kg)",
    )

    # === Debug ===
    debug_endpoints_enabled: bool = Field(
        False,
        description="전략 전환 등 debug 엔드포인트 노출 (dev only)",
    )

    # === CORS (env 외부화) ===
    cors_origins_str: str = Field(
        DEFAULT_CORS_ORIGINS,
        description="Allowed CORS origins (콤마 구분)",
    )

    @property
    def cors_origins(self) -> list[str]:
        """CORS origins 파싱."""
        return [o.strip() for o in self.cors_origins_str.split(",") if o.strip()]

    # === Logging ===
    log_level: str = Field("INFO", description="Log level")
    log_format: str = Field("json", description="Log format (json, text)")

    model_config = SettingsConfigDict(
        env_prefix="IDENTIFY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Resources ===
    @property
    def assets_path(self) -> str:
        """정적 에셋 경로 (prompts, data)."""
        return str(Path(__file__).parent.parent / "infrastructure" / "assets")

    def resolver_config(self) -> ResolverConfig:
        """불변 ResolverConfig 생성.

        Raises:
            InvalidResolverConfigError: 후보 URL 없음 등
        """
        return ResolverConfig(
            primary_backend=self.primary_backend,
            fallback_enabled=self.fallback_enabled,
            confidence_threshold=self.confidence_threshold,
            candidate_endpoints=self.local_model_urls,
            request_timeout_ms=self.request_timeout_ms,
        )


@lru_cache
def get_settings() -> Settings:
    """캐시된 Settings 인스턴스 반환."""
    return Settings()
