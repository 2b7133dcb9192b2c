"""Redis persistence adapters."""

from apps.identify.infrastructure.persistence_redis.scan_history_redis import (
    RedisScanHistoryStore,
)

__all__ = ["RedisScanHistoryStore"]
