"""Scan History Redis Adapter - 스캔 이력/통계 저장.

Key 패턴:
- 통계: identify:stats:{user_id} (JSON string, WATCH/MULTI 낙관적 갱신)
- 이력: identify:history:{user_id} (list, 최신순, LPUSH + LTRIM)
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from redis.exceptions import RedisError, WatchError

from apps.identify.application.common.exceptions import HistoryStoreError
from apps.identify.application.stats.ports import ScanHistoryStorePort
from apps.identify.domain.entities import RecyclingStats
from apps.identify.domain.value_objects import IdentificationResult

if TYPE_CHECKING:
    import redis.asyncio as aioredis

logger = logging.getLogger(__name__)

STATS_KEY = "identify:stats:{user_id}"
HISTORY_KEY = "identify:history:{user_id}"

# 동시 갱신 충돌 시 재시도 횟수
MAX_UPDATE_ATTEMPTS = 5


class RedisScanHistoryStore(ScanHistoryStorePort):
    """Redis 기반 스캔 이력 저장소."""

    def __init__(self, redis_url: str):
        """초기화.

        Args:
            redis_url: Cache Redis URL
        """
        self._redis_url = redis_url
        self._client: "aioredis.Redis | None" = None

    async def _get_client(self) -> "aioredis.Redis":
        """비동기 Redis 클라이언트 lazy 초기화."""
        if self._client is None:
            import redis.asyncio as aioredis

            self._client = aioredis.from_url(
                self._redis_url,
                decode_responses=True,
                socket_timeout=5.0,
                socket_connect_timeout=5.0,
                retry_on_timeout=True,
                health_check_interval=30,
                max_connections=50,
            )
            logger.info("scan_history_redis_initialized", extra={"url": self._redis_url})
        return self._client

    async def close(self) -> None:
        """클라이언트 종료."""
        if self._client is not None:
            await self._client.aclose()
            logger.info("scan_history_redis_closed")
            self._client = None

    @staticmethod
    def _decode_stats(user_id: str, raw: str | None) -> RecyclingStats | None:
        if not raw:
            return None
        try:
            return RecyclingStats.from_dict(json.loads(raw))
        except (ValueError, TypeError, AttributeError) as e:
            logger.error(
                "scan_stats_corrupted",
                extra={"user_id": user_id, "error": str(e)[:200]},
            )
            raise HistoryStoreError("decode_stats", "corrupted stats entry") from e

    async def get_stats(self, user_id: str) -> RecyclingStats | None:
        try:
            client = await self._get_client()
            raw = await client.get(STATS_KEY.format(user_id=user_id))
        except RedisError as e:
            logger.warning(
                "scan_stats_get_failed",
                extra={"user_id": user_id, "error": str(e)},
            )
            raise HistoryStoreError("get_stats", str(e)) from e

        return self._decode_stats(user_id, raw)

    async def update_stats(
        self,
        user_id: str,
        mutate: Callable[[RecyclingStats], None],
    ) -> RecyclingStats:
        """WATCH → GET → mutate → MULTI/SET/EXEC.

        그 사이 다른 요청이 키를 바꾸면 EXEC가 WatchError로 실패.
        이 경우 최신 값을 다시 읽어 mutate 재적용.
        """
        key = STATS_KEY.format(user_id=user_id)
        try:
            client = await self._get_client()
            async with client.pipeline(transaction=True) as pipe:
                for attempt in range(1, MAX_UPDATE_ATTEMPTS + 1):
                    try:
                        await pipe.watch(key)
                        stats = self._decode_stats(user_id, await pipe.get(key)) or RecyclingStats()
                        mutate(stats)
                        pipe.multi()
                        pipe.set(key, json.dumps(stats.to_dict()))
                        await pipe.execute()
                        return stats
                    except WatchError:
                        logger.debug(
                            "scan_stats_update_conflict",
                            extra={"user_id": user_id, "attempt": attempt},
                        )
        except RedisError as e:
            logger.warning(
                "scan_stats_update_failed",
                extra={"user_id": user_id, "error": str(e)},
            )
            raise HistoryStoreError("update_stats", str(e)) from e

        logger.warning(
            "scan_stats_update_conflict_exhausted",
            extra={"user_id": user_id, "attempts": MAX_UPDATE_ATTEMPTS},
        )
        raise HistoryStoreError("update_stats", "too many concurrent updates")

    async def push_history(
        self,
        user_id: str,
        result: IdentificationResult,
        limit: int,
    ) -> None:
        key = HISTORY_KEY.format(user_id=user_id)
        try:
            client = await self._get_client()
            async with client.pipeline(transaction=True) as pipe:
                pipe.lpush(key, json.dumps(result.to_dict(), ensure_ascii=False))
                pipe.ltrim(key, 0, limit - 1)
                await pipe.execute()
        except RedisError as e:
            logger.warning(
                "scan_history_push_failed",
                extra={"user_id": user_id, "error": str(e)},
            )
            raise HistoryStoreError("push_history", str(e)) from e

    async def get_history(self, user_id: str, limit: int) -> list[IdentificationResult]:
        """최근 이력 조회 (손상된 항목은 건너뜀)."""
        try:
            client = await self._get_client()
            items = await client.lrange(HISTORY_KEY.format(user_id=user_id), 0, limit - 1)
        except RedisError as e:
            logger.warning(
                "scan_history_get_failed",
                extra={"user_id": user_id, "error": str(e)},
            )
            raise HistoryStoreError("get_history", str(e)) from e

        history = []
        for item in items:
            try:
                history.append(IdentificationResult.from_dict(json.loads(item)))
            except (ValueError, TypeError, AttributeError) as e:
                logger.warning(
                    "scan_history_entry_skipped",
                    extra={"user_id": user_id, "error": str(e)[:200]},
                )
        return history
