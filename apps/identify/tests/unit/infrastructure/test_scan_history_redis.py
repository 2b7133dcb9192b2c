"""RedisScanHistoryStore 단위 테스트."""

from __future__ import annotations

import json
from datetime import date
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import WatchError

from apps.identify.application.common.exceptions import HistoryStoreError
from apps.identify.domain.entities import RecyclingStats
from apps.identify.domain.enums import MaterialCategory, ResultSource
from apps.identify.domain.value_objects import IdentificationResult
from apps.identify.infrastructure.persistence_redis import RedisScanHistoryStore
from apps.identify.infrastructure.persistence_redis.scan_history_redis import MAX_UPDATE_ATTEMPTS


@pytest.fixture
def store() -> RedisScanHistoryStore:
    return RedisScanHistoryStore(redis_url="redis://localhost:6379/1")


@pytest.fixture
def mock_redis() -> MagicMock:
    client = MagicMock()
    client.get = AsyncMock()
    client.set = AsyncMock()
    client.lrange = AsyncMock()

    pipe = MagicMock()
    pipe.__aenter__.return_value = pipe
    pipe.watch = AsyncMock()
    pipe.get = AsyncMock()
    pipe.execute = AsyncMock(return_value=[1, True])
    client.pipeline.return_value = pipe
    return client


@pytest.fixture
def result() -> IdentificationResult:
    return IdentificationResult(
        item="Aluminum Can",
        category=MaterialCategory.METAL,
        recyclable=True,
        instructions="Rinse metal cans and containers.",
        alternatives=("Choose products with refillable options",),
        impact="Metal recycling is highly efficient.",
        source=ResultSource.LOCAL_MODEL,
    )


class TestRedisScanHistoryStore:
    """RedisScanHistoryStore 테스트."""

    @pytest.mark.asyncio
    async def test_get_stats_missing(self, store, mock_redis):
        mock_redis.get.return_value = None

        with patch.object(store, "_get_client", return_value=mock_redis):
            assert await store.get_stats("user-1") is None

        mock_redis.get.assert_awaited_once_with("identify:stats:user-1")

    @pytest.mark.asyncio
    async def test_update_stats_watches_and_writes_in_transaction(self, store, mock_redis):
        pipe = mock_redis.pipeline.return_value
        previous = RecyclingStats(items_scanned=3, co2_saved_kg=1.0, last_scan_date=date(2026, 3, 1))
        pipe.get.return_value = json.dumps(previous.to_dict())

        with patch.object(store, "_get_client", return_value=mock_redis):
            stats = await store.update_stats(
                "user-1", lambda s: s.record(recyclable=True, today=date(2026, 3, 2))
            )

        assert stats.items_scanned == 4
        assert stats.streak == 2
        pipe.watch.assert_awaited_once_with("identify:stats:user-1")
        pipe.multi.assert_called_once()
        key, raw = pipe.set.call_args.args
        assert key == "identify:stats:user-1"
        assert json.loads(raw)["last_scan_date"] == "2026-03-02"
        assert RecyclingStats.from_dict(json.loads(raw)) == stats

    @pytest.mark.asyncio
    async def test_update_stats_retries_on_concurrent_write(self, store, mock_redis):
        """Given: WATCH 후 다른 요청이 먼저 통계 갱신
        When: EXEC가 WatchError
        Then: 최신 값을 다시 읽어 mutate 재적용 (덮어쓰기 없음)
        """
        pipe = mock_redis.pipeline.return_value
        pipe.get.side_effect = [
            json.dumps(RecyclingStats(items_scanned=1).to_dict()),
            json.dumps(RecyclingStats(items_scanned=2).to_dict()),
        ]
        pipe.execute.side_effect = [WatchError("key changed"), [True]]

        with patch.object(store, "_get_client", return_value=mock_redis):
            stats = await store.update_stats(
                "user-1", lambda s: s.record(recyclable=False, today=date(2026, 3, 1))
            )

        assert stats.items_scanned == 3
        assert pipe.watch.await_count == 2
        assert json.loads(pipe.set.call_args.args[1])["items_scanned"] == 3

    @pytest.mark.asyncio
    async def test_update_stats_gives_up_after_repeated_conflicts(self, store, mock_redis):
        pipe = mock_redis.pipeline.return_value
        pipe.get.return_value = None
        pipe.execute.side_effect = WatchError("key changed")

        with patch.object(store, "_get_client", return_value=mock_redis):
            with pytest.raises(HistoryStoreError) as exc_info:
                await store.update_stats("user-1", lambda s: None)

        assert exc_info.value.operation == "update_stats"
        assert pipe.execute.await_count == MAX_UPDATE_ATTEMPTS

    @pytest.mark.asyncio
    async def test_corrupted_stats_raises_store_error(self, store, mock_redis):
        mock_redis.get.return_value = "{not json"

        with patch.object(store, "_get_client", return_value=mock_redis):
            with pytest.raises(HistoryStoreError) as exc_info:
                await store.get_stats("user-1")

        assert exc_info.value.operation == "decode_stats"

    @pytest.mark.asyncio
    async def test_corrupted_stats_blocks_update(self, store, mock_redis):
        """손상된 통계는 초기값으로 덮어쓰지 않음."""
        pipe = mock_redis.pipeline.return_value
        pipe.get.return_value = '["not", "an", "object"]'

        with patch.object(store, "_get_client", return_value=mock_redis):
            with pytest.raises(HistoryStoreError):
                await store.update_stats("user-1", lambda s: None)

        pipe.set.assert_not_called()

    @pytest.mark.asyncio
    async def test_push_history_trims_to_limit(self, store, mock_redis, result):
        with patch.object(store, "_get_client", return_value=mock_redis):
            await store.push_history("user-1", result, limit=50)

        pipe = mock_redis.pipeline.return_value
        mock_redis.pipeline.assert_called_once_with(transaction=True)
        key, raw = pipe.lpush.call_args.args
        assert key == "identify:history:user-1"
        assert json.loads(raw)["item"] == "Aluminum Can"
        pipe.ltrim.assert_called_once_with("identify:history:user-1", 0, 49)
        pipe.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_get_history(self, store, mock_redis, result):
        mock_redis.lrange.return_value = [json.dumps(result.to_dict())]

        with patch.object(store, "_get_client", return_value=mock_redis):
            history = await store.get_history("user-1", limit=10)

        assert history == [result]
        mock_redis.lrange.assert_awaited_once_with("identify:history:user-1", 0, 9)

    @pytest.mark.asyncio
    async def test_get_history_skips_corrupted_entries(self, store, mock_redis, result):
        mock_redis.lrange.return_value = ["{broken", json.dumps(result.to_dict()), "42"]

        with patch.object(store, "_get_client", return_value=mock_redis):
            history = await store.get_history("user-1", limit=10)

        assert history == [result]

    @pytest.mark.asyncio
    async def test_redis_error_wrapped(self, store, mock_redis):
        mock_redis.get.side_effect = RedisConnectionError("connection refused")

        with patch.object(store, "_get_client", return_value=mock_redis):
            with pytest.raises(HistoryStoreError) as exc_info:
                await store.get_stats("user-1")

        assert exc_info.value.operation == "get_stats"
