"""HTTP Controller 단위 테스트."""

from __future__ import annotations

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from apps.identify.application.common.exceptions import HistoryStoreError
from apps.identify.application.identify.queries import ServiceStatus
from apps.identify.application.stats.queries import StatsView
from apps.identify.domain.entities import RecyclingStats
from apps.identify.domain.enums import BackendKind, CaptureMode, MaterialCategory, ResultSource
from apps.identify.domain.value_objects import IdentificationResult, ImageCapture, TextQuery
from apps.identify.main import app
from apps.identify.setup.config import Settings, get_settings
from apps.identify.setup.dependencies import (
    get_identify_command,
    get_record_scan_command,
    get_service_status_query,
    get_stats_query,
    get_toggle_strategy_command,
)


@pytest.fixture
def aluminum_can() -> IdentificationResult:
    return IdentificationResult(
        item="Aluminum Can",
        category=MaterialCategory.METAL,
        recyclable=True,
        instructions="Rinse metal cans and containers.",
        alternatives=("Choose products with refillable options",),
        impact="Metal recycling is highly efficient.",
        source=ResultSource.LOCAL_MODEL,
    )


@pytest.fixture
def mock_identify_command(aluminum_can) -> MagicMock:
    command = MagicMock()
    command.execute = AsyncMock(return_value=aluminum_can)
    return command


@pytest.fixture
def mock_record_command() -> MagicMock:
    command = MagicMock()
    command.execute = AsyncMock(return_value=RecyclingStats(items_scanned=1))
    return command


@pytest.fixture
def client(mock_identify_command, mock_record_command):
    """TestClient (식별/기록 의존성 mock)."""
    app.dependency_overrides[get_identify_command] = lambda: mock_identify_command
    app.dependency_overrides[get_record_scan_command] = lambda: mock_record_command
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealthController:
    def test_health(self, client: TestClient):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"
        assert response.json()["service"] == "identify-api"

    def test_ping(self, client: TestClient):
        assert client.get("/ping").json() == {"message": "pong"}

    def test_metrics(self, client: TestClient):
        response = client.get("/metrics/status")
        assert response.status_code == 200
        assert "identify_backend_attempt_total" in response.text


class TestIdentifyController:
    """식별 엔드포인트 테스트."""

    def test_identify_image(self, client, mock_identify_command, mock_record_command):
        response = client.post(
            "/api/v1/identify/image",
            json={"image_base64": "data:image/jpeg;base64,aGVsbG8="},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["item"] == "Aluminum Can"
        assert data["category"] == "metal"
        assert data["recyclable"] is True
        assert data["alternatives"] == ["Choose products with refillable options"]
        assert data["source"] == "local_model"

        request = mock_identify_command.execute.await_args.args[0]
        assert isinstance(request, ImageCapture)
        assert request.mode == CaptureMode.ITEM
        # X-User-ID 없으면 기록하지 않음
        mock_record_command.execute.assert_not_awaited()

    def test_identify_barcode(self, client, mock_identify_command):
        response = client.post("/api/v1/identify/barcode", json={"image_base64": "aGVsbG8="})

        assert response.status_code == 200
        request = mock_identify_command.execute.await_args.args[0]
        assert request.mode == CaptureMode.BARCODE

    def test_search(self, client, mock_identify_command):
        response = client.post("/api/v1/identify/search", json={"query": "soda can"})

        assert response.status_code == 200
        request = mock_identify_command.execute.await_args.args[0]
        assert isinstance(request, TextQuery)
        assert request.text == "soda can"

    def test_empty_image_is_400(self, client, mock_identify_command):
        response = client.post("/api/v1/identify/image", json={"image_base64": ""})

        assert response.status_code == 400
        assert response.json()["code"] == "IMAGE_REQUIRED"
        mock_identify_command.execute.assert_not_awaited()

    def test_empty_query_is_400(self, client):
        response = client.post("/api/v1/identify/search", json={"query": "   "})

        assert response.status_code == 400
        assert response.json()["code"] == "QUERY_REQUIRED"

    def test_records_scan_with_user_header(self, client, mock_record_command, aluminum_can):
        response = client.post(
            "/api/v1/identify/image",
            json={"image_base64": "aGVsbG8="},
            headers={"X-User-ID": "user-1"},
        )

        assert response.status_code == 200
        mock_record_command.execute.assert_awaited_once_with("user-1", aluminum_can)

    def test_record_failure_does_not_fail_identification(self, client, mock_record_command):
        """이력 저장 실패해도 식별 결과는 200."""
        mock_record_command.execute.side_effect = HistoryStoreError("push_history", "down")

        response = client.post(
            "/api/v1/identify/search",
            json={"query": "soda can"},
            headers={"X-User-ID": "user-1"},
        )

        assert response.status_code == 200
        assert response.json()["item"] == "Aluminum Can"

    def test_degraded_result_is_200(self, client, mock_identify_command):
        mock_identify_command.execute.return_value = IdentificationResult(
            item="Unknown Item",
            category=MaterialCategory.MIXED,
            recyclable=False,
            instructions="Unable to identify this item.",
            alternatives=("Consider reusable alternatives",),
            impact="Proper waste disposal helps protect our environment.",
        )

        response = client.post("/api/v1/identify/image", json={"image_base64": "aGVsbG8="})

        assert response.status_code == 200
        assert response.json()["item"] == "Unknown Item"
        assert response.json()["source"] == "degraded"

    def test_categories(self, client):
        response = client.get("/api/v1/identify/categories")

        assert response.status_code == 200
        names = [c["name"] for c in response.json()]
        assert len(names) == 8
        assert "hazardous" in names

    def test_status(self, client):
        query = MagicMock()
        query.execute = AsyncMock(
            return_value=ServiceStatus(
                local_model_available=False,
                local_model_endpoint=None,
                candidate_endpoints=["http://localhost:8000"],
                remote_ai_url="https://toolkit.rork.com/text/llm/",
                strategy="LOCAL_FIRST",
                fallback_enabled=True,
                confidence_threshold=0.7,
            )
        )
        app.dependency_overrides[get_service_status_query] = lambda: query

        response = client.get("/api/v1/identify/status")

        assert response.status_code == 200
        assert response.json()["local_model_available"] is False
        assert response.json()["strategy"] == "LOCAL_FIRST"


class TestStrategyToggle:
    def test_hidden_when_debug_disabled(self, client):
        app.dependency_overrides[get_settings] = lambda: Settings(_env_file=None)

        response = client.post("/api/v1/identify/strategy/toggle")

        assert response.status_code == 404

    def test_toggle_when_debug_enabled(self, client):
        toggle = MagicMock()
        toggle.execute.return_value = BackendKind.REMOTE_AI
        app.dependency_overrides[get_settings] = lambda: Settings(
            _env_file=None, debug_endpoints_enabled=True
        )
        app.dependency_overrides[get_toggle_strategy_command] = lambda: toggle

        response = client.post("/api/v1/identify/strategy/toggle")

        assert response.status_code == 200
        assert response.json() == {"primary_backend": "remote_ai", "strategy": "REMOTE_FIRST"}


class TestStatsController:
    def test_requires_user_header(self, client):
        response = client.get("/api/v1/identify/stats")

        assert response.status_code == 401
        assert response.json()["code"] == "UNAUTHORIZED"

    def test_returns_stats_and_history(self, client, aluminum_can):
        query = MagicMock()
        query.execute = AsyncMock(
            return_value=StatsView(
                stats=RecyclingStats(
                    items_scanned=11,
                    co2_saved_kg=4.5,
                    streak=3,
                    level=2,
                    last_scan_date=date(2026, 3, 2),
                ),
                history=[aluminum_can],
            )
        )
        app.dependency_overrides[get_stats_query] = lambda: query

        response = client.get("/api/v1/identify/stats", headers={"X-User-ID": "user-1"})

        assert response.status_code == 200
        data = response.json()
        assert data["items_scanned"] == 11
        assert data["level"] == 2
        assert data["last_scan_date"] == "2026-03-02"
        assert data["history"][0]["item"] == "Aluminum Can"
        query.execute.assert_awaited_once_with("user-1")

    def test_store_unavailable_is_503(self, client):
        query = MagicMock()
        query.execute = AsyncMock(side_effect=HistoryStoreError("get_stats", "down"))
        app.dependency_overrides[get_stats_query] = lambda: query

        response = client.get("/api/v1/identify/stats", headers={"X-User-ID": "user-1"})

        assert response.status_code == 503
