"""IdentifyItemCommand (Resolver) 테스트.

백엔드는 Port 구현 Fake로 대체.
"""

from __future__ import annotations

import pytest

from apps.identify.application.common.exceptions import (
    BackendFailure,
    LowConfidence,
    MalformedResponse,
    NetworkFailure,
    ProtocolFailure,
)
from apps.identify.application.identify.commands import (
    IdentifyItemCommand,
    ToggleStrategyCommand,
    request_kind,
)
from apps.identify.application.identify.ports import IdentificationBackendPort
from apps.identify.domain.enums import (
    BackendKind,
    CaptureMode,
    MaterialCategory,
    ResultSource,
)
from apps.identify.domain.value_objects import (
    IdentificationResult,
    ImageCapture,
    ResolverConfig,
    TextQuery,
)


class FakeBackend(IdentificationBackendPort):
    """고정 결과/실패를 반환하는 테스트용 백엔드."""

    def __init__(
        self,
        kind: BackendKind,
        result: IdentificationResult | None = None,
        failure: BackendFailure | None = None,
        image_only: bool = False,
    ):
        self._kind = kind
        self._result = result
        self._failure = failure
        self._image_only = image_only
        self.calls: list[tuple] = []

    @property
    def kind(self) -> BackendKind:
        return self._kind

    def supports(self, request) -> bool:
        if self._image_only:
            return isinstance(request, ImageCapture) and request.mode == CaptureMode.ITEM
        return True

    async def query(self, request, config) -> IdentificationResult:
        self.calls.append((request, config))
        if self._failure is not None:
            raise self._failure
        return self._result


def _image() -> ImageCapture:
    return ImageCapture(image_base64="data:image/jpeg;base64,aGVsbG8=")


@pytest.fixture
def aluminum_can(result_factory) -> IdentificationResult:
    return result_factory.build(
        item="Aluminum Can",
        category="metal",
        recyclable=True,
        source=ResultSource.LOCAL_MODEL,
    )


@pytest.fixture
def banana_peel(result_factory) -> IdentificationResult:
    return result_factory.build(
        item="Banana Peel",
        category="organic",
        recyclable=False,
        source=ResultSource.REMOTE_AI,
    )


class TestIdentifyItemCommand:
    """Resolver 순서 / 폴백 테스트."""

    @pytest.mark.asyncio
    async def test_primary_success_skips_secondary(self, result_factory, aluminum_can):
        """로컬 성공 시 원격은 호출되지 않음."""
        local = FakeBackend(BackendKind.LOCAL_MODEL, result=aluminum_can, image_only=True)
        remote = FakeBackend(BackendKind.REMOTE_AI, result=None)
        command = IdentifyItemCommand([local, remote], result_factory, ResolverConfig())

        result = await command.execute(_image())

        assert result.item == "Aluminum Can"
        assert result.category == MaterialCategory.METAL
        assert result.recyclable is True
        assert len(local.calls) == 1
        assert remote.calls == []

    @pytest.mark.asyncio
    async def test_low_confidence_falls_back_to_remote(self, result_factory, banana_peel):
        """Given: 로컬 confidence 미달
        When: fallback 활성
        Then: 원격 결과 반환 (로컬 결과 폐기)
        """
        local = FakeBackend(
            BackendKind.LOCAL_MODEL,
            failure=LowConfidence("local_model", 0.4, 0.7),
            image_only=True,
        )
        remote = FakeBackend(BackendKind.REMOTE_AI, result=banana_peel)
        command = IdentifyItemCommand([local, remote], result_factory, ResolverConfig())

        result = await command.execute(_image())

        assert result.item == "Banana Peel"
        assert result.source == ResultSource.REMOTE_AI
        assert len(remote.calls) == 1

    @pytest.mark.asyncio
    async def test_local_timeout_then_remote_banana_peel(
        self, result_factory, catalog, banana_peel
    ):
        local = FakeBackend(
            BackendKind.LOCAL_MODEL,
            failure=NetworkFailure("local_model", "timeout"),
            image_only=True,
        )
        remote = FakeBackend(BackendKind.REMOTE_AI, result=banana_peel)
        command = IdentifyItemCommand([local, remote], result_factory, ResolverConfig())

        result = await command.execute(_image())

        organic = catalog.get_guidance(MaterialCategory.ORGANIC)
        assert result.item == "Banana Peel"
        assert result.category == MaterialCategory.ORGANIC
        assert result.recyclable is False
        assert result.instructions == organic.non_recyclable_instructions
        assert result.impact == organic.impact

    @pytest.mark.asyncio
    async def test_both_fail_returns_unknown_item(self, result_factory):
        """모든 백엔드 실패 → Unknown Item (예외 전파 없음)."""
        local = FakeBackend(
            BackendKind.LOCAL_MODEL,
            failure=NetworkFailure("local_model", "timeout"),
            image_only=True,
        )
        remote = FakeBackend(BackendKind.REMOTE_AI, failure=ProtocolFailure("remote_ai", 502))
        command = IdentifyItemCommand([local, remote], result_factory, ResolverConfig())

        result = await command.execute(_image())

        assert result.item == "Unknown Item"
        assert result.category == MaterialCategory.MIXED
        assert result.recyclable is False
        assert result.is_degraded

    @pytest.mark.asyncio
    async def test_fallback_disabled_does_not_call_secondary(self, result_factory):
        local = FakeBackend(
            BackendKind.LOCAL_MODEL,
            failure=LowConfidence("local_model", 0.2, 0.7),
            image_only=True,
        )
        remote = FakeBackend(BackendKind.REMOTE_AI, result=None)
        command = IdentifyItemCommand(
            [local, remote],
            result_factory,
            ResolverConfig(fallback_enabled=False),
        )

        result = await command.execute(_image())

        assert result.is_degraded
        assert remote.calls == []

    @pytest.mark.asyncio
    async def test_remote_first_order(self, result_factory, banana_peel, aluminum_can):
        local = FakeBackend(BackendKind.LOCAL_MODEL, result=aluminum_can, image_only=True)
        remote = FakeBackend(BackendKind.REMOTE_AI, result=banana_peel)
        command = IdentifyItemCommand(
            [local, remote],
            result_factory,
            ResolverConfig(primary_backend=BackendKind.REMOTE_AI),
        )

        result = await command.execute(_image())

        assert result.item == "Banana Peel"
        assert local.calls == []

    @pytest.mark.asyncio
    async def test_search_skips_image_only_backend(self, result_factory):
        """텍스트 검색은 로컬 모델을 건너뛰고, 실패 시 검색어 유지 degraded."""
        local = FakeBackend(BackendKind.LOCAL_MODEL, result=None, image_only=True)
        remote = FakeBackend(
            BackendKind.REMOTE_AI,
            failure=MalformedResponse("remote_ai", "invalid completion"),
        )
        command = IdentifyItemCommand([local, remote], result_factory, ResolverConfig())

        result = await command.execute(TextQuery(text="pizza box"))

        assert local.calls == []
        assert result.item == "pizza box"
        assert result.category == MaterialCategory.MIXED
        assert result.recyclable is False
        assert result.alternatives[0] == "Contact local recycling center"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "request_obj",
        [
            ImageCapture(image_base64="aGVsbG8=", mode=CaptureMode.BARCODE),
            TextQuery(text="cereal box"),
        ],
    )
    async def test_remote_only_requests_ignore_fallback_flag(
        self, result_factory, request_obj
    ):
        """Given: 로컬 우선 + fallback 비활성
        When: 로컬이 처리할 수 없는 요청 (바코드 / 텍스트)
        Then: 원격 AI를 정확히 1회 호출
        """
        cereal_box = result_factory.build(
            item="Cereal Box",
            category="paper",
            recyclable=True,
            source=ResultSource.REMOTE_AI,
        )
        local = FakeBackend(BackendKind.LOCAL_MODEL, result=None, image_only=True)
        remote = FakeBackend(BackendKind.REMOTE_AI, result=cereal_box)
        command = IdentifyItemCommand(
            [local, remote],
            result_factory,
            ResolverConfig(fallback_enabled=False),
        )

        result = await command.execute(request_obj)

        assert result.item == "Cereal Box"
        assert result.source == ResultSource.REMOTE_AI
        assert local.calls == []
        assert len(remote.calls) == 1

    @pytest.mark.asyncio
    async def test_barcode_remote_failure_is_unknown_product(self, result_factory):
        local = FakeBackend(BackendKind.LOCAL_MODEL, result=None, image_only=True)
        remote = FakeBackend(BackendKind.REMOTE_AI, failure=NetworkFailure("remote_ai", "timeout"))
        command = IdentifyItemCommand([local, remote], result_factory, ResolverConfig())

        result = await command.execute(
            ImageCapture(image_base64="aGVsbG8=", mode=CaptureMode.BARCODE)
        )

        assert result.item == "Unknown Product"
        assert local.calls == []
        assert len(remote.calls) == 1

    @pytest.mark.asyncio
    async def test_config_snapshot_passed_to_backend(self, result_factory, aluminum_can):
        """호출 시작 시점의 설정이 백엔드에 전달됨."""
        local = FakeBackend(BackendKind.LOCAL_MODEL, result=aluminum_can, image_only=True)
        config = ResolverConfig(confidence_threshold=0.9)
        command = IdentifyItemCommand([local], result_factory, config)

        await command.execute(_image())

        assert local.calls[0][1] is config

    def test_replace_config_returns_previous(self, result_factory):
        first = ResolverConfig()
        command = IdentifyItemCommand([], result_factory, first)
        second = ResolverConfig(confidence_threshold=0.5)

        previous = command.replace_config(second)

        assert previous is first
        assert command.config is second


class TestToggleStrategyCommand:
    def test_toggle_swaps_primary(self, result_factory):
        command = IdentifyItemCommand([], result_factory, ResolverConfig())
        toggle = ToggleStrategyCommand(command)

        assert toggle.execute() == BackendKind.REMOTE_AI
        assert command.config.primary_backend == BackendKind.REMOTE_AI
        assert toggle.execute() == BackendKind.LOCAL_MODEL


@pytest.mark.parametrize(
    "request_obj,expected",
    [
        (ImageCapture(image_base64="aGVsbG8="), "item"),
        (ImageCapture(image_base64="aGVsbG8=", mode=CaptureMode.BARCODE), "barcode"),
        (TextQuery(text="can"), "search"),
    ],
)
def test_request_kind(request_obj, expected):
    assert request_kind(request_obj) == expected
