"""
Tests for the packing infrastructure adapters.

    1. In-memory store, repository and read service
    2. SQL repository and read service against a throwaway SQLite file
    3. Weather adapters with httpx patched out

No network or external database required.
"""

import random
from unittest.mock import AsyncMock, MagicMock, patch
from uuid import uuid4

import httpx
import pytest
import pytest_asyncio

from packit.application.packing.dtos import WeatherDto
from packit.domain.packing.entities import Gender
from packit.domain.packing.errors import (
    PackingListAlreadyExistsError,
    PackingListNotFoundError,
    PackingListVersionConflictError,
    WeatherServiceUnavailableError,
)
from packit.domain.packing.value_objects import Localization, PackingItem, Temperature
from packit.infrastructure.packing.database import build_engine, create_schema
from packit.infrastructure.packing.in_memory import (
    InMemoryPackingListReadService,
    InMemoryPackingListRepository,
    InMemoryPackingListStore,
)
from packit.infrastructure.packing.packing_list_read_service import (
    SqlPackingListReadService,
)
from packit.infrastructure.packing.packing_list_repository import (
    SqlPackingListRepository,
)
from packit.infrastructure.packing.weather_adapters import (
    OpenWeatherMapAdapter,
    RandomWeatherAdapter,
)
from tests.conftest import make_packing_list

WARSAW = Localization("Warsaw", "Poland")


# ══════════════════════════════════════════════════════════════
# Fixtures
# ══════════════════════════════════════════════════════════════


@pytest_asyncio.fixture(params=["memory", "sql"])
async def adapters(request, tmp_path):
    """Repository and read service pairs for each storage backend.

    The SQL pair runs against a fresh SQLite file with the packing schema.
    """
    if request.param == "memory":
        store = InMemoryPackingListStore()
        yield InMemoryPackingListRepository(store), InMemoryPackingListReadService(store)
        return

    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'packit.db'}")
    await create_schema(engine)
    yield SqlPackingListRepository(engine), SqlPackingListReadService(engine)
    await engine.dispose()


# ══════════════════════════════════════════════════════════════
# Storage adapters (both backends)
# ══════════════════════════════════════════════════════════════


class TestPackingListStorage:
    """Behavior shared by the in-memory and SQL adapters."""

    @pytest.mark.asyncio
    async def test_add_then_get(self, adapters) -> None:
        repository, _ = adapters
        packing_list = make_packing_list(gender=Gender.MALE, temperature=-3.5)
        packing_list.add_items([PackingItem("Socks", 3), PackingItem("Hat", 1, True)])

        await repository.add(packing_list)
        stored = await repository.get(packing_list.id)

        assert stored == packing_list

    @pytest.mark.asyncio
    async def test_get_unknown_returns_none(self, adapters) -> None:
        repository, _ = adapters
        assert await repository.get(uuid4()) is None

    @pytest.mark.asyncio
    async def test_duplicate_name_rejected(self, adapters) -> None:
        repository, _ = adapters
        await repository.add(make_packing_list(name="MyList"))

        with pytest.raises(PackingListAlreadyExistsError):
            await repository.add(make_packing_list(name="MyList"))

    @pytest.mark.asyncio
    async def test_update_bumps_version_and_rewrites_items(self, adapters) -> None:
        repository, _ = adapters
        packing_list = make_packing_list()
        packing_list.add_items([PackingItem("Socks", 3), PackingItem("Hat", 1)])
        await repository.add(packing_list)

        loaded = await repository.get(packing_list.id)
        loaded.remove_item("Socks")
        loaded.pack_item("Hat")
        await repository.update(loaded)

        stored = await repository.get(packing_list.id)
        assert stored.version == 1
        assert stored.items == [PackingItem("Hat", 1, True)]

    @pytest.mark.asyncio
    async def test_stale_update_rejected(self, adapters) -> None:
        repository, _ = adapters
        packing_list = make_packing_list()
        await repository.add(packing_list)

        first = await repository.get(packing_list.id)
        second = await repository.get(packing_list.id)
        first.add_item(PackingItem("Map", 1))
        await repository.update(first)
        second.add_item(PackingItem("Compass", 1))

        with pytest.raises(PackingListVersionConflictError):
            await repository.update(second)

    @pytest.mark.asyncio
    async def test_delete(self, adapters) -> None:
        repository, read_service = adapters
        packing_list = make_packing_list()
        packing_list.add_item(PackingItem("Socks", 3))
        await repository.add(packing_list)

        await repository.delete(packing_list)

        assert await repository.get(packing_list.id) is None
        assert await read_service.exists_by_name(packing_list.name) is False

    @pytest.mark.asyncio
    async def test_exists_by_name(self, adapters) -> None:
        repository, read_service = adapters
        await repository.add(make_packing_list(name="MyList"))

        assert await read_service.exists_by_name("MyList") is True
        assert await read_service.exists_by_name("mylist") is False

    @pytest.mark.asyncio
    async def test_get_by_id_returns_dto(self, adapters) -> None:
        repository, read_service = adapters
        packing_list = make_packing_list()
        packing_list.add_items([PackingItem("Socks", 3), PackingItem("Hat", 1)])
        await repository.add(packing_list)

        dto = await read_service.get_by_id(packing_list.id)

        assert dto.id == packing_list.id
        assert dto.days == 10
        assert dto.gender == "female"
        assert dto.temperature == 12.0
        assert dto.localization.country == "Poland"
        assert [item.name for item in dto.items] == ["Socks", "Hat"]
        assert await read_service.get_by_id(uuid4()) is None

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive_and_sorted(self, adapters) -> None:
        repository, read_service = adapters
        for name in ("Summer Trip", "Business", "winter trip"):
            await repository.add(make_packing_list(name=name))

        found = await read_service.search("TRIP")
        everything = await read_service.search(None)

        assert [dto.name for dto in found] == ["Summer Trip", "winter trip"]
        assert len(everything) == 3

    @pytest.mark.asyncio
    async def test_search_treats_wildcards_literally(self, adapters) -> None:
        repository, read_service = adapters
        for name in ("Summer Trip", "my_list", "100% fun", "back\\slash"):
            await repository.add(make_packing_list(name=name))

        assert [dto.name for dto in await read_service.search("_")] == ["my_list"]
        assert [dto.name for dto in await read_service.search("%")] == ["100% fun"]
        assert [dto.name for dto in await read_service.search("\\")] == ["back\\slash"]

    @pytest.mark.asyncio
    async def test_search_orders_by_code_point(self, adapters) -> None:
        repository, read_service = adapters
        for name in ("beach", "Zoo", "alps", "Berlin"):
            await repository.add(make_packing_list(name=name))

        found = await read_service.search(None)

        assert [dto.name for dto in found] == ["Berlin", "Zoo", "alps", "beach"]

    @pytest.mark.asyncio
    async def test_update_of_deleted_list_raises_not_found(self, adapters) -> None:
        repository, _ = adapters
        packing_list = make_packing_list()
        await repository.add(packing_list)

        loaded = await repository.get(packing_list.id)
        await repository.delete(loaded)
        loaded.add_item(PackingItem("Map", 1))

        with pytest.raises(PackingListNotFoundError):
            await repository.update(loaded)


# ══════════════════════════════════════════════════════════════
# Weather adapters
# ══════════════════════════════════════════════════════════════


def _response(status_code: int, payload: dict | None = None) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.json = MagicMock(return_value=payload or {})
    resp.raise_for_status = MagicMock()
    return resp


def _patched_client(get_mock: AsyncMock):
    patcher = patch("packit.infrastructure.packing.weather_adapters.httpx.AsyncClient")
    mock_cls = patcher.start()
    mock_client = AsyncMock()
    mock_client.get = get_mock
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    mock_cls.return_value = mock_client
    return patcher


class TestOpenWeatherMapAdapter:
    """Tests for the HTTP weather adapter."""

    def _adapter(self) -> OpenWeatherMapAdapter:
        return OpenWeatherMapAdapter(
            base_url="https://weather.example.com/data/2.5/",
            api_key="secret",
            max_retries=2,
            backoff_seconds=0,
        )

    @pytest.mark.asyncio
    async def test_returns_temperature(self) -> None:
        get = AsyncMock(return_value=_response(200, {"main": {"temp": 12.5}}))
        patcher = _patched_client(get)
        try:
            weather = await self._adapter().get_weather(WARSAW)
        finally:
            patcher.stop()

        assert weather == WeatherDto(temperature=12.5)
        get.assert_awaited_once_with(
            "https://weather.example.com/data/2.5/weather",
            params={"q": "Warsaw,Poland", "units": "metric", "appid": "secret"},
        )

    @pytest.mark.asyncio
    async def test_unknown_localization_returns_none(self) -> None:
        get = AsyncMock(return_value=_response(404))
        patcher = _patched_client(get)
        try:
            weather = await self._adapter().get_weather(WARSAW)
        finally:
            patcher.stop()

        assert weather is None
        assert get.await_count == 1

    @pytest.mark.asyncio
    async def test_payload_without_temperature_returns_none(self) -> None:
        get = AsyncMock(return_value=_response(200, {"weather": []}))
        patcher = _patched_client(get)
        try:
            weather = await self._adapter().get_weather(WARSAW)
        finally:
            patcher.stop()

        assert weather is None

    @pytest.mark.asyncio
    async def test_server_error_is_retried(self) -> None:
        get = AsyncMock(
            side_effect=[_response(503), _response(200, {"main": {"temp": 20}})]
        )
        patcher = _patched_client(get)
        try:
            weather = await self._adapter().get_weather(WARSAW)
        finally:
            patcher.stop()

        assert weather == WeatherDto(temperature=20.0)
        assert get.await_count == 2

    @pytest.mark.asyncio
    async def test_transport_errors_exhaust_retries(self) -> None:
        get = AsyncMock(side_effect=httpx.ConnectError("connection refused"))
        patcher = _patched_client(get)
        try:
            with pytest.raises(WeatherServiceUnavailableError) as exc_info:
                await self._adapter().get_weather(WARSAW)
        finally:
            patcher.stop()

        assert get.await_count == 3
        assert "connection refused" in exc_info.value.reason


class TestRandomWeatherAdapter:
    @pytest.mark.asyncio
    async def test_temperature_within_range(self) -> None:
        adapter = RandomWeatherAdapter(rng=random.Random(42))
        for _ in range(20):
            weather = await adapter.get_weather(WARSAW)
            assert 5 <= weather.temperature <= 30
            Temperature(weather.temperature)
