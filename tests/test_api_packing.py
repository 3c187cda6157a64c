"""
Tests for the packing API endpoints.

Tests FastAPI routes with the in-memory store and a mocked weather service.
Validates request validation, response schemas, and error mapping.
"""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from packit.application.packing.dtos import WeatherDto
from packit.application.packing.ports import WeatherService
from packit.domain.packing.errors import WeatherServiceUnavailableError
from packit.infrastructure.packing.in_memory import (
    InMemoryPackingListReadService,
    InMemoryPackingListRepository,
    InMemoryPackingListStore,
)
from packit.interfaces.packing.dependencies import (
    get_packing_list_read_service,
    get_packing_list_repository,
    get_weather_service,
)
from packit.main import app

BASE_URL = "/api/v1/packing-lists"


@pytest.fixture
def weather() -> AsyncMock:
    mock = AsyncMock(spec=WeatherService)
    mock.get_weather.return_value = WeatherDto(temperature=12)
    return mock


@pytest.fixture
def client(weather):
    store = InMemoryPackingListStore()
    app.dependency_overrides[get_packing_list_repository] = (
        lambda: InMemoryPackingListRepository(store)
    )
    app.dependency_overrides[get_packing_list_read_service] = (
        lambda: InMemoryPackingListReadService(store)
    )
    app.dependency_overrides[get_weather_service] = lambda: weather
    yield TestClient(app)
    app.dependency_overrides.clear()


def _create_body(name: str = "MyList", **overrides) -> dict:
    body = {
        "name": name,
        "days": 10,
        "gender": "female",
        "localization": {"city": "Warsaw", "country": "Poland"},
    }
    body.update(overrides)
    return body


def _create(client: TestClient, name: str = "MyList") -> str:
    response = client.post(BASE_URL, json=_create_body(name))
    assert response.status_code == 201
    return response.json()["id"]


class TestCreatePackingListEndpoint:
    """Tests for POST /api/v1/packing-lists."""

    def test_create_returns_id_and_persists_default_items(self, client) -> None:
        list_id = str(uuid4())

        response = client.post(BASE_URL, json=_create_body(id=list_id))

        assert response.status_code == 201
        assert response.json() == {"id": list_id}
        body = client.get(f"{BASE_URL}/{list_id}").json()
        assert body["temperature"] == 12.0
        assert body["localization"] == {"city": "Warsaw", "country": "Poland"}
        assert len(body["items"]) == 14

    def test_duplicate_name_returns_409(self, client) -> None:
        _create(client)

        response = client.post(BASE_URL, json=_create_body())

        assert response.status_code == 409
        assert response.json()["error"] == "Packing list already exists"

    def test_missing_weather_returns_422(self, client, weather) -> None:
        weather.get_weather.return_value = None

        response = client.post(BASE_URL, json=_create_body())

        assert response.status_code == 422
        assert response.json()["error"] == "Missing localization weather"

    def test_missing_localization_returns_422(self, client, weather) -> None:
        response = client.post(BASE_URL, json=_create_body(localization=None))

        assert response.status_code == 422
        weather.get_weather.assert_not_awaited()

    def test_weather_outage_returns_503(self, client, weather) -> None:
        weather.get_weather.side_effect = WeatherServiceUnavailableError("HTTP 502")

        response = client.post(BASE_URL, json=_create_body())

        assert response.status_code == 503
        assert "detail" not in response.json()

    def test_out_of_range_temperature_returns_400(self, client, weather) -> None:
        weather.get_weather.return_value = WeatherDto(temperature=150)

        response = client.post(BASE_URL, json=_create_body())

        assert response.status_code == 400

    @pytest.mark.parametrize(
        "overrides",
        [{"days": 0}, {"days": 101}, {"gender": "other"}, {"name": ""}],
    )
    def test_invalid_body_rejected(self, client, overrides) -> None:
        response = client.post(BASE_URL, json=_create_body(**overrides))
        assert response.status_code == 422

    def test_blank_name_rejected_before_weather_lookup(self, client, weather) -> None:
        response = client.post(BASE_URL, json=_create_body(name="   "))

        assert response.status_code == 422
        weather.get_weather.assert_not_awaited()


class TestQueryEndpoints:
    """Tests for GET /api/v1/packing-lists."""

    def test_get_unknown_list_returns_404(self, client) -> None:
        response = client.get(f"{BASE_URL}/{uuid4()}")
        assert response.status_code == 404

    def test_get_with_invalid_uuid_returns_422(self, client) -> None:
        response = client.get(f"{BASE_URL}/not-a-uuid")
        assert response.status_code == 422

    def test_search(self, client) -> None:
        _create(client, "Summer trip")
        _create(client, "Business")

        response = client.get(BASE_URL, params={"search_phrase": "TRIP"})

        assert response.status_code == 200
        assert [body["name"] for body in response.json()] == ["Summer trip"]
        assert len(client.get(BASE_URL).json()) == 2


class TestItemEndpoints:
    """Tests for item commands and list deletion."""

    def test_add_pack_and_remove_item(self, client) -> None:
        list_id = _create(client)
        items_url = f"{BASE_URL}/{list_id}/items"

        assert client.put(items_url, json={"name": "Umbrella", "quantity": 1}).status_code == 204
        assert client.put(f"{items_url}/Umbrella/pack").status_code == 204

        items = {i["name"]: i for i in client.get(f"{BASE_URL}/{list_id}").json()["items"]}
        assert items["Umbrella"]["is_packed"] is True

        assert client.delete(f"{items_url}/Umbrella").status_code == 204
        items = [i["name"] for i in client.get(f"{BASE_URL}/{list_id}").json()["items"]]
        assert "Umbrella" not in items

    def test_add_duplicate_item_returns_409(self, client) -> None:
        list_id = _create(client)

        response = client.put(
            f"{BASE_URL}/{list_id}/items", json={"name": "Passport", "quantity": 1}
        )

        assert response.status_code == 409

    def test_pack_unknown_item_returns_404(self, client) -> None:
        list_id = _create(client)

        response = client.put(f"{BASE_URL}/{list_id}/items/Umbrella/pack")

        assert response.status_code == 404
        assert response.json()["error"] == "Packing item not found"

    def test_add_item_with_blank_name_rejected(self, client) -> None:
        list_id = _create(client)

        response = client.put(
            f"{BASE_URL}/{list_id}/items", json={"name": " \t", "quantity": 1}
        )

        assert response.status_code == 422

    def test_add_item_with_zero_quantity_rejected(self, client) -> None:
        list_id = _create(client)

        response = client.put(
            f"{BASE_URL}/{list_id}/items", json={"name": "Umbrella", "quantity": 0}
        )

        assert response.status_code == 422

    def test_delete_list(self, client) -> None:
        list_id = _create(client)

        assert client.delete(f"{BASE_URL}/{list_id}").status_code == 204
        assert client.get(f"{BASE_URL}/{list_id}").status_code == 404
        assert client.delete(f"{BASE_URL}/{list_id}").status_code == 404


class TestSecurityHeaders:
    """Tests for security headers on responses."""

    def test_security_headers_present(self, client) -> None:
        response = client.get(f"{BASE_URL}/{uuid4()}")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert response.headers["Cache-Control"] == "no-store"
