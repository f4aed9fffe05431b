"""Tests for the page_request_params FastAPI dependency."""

import pytest
from fastapi import Depends, FastAPI
from httpx import ASGITransport, AsyncClient

from simple_pagination.core import pagination
from simple_pagination.core.config import Settings
from simple_pagination.core.pagination import PageRequest, page_request_params
from simple_pagination.core.responses import PageResponse
from simple_pagination.services.paginator import paginate

_ITEMS = [f"Item{i}" for i in range(1, 6)]


@pytest.fixture
def app() -> FastAPI:
    test_app = FastAPI()

    @test_app.get("/items")
    async def list_items(
        request: PageRequest = Depends(page_request_params),
    ) -> PageResponse[str]:
        page = paginate(_ITEMS, request.page_number, request.page_size)
        return PageResponse[str].from_page(page)

    return test_app


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


class TestPageRequestParams:
    """Tests calling the dependency directly."""

    def test_passes_values_through(self, monkeypatch):
        monkeypatch.setattr(pagination, "settings", Settings())
        assert page_request_params(page=2, page_size=3) == PageRequest(2, 3)

    def test_absent_values_stay_absent(self, monkeypatch):
        monkeypatch.setattr(pagination, "settings", Settings())
        assert page_request_params(page=None, page_size=None) == PageRequest()

    def test_default_page_size_applied(self, monkeypatch):
        monkeypatch.setattr(pagination, "settings", Settings(default_page_size=20))
        assert page_request_params(page=1, page_size=None).page_size == 20

    def test_default_page_size_defaults_page_to_one(self, monkeypatch):
        """A configured default page size must not turn into "everything"."""
        monkeypatch.setattr(pagination, "settings", Settings(default_page_size=20))
        assert page_request_params(page=None, page_size=None) == PageRequest(1, 20)

    def test_explicit_page_size_without_page_unchanged(self, monkeypatch):
        monkeypatch.setattr(pagination, "settings", Settings(default_page_size=20))
        assert page_request_params(page=None, page_size=3) == PageRequest(None, 3)

    def test_max_page_size_caps_request(self, monkeypatch):
        monkeypatch.setattr(pagination, "settings", Settings(max_page_size=50))
        assert page_request_params(page=1, page_size=500) == PageRequest(1, 50)

    def test_max_page_size_replaces_everything_request(self, monkeypatch):
        """With a cap configured, no request can ask for an unbounded page."""
        monkeypatch.setattr(pagination, "settings", Settings(max_page_size=50))
        assert page_request_params(page=None, page_size=0) == PageRequest(1, 50)


class TestPageEndpoint:
    """Tests through a FastAPI app."""

    @pytest.mark.asyncio
    async def test_page_query_parameters(self, client, monkeypatch):
        monkeypatch.setattr(pagination, "settings", Settings())
        response = await client.get("/items", params={"page": 2, "page_size": 2})

        assert response.status_code == 200
        body = response.json()
        assert body["data"] == ["Item3", "Item4"]
        assert body["meta"]["total_pages"] == 3

    @pytest.mark.asyncio
    async def test_no_query_parameters_returns_everything(self, client, monkeypatch):
        monkeypatch.setattr(pagination, "settings", Settings())
        response = await client.get("/items")

        assert response.status_code == 200
        assert len(response.json()["data"]) == 5

    @pytest.mark.asyncio
    async def test_default_page_size_applies_without_page(self, client, monkeypatch):
        monkeypatch.setattr(pagination, "settings", Settings(default_page_size=2))
        response = await client.get("/items")

        assert response.status_code == 200
        body = response.json()
        assert body["data"] == ["Item1", "Item2"]
        assert body["meta"]["page"] == 1
        assert body["meta"]["page_size"] == 2
        assert body["meta"]["has_next"] is True

    @pytest.mark.asyncio
    async def test_negative_page_rejected(self, client):
        response = await client.get("/items", params={"page": -1})
        assert response.status_code == 422
