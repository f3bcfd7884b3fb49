from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from menu_api.config import get_settings
from menu_api.main import create_app


SOUP = {
    "name": "Soup",
    "description": "Hot tomato soup bowl",
    "price": 5.5,
    "category": "appetizer",
    "ingredients": ["tomato"],
}


@pytest.fixture(autouse=True)
def test_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SEED_MENU", "true")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def app() -> FastAPI:
    # Fresh store and hit counter per test.
    return create_app(get_settings())


@pytest.fixture
async def api_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def soup_payload() -> dict:
    return dict(SOUP, ingredients=list(SOUP["ingredients"]))
