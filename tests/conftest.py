"""Shared pytest fixtures for UMS API tests."""

from __future__ import annotations

import os
from collections.abc import AsyncIterator, Callable, Iterator
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio
from asgi_lifespan import LifespanManager
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from ums_api.main import create_app
from ums_api.settings import Settings, reload_settings


def pytest_collection_modifyitems(config, items) -> None:
    for item in items:
        path_str = str(Path(str(item.fspath)))
        if "/tests/integration/" in path_str:
            item.add_marker(pytest.mark.integration)
        elif "/tests/unit/" in path_str:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def _isolate_environment(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> Iterator[None]:
    """Run every test without ambient UMS_* variables or a stray .env file."""

    for key in list(os.environ):
        if key.upper().startswith("UMS_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    reload_settings()
    yield
    reload_settings()


@pytest.fixture()
def settings() -> Settings:
    return Settings()


@pytest.fixture()
def app(settings: Settings) -> FastAPI:
    """Return a fresh application with its own seeded directory."""

    return create_app(settings)


@pytest.fixture()
def override_app_settings(app: FastAPI) -> Callable[..., Settings]:
    """Swap the settings the running application reads per request."""

    def _apply(**updates: Any) -> Settings:
        updated = app.state.settings.model_copy(update=updates)
        app.state.settings = updated
        return updated

    return _apply


@pytest_asyncio.fixture()
async def async_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Provide an HTTPX async client bound to the FastAPI app."""

    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            yield client
