from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from libs.storage.json_store import JsonFileStore
from libs.storage.stores import get_passengers_store, get_riders_store
from services.rideshare_service.app.main import app


@pytest.fixture
def riders_store(tmp_path) -> JsonFileStore:
    store = JsonFileStore(tmp_path / "riders.json")
    store.initialize()
    return store


@pytest.fixture
def passengers_store(tmp_path) -> JsonFileStore:
    store = JsonFileStore(tmp_path / "passengers.json")
    store.initialize()
    return store


@pytest_asyncio.fixture
async def client(
    riders_store: JsonFileStore, passengers_store: JsonFileStore
) -> AsyncGenerator[AsyncClient, None]:
    """
    Yield an AsyncClient with the app and stores pointed at temporary files.
    """
    app.dependency_overrides[get_riders_store] = lambda: riders_store
    app.dependency_overrides[get_passengers_store] = lambda: passengers_store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()

