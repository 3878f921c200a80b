import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from shift_leaderboard.config import Settings
from shift_leaderboard.database import InMemoryRecordStore
from shift_leaderboard.upstream import create_upstream_app

from factories import UPSTREAM_URL


@pytest.fixture
def settings() -> Settings:
    return Settings(api_base_url=UPSTREAM_URL, _env_file=None)


@pytest.fixture
def upstream_db() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def upstream_app(upstream_db):
    # small pages so every listing spans several of them
    return create_upstream_app(upstream_db, page_size=2)


@pytest_asyncio.fixture
async def upstream_client(upstream_app):
    async with AsyncClient(
        transport=ASGITransport(app=upstream_app), base_url=UPSTREAM_URL
    ) as client:
        yield client
