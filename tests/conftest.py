import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from catharsis.main import create_app
from catharsis.routers.daily import get_today
from catharsis.services.ticket_store import TicketStore


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'tickets.db'}"


@pytest_asyncio.fixture
async def store(database_url):
    async with TicketStore(database_url) as ticket_store:
        yield ticket_store


@pytest.fixture
def clock():
    """Mutable "today" used by the app under test."""
    return {"today": "2024-03-03"}


@pytest.fixture
def client(database_url, clock):
    app = create_app(database_url=database_url, reset_requires_confirmation=False)
    app.dependency_overrides[get_today] = lambda: clock["today"]
    with TestClient(app) as test_client:
        yield test_client
