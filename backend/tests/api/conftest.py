"""Route test fixtures — in-memory store + FastAPI test client.

Invariants:
    - Every test gets a fresh InMemoryScheduleStore injected through create_app(store=...)
    - ASGITransport does not run the lifespan, so no MongoDB client is ever created
"""

import pytest
from httpx import ASGITransport, AsyncClient

from schedule_api.main import create_app
from tests.api.fake_store import InMemoryScheduleStore

YOGA = {"title": "Yoga", "day": "Monday", "date": "2024-06-03", "time": "08:00"}


@pytest.fixture
def store():
    return InMemoryScheduleStore()


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def yoga():
    return dict(YOGA)
