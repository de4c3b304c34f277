import httpx
import pytest
from httpx import ASGITransport

from hotel_ledger.ledger import BookingLedger
from hotel_ledger.schemas.ledger import RoomType
from hotel_ledger.services.booking_engine import BookingEngine
from hotel_ledger.store import EntityStore


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("BOOKING_TIMEZONE", "UTC")
    monkeypatch.setenv("SEED_DEMO", "false")


@pytest.fixture
async def client(mock_env):
    from hotel_ledger.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c


@pytest.fixture
def store():
    return EntityStore()


@pytest.fixture
def ledger():
    return BookingLedger()


@pytest.fixture
def engine(store, ledger):
    return BookingEngine(store, ledger)


@pytest.fixture
def hotel(store):
    """Rooms 1-3 and users 1-2 as in the demo scenario."""
    store.upsert_room(1, RoomType.STANDARD, 1000)
    store.upsert_room(2, RoomType.JUNIOR_SUITE, 2000)
    store.upsert_room(3, RoomType.MASTER_SUITE, 3000)
    store.upsert_user(1, 5000)
    store.upsert_user(2, 10000)
    return store
