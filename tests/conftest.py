import pytest
from fastapi.testclient import TestClient

from booking_registry_api.app.core.config import Settings
from booking_registry_api.app.core.store import BookingStore
from booking_registry_api.app.main import create_app
from booking_registry_api.app.services.booking_service import BookingService


@pytest.fixture
def store():
    return BookingStore()


@pytest.fixture
def service(store):
    return BookingService(store)


@pytest.fixture
def app(store):
    """Application over an empty store."""
    return create_app(Settings(seed_bookings=False), store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seeded_client():
    """Client for an application started with the demo bookings."""
    with TestClient(create_app(Settings(seed_bookings=True))) as test_client:
        yield test_client


@pytest.fixture
def make_booking(client):
    """Create a booking over HTTP and return its JSON representation."""

    def _make_booking(**overrides):
        payload = {"name": "Asha Patel", "email": "asha@example.com"}
        payload.update(overrides)
        response = client.post("/api/bookings", json=payload)
        assert response.status_code == 201, response.text
        return response.json()["booking"]

    return _make_booking
