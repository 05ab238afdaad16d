"""Shared fixtures."""

from datetime import date, datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from stayhub.core.config import Settings
from stayhub.main import create_app
from stayhub.models.booking import BookingDraft
from stayhub.models.enums import BookingStatus
from stayhub.models.property import Property
from stayhub.services.catalog import CatalogStore
from stayhub.services.seed import load_properties

NOW = datetime(2024, 6, 10, 12, 0, 0, tzinfo=timezone.utc)


def make_property(
    id="p1",
    title="Test Flat",
    location="Lisbon, Portugal",
    price=100,
    rating=4.0,
    availability=True,
    host_id="host-x",
    max_guests=2,
    **overrides,
) -> Property:
    data = dict(
        id=id,
        title=title,
        location=location,
        price=price,
        rating=rating,
        reviews=10,
        images=["https://example.com/a.jpg"],
        amenities=["wifi"],
        bedrooms=1,
        bathrooms=1,
        max_guests=max_guests,
        description="",
        availability=availability,
        host_id=host_id,
        host_name="Host X",
    )
    data.update(overrides)
    return Property.model_validate(data)


def make_draft(
    prop: Property,
    user_id="user1",
    check_in=date(2024, 6, 1),
    check_out=date(2024, 6, 4),
    status=BookingStatus.CONFIRMED,
    total_price=630,
    guests=1,
) -> BookingDraft:
    return BookingDraft(
        apartment_id=prop.id,
        apartment=prop,
        user_id=user_id,
        check_in=check_in,
        check_out=check_out,
        guests=guests,
        total_price=total_price,
        status=status,
    )


@pytest.fixture
def catalog():
    return CatalogStore(load_properties())


@pytest.fixture
def settings():
    return Settings(
        auth_delay_seconds=0,
        booking_delay_seconds=0,
        booking_failure_rate=0,
        allowed_origins="http://testserver",
    )


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


def login(client, email="john@example.com", password="secret"):
    resp = client.post("/v1/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['token']}"}


def future(days: int) -> str:
    return (datetime.now(timezone.utc).date() + timedelta(days=days)).isoformat()
