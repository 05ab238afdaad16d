"""Per-application stores and their FastAPI dependencies."""

from dataclasses import dataclass

from fastapi import Request

from stayhub.core.config import Settings
from stayhub.services.audit import AuditService
from stayhub.services.auth import AuthService
from stayhub.services.catalog import CatalogStore
from stayhub.services.favorites import FavoritesStore
from stayhub.services.ledger import BookingLedger
from stayhub.services.processing import SimulatedGateway
from stayhub.services.seed import load_properties, load_users


@dataclass
class AppState:
    """Everything a request handler may read or mutate."""

    catalog: CatalogStore
    ledger: BookingLedger
    auth: AuthService
    favorites: FavoritesStore
    audit: AuditService
    booking_gateway: SimulatedGateway


def build_state(settings: Settings) -> AppState:
    """Create fresh stores, seeded with the demo catalog when configured."""
    auth_gateway = SimulatedGateway(
        "auth",
        delay=settings.auth_delay_seconds,
        timeout=settings.call_timeout_seconds,
    )
    booking_gateway = SimulatedGateway(
        "booking",
        delay=settings.booking_delay_seconds,
        failure_rate=settings.booking_failure_rate,
        timeout=settings.call_timeout_seconds,
    )
    seeded = settings.seed_catalog
    return AppState(
        catalog=CatalogStore(load_properties() if seeded else ()),
        ledger=BookingLedger(),
        auth=AuthService(load_users() if seeded else (), gateway=auth_gateway),
        favorites=FavoritesStore(),
        audit=AuditService(),
        booking_gateway=booking_gateway,
    )


def get_state(request: Request) -> AppState:
    return request.app.state.stayhub


def get_catalog(request: Request) -> CatalogStore:
    return get_state(request).catalog


def get_ledger(request: Request) -> BookingLedger:
    return get_state(request).ledger


def get_auth(request: Request) -> AuthService:
    return get_state(request).auth


def get_favorites(request: Request) -> FavoritesStore:
    return get_state(request).favorites


def get_audit(request: Request) -> AuditService:
    return get_state(request).audit


def get_booking_gateway(request: Request) -> SimulatedGateway:
    return get_state(request).booking_gateway
