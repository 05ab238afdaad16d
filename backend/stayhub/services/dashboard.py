"""Derived dashboard views, computed on read."""

from datetime import date, datetime, timezone
from typing import Iterable, Optional

from pydantic import BaseModel

from stayhub.models.booking import Booking
from stayhub.models.enums import BookingStatus, SortKey
from stayhub.models.property import Property
from stayhub.services.catalog import CatalogStore
from stayhub.services.ledger import BookingLedger
from stayhub.services.search import sort_properties

TOP_LISTINGS = 3


def _start_of(day: date) -> datetime:
    """Midnight UTC at the start of ``day``."""
    return datetime.combine(day, datetime.min.time(), tzinfo=timezone.utc)


def _now(now: Optional[datetime]) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now


def upcoming(bookings: Iterable[Booking], now: Optional[datetime] = None) -> list[Booking]:
    """Confirmed bookings whose check-in is still ahead.

    Cancelled stays are left out even when their dates are in the future.
    """
    now = _now(now)
    return [
        b for b in bookings
        if b.status == BookingStatus.CONFIRMED and _start_of(b.check_in) > now
    ]


def past(bookings: Iterable[Booking], now: Optional[datetime] = None) -> list[Booking]:
    """Bookings whose check-out has passed, whatever their status."""
    now = _now(now)
    return [b for b in bookings if _start_of(b.check_out) < now]


def host_revenue(bookings: Iterable[Booking], host_properties: Iterable[Property]) -> float:
    """Sum of confirmed booking totals across a host's listings."""
    ids = {p.id for p in host_properties}
    return sum(
        b.total_price for b in bookings
        if b.apartment_id in ids and b.status == BookingStatus.CONFIRMED
    )


def host_average_rating(host_properties: Iterable[Property]) -> float:
    """Mean listing rating; 0 for a host with no listings."""
    ratings = [p.rating for p in host_properties]
    if not ratings:
        return 0
    return sum(ratings) / len(ratings)


class GuestOverview(BaseModel):
    bookings: list[Booking]
    upcoming: list[Booking]
    past: list[Booking]


class HostOverview(BaseModel):
    listings: int
    available_listings: int
    total_bookings: int
    upcoming_bookings: int
    revenue: float
    average_rating: float
    top_listings: list[Property]
    bookings: list[Booking]


def guest_overview(
    ledger: BookingLedger,
    user_id: str,
    now: Optional[datetime] = None,
) -> GuestOverview:
    bookings = ledger.filter_by_user(user_id)
    return GuestOverview(
        bookings=bookings,
        upcoming=upcoming(bookings, now),
        past=past(bookings, now),
    )


def host_overview(
    catalog: CatalogStore,
    ledger: BookingLedger,
    host_id: str,
    now: Optional[datetime] = None,
) -> HostOverview:
    """Stats for a host's listings and the bookings made against them."""
    listings = catalog.filter_by_host(host_id)
    bookings = ledger.filter_by_properties(p.id for p in listings)

    return HostOverview(
        listings=len(listings),
        available_listings=sum(1 for p in listings if p.availability),
        total_bookings=len(bookings),
        upcoming_bookings=len(upcoming(bookings, now)),
        revenue=host_revenue(bookings, listings),
        average_rating=host_average_rating(listings),
        top_listings=sort_properties(listings, SortKey.RATING)[:TOP_LISTINGS],
        bookings=bookings,
    )
