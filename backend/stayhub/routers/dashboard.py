"""Dashboard router - guest trips and host overview."""

from fastapi import APIRouter, Depends

from stayhub.core.security import AuthenticatedUser, get_current_user
from stayhub.core.state import get_catalog, get_ledger
from stayhub.services.catalog import CatalogStore
from stayhub.services.dashboard import GuestOverview, HostOverview, guest_overview, host_overview
from stayhub.services.ledger import BookingLedger

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/guest", response_model=GuestOverview)
def get_guest_dashboard(
    current_user: AuthenticatedUser = Depends(get_current_user),
    ledger: BookingLedger = Depends(get_ledger),
):
    """All, upcoming and past trips for the current user.

    Upcoming only lists confirmed stays; past lists every stay whose
    check-out date has gone by, cancelled ones included.
    """
    return guest_overview(ledger, current_user.id)


@router.get("/host", response_model=HostOverview)
def get_host_dashboard(
    current_user: AuthenticatedUser = Depends(get_current_user),
    catalog: CatalogStore = Depends(get_catalog),
    ledger: BookingLedger = Depends(get_ledger),
):
    """Listing, booking and revenue stats for the current user's listings.

    A user without listings gets all-zero stats.
    """
    return host_overview(catalog, ledger, current_user.id)
