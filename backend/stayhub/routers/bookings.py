"""Bookings router - quoting, confirming and cancelling stays."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from stayhub.core.results import http_error
from stayhub.core.security import AuthenticatedUser, get_current_user
from stayhub.core.state import get_audit, get_booking_gateway, get_catalog, get_ledger
from stayhub.models.booking import Booking, BookingDraft
from stayhub.models.enums import BookingStatus
from stayhub.models.property import Property
from stayhub.schemas.booking import BookingCreate, QuoteRequest, QuoteResponse
from stayhub.services.audit import AuditService
from stayhub.services.catalog import CatalogStore
from stayhub.services.ledger import BookingLedger
from stayhub.services.pricing import compute_quote
from stayhub.services.processing import Ok, SimulatedGateway

router = APIRouter(prefix="/bookings", tags=["bookings"])


def get_listing_or_404(apartment_id: str, catalog: CatalogStore) -> Property:
    prop = catalog.get_apartment_by_id(apartment_id)
    if not prop:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Property not found")
    return prop


@router.post("/quote", response_model=QuoteResponse)
def quote_stay(
    data: QuoteRequest,
    catalog: CatalogStore = Depends(get_catalog),
):
    """Price breakdown for a stay; ``quote`` is null until the dates form a valid range."""
    prop = get_listing_or_404(data.apartment_id, catalog)
    quote = compute_quote(prop.price, data.check_in, data.check_out)
    return QuoteResponse(
        apartment_id=prop.id,
        quote=quote,
        can_book=quote is not None and prop.availability,
    )


@router.post("", response_model=Booking, status_code=status.HTTP_201_CREATED)
async def create_booking(
    data: BookingCreate,
    request: Request,
    current_user: AuthenticatedUser = Depends(get_current_user),
    catalog: CatalogStore = Depends(get_catalog),
    ledger: BookingLedger = Depends(get_ledger),
    gateway: SimulatedGateway = Depends(get_booking_gateway),
    audit: AuditService = Depends(get_audit),
):
    """Confirm a stay.

    The booking is recorded only once simulated payment processing succeeds;
    a failed or abandoned attempt leaves the ledger as it was.
    """
    prop = get_listing_or_404(data.apartment_id, catalog)

    if not prop.availability:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="This property is not available for booking",
        )

    if not data.check_in or not data.check_out:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Check-in and check-out dates are required.",
        )

    quote = compute_quote(prop.price, data.check_in, data.check_out)
    if quote is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="check_out must be after check_in",
        )

    if data.guests > prop.max_guests:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"This property hosts at most {prop.max_guests} guests",
        )

    draft = BookingDraft(
        apartment_id=prop.id,
        apartment=prop,
        user_id=current_user.id,
        check_in=data.check_in,
        check_out=data.check_out,
        guests=data.guests,
        total_price=quote.total,
        status=BookingStatus.CONFIRMED,
    )

    result = await gateway.call(lambda: Ok(ledger.create_booking(draft)))
    if not result.ok:
        raise http_error(result)

    booking = result.value
    audit.log_booking_created(
        booking_id=booking.id,
        user_id=current_user.id,
        apartment_id=prop.id,
        total_price=booking.total_price,
        ip_address=request.client.host if request.client else None,
    )
    return booking


@router.get("", response_model=List[Booking])
def list_my_bookings(
    current_user: AuthenticatedUser = Depends(get_current_user),
    ledger: BookingLedger = Depends(get_ledger),
):
    """Bookings made by the current user."""
    return ledger.filter_by_user(current_user.id)


@router.get("/{booking_id}", response_model=Booking)
def get_booking(
    booking_id: str,
    current_user: AuthenticatedUser = Depends(get_current_user),
    ledger: BookingLedger = Depends(get_ledger),
):
    """Get a booking by ID."""
    booking = ledger.get_booking(booking_id)
    if not booking:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found")
    return booking


@router.post("/{booking_id}/cancel", status_code=status.HTTP_204_NO_CONTENT)
def cancel_booking(
    booking_id: str,
    current_user: AuthenticatedUser = Depends(get_current_user),
    ledger: BookingLedger = Depends(get_ledger),
    audit: AuditService = Depends(get_audit),
):
    """Cancel a booking. Unknown ids are accepted and ignored."""
    ledger.cancel_booking(booking_id)
    audit.log_booking_cancelled(booking_id=booking_id, user_id=current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
