"""Booking model."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from stayhub.models.enums import BookingStatus
from stayhub.models.property import Property


class BookingDraft(BaseModel):
    """Everything a booking carries except the ledger-assigned id and timestamp."""

    apartment_id: str
    # Snapshot of the listing at booking time
    apartment: Property
    user_id: str
    check_in: date
    check_out: date
    guests: int = Field(..., ge=1)
    total_price: float = Field(..., ge=0)
    status: BookingStatus = BookingStatus.CONFIRMED


class Booking(BookingDraft):
    """A booking recorded in the ledger.

    Frozen. Cancellation replaces the ledger entry with a copy carrying the
    new status.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    created_at: datetime
