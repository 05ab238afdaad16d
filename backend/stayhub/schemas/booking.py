"""Booking schemas."""

from datetime import date
from typing import Optional

from pydantic import Field

from stayhub.schemas.base import BaseSchema
from stayhub.services.pricing import Quote


class QuoteRequest(BaseSchema):
    """Price a prospective stay. Dates may still be unset."""

    apartment_id: str
    check_in: Optional[date] = None
    check_out: Optional[date] = None


class QuoteResponse(BaseSchema):
    """A quote, or null while there is no price yet."""

    apartment_id: str
    quote: Optional[Quote] = None
    can_book: bool


class BookingCreate(BaseSchema):
    """Confirm a stay."""

    apartment_id: str
    check_in: Optional[date] = None
    check_out: Optional[date] = None
    guests: int = Field(default=1, ge=1, le=50)
