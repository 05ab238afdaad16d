"""Stay pricing.

A quote is what the guest sees before confirming: nights at the nightly rate,
a flat cleaning fee and a percentage service fee. No quote exists until both
dates are chosen and check-out falls after check-in.
"""

import math
from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

from pydantic import BaseModel

CLEANING_FEE = 25
SERVICE_FEE_RATE = Decimal("0.12")

SECONDS_PER_DAY = 24 * 60 * 60

DateLike = Union[date, datetime]


class Quote(BaseModel):
    """Pricing breakdown for a prospective stay."""

    nights: int
    subtotal: float
    cleaning_fee: int
    service_fee: int
    total: float


def _as_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def round_half_up(value: Union[int, float, Decimal]) -> int:
    """Round to the nearest whole currency unit, halves away from zero."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def count_nights(check_in: DateLike, check_out: DateLike) -> int:
    """Whole nights between two calendar dates (time of day ignored)."""
    delta = _as_date(check_out) - _as_date(check_in)
    return math.ceil(delta.total_seconds() / SECONDS_PER_DAY)


def compute_quote(
    nightly_price: float,
    check_in: Optional[DateLike],
    check_out: Optional[DateLike],
) -> Optional[Quote]:
    """Price a stay, or return None when there is no price yet.

    None means the confirm action stays disabled; it is not an error.
    """
    if not check_in or not check_out:
        return None

    nights = count_nights(check_in, check_out)
    if nights <= 0:
        return None

    subtotal = nights * nightly_price
    service_fee = round_half_up(Decimal(str(subtotal)) * SERVICE_FEE_RATE)

    return Quote(
        nights=nights,
        subtotal=subtotal,
        cleaning_fee=CLEANING_FEE,
        service_fee=service_fee,
        total=subtotal + CLEANING_FEE + service_fee,
    )
