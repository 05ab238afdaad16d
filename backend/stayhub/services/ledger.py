"""
Booking ledger.

Append-only record of bookings. A booking is never removed; the only change
it can undergo after creation is cancellation.
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Callable, Iterable, Optional
from uuid import uuid4

from stayhub.models.booking import Booking, BookingDraft
from stayhub.models.enums import BookingStatus

logger = logging.getLogger(__name__)


def generate_booking_id() -> str:
    """Unique booking id."""
    return f"booking-{uuid4().hex}"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BookingLedger:
    """In-memory booking store.

    All mutation happens under a single lock, which is also held while
    snapshots are taken for reads.
    """

    def __init__(
        self,
        id_factory: Callable[[], str] = generate_booking_id,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._lock = threading.Lock()
        self._bookings: list[Booking] = []
        self._id_factory = id_factory
        self._clock = clock

    @property
    def bookings(self) -> list[Booking]:
        with self._lock:
            return list(self._bookings)

    def __len__(self) -> int:
        with self._lock:
            return len(self._bookings)

    def create_booking(self, draft: BookingDraft) -> Booking:
        """Record a booking with a fresh id and creation timestamp.

        Fields, including ``status``, are copied from the draft as given.
        """
        with self._lock:
            booking_id = self._id_factory()
            if any(b.id == booking_id for b in self._bookings):
                raise ValueError(f"Booking id collision: {booking_id}")

            booking = Booking(
                **dict(draft),
                id=booking_id,
                created_at=self._clock(),
            )
            self._bookings.append(booking)

        logger.info(
            f"[LEDGER] Booking {booking.id} created: apartment={booking.apartment_id} "
            f"user={booking.user_id} {booking.check_in}..{booking.check_out} "
            f"total={booking.total_price} status={booking.status.value}"
        )
        return booking

    def cancel_booking(self, booking_id: str) -> None:
        """Mark a booking cancelled. Unknown ids are ignored."""
        with self._lock:
            index = next((i for i, b in enumerate(self._bookings) if b.id == booking_id), None)
            if index is None:
                logger.debug(f"[LEDGER] Cancel ignored, no booking {booking_id}")
                return
            self._bookings[index] = self._bookings[index].model_copy(
                update={"status": BookingStatus.CANCELLED}
            )

        logger.info(f"[LEDGER] Booking {booking_id} cancelled")

    def get_booking(self, booking_id: str) -> Optional[Booking]:
        return next((b for b in self.bookings if b.id == booking_id), None)

    def filter_by_user(self, user_id: str) -> list[Booking]:
        """Bookings made by a user, oldest first."""
        return [b for b in self.bookings if b.user_id == user_id]

    def filter_by_properties(self, apartment_ids: Iterable[str]) -> list[Booking]:
        """Bookings against any of the given listings, oldest first."""
        ids = set(apartment_ids)
        return [b for b in self.bookings if b.apartment_id in ids]
