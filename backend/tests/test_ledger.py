"""Booking ledger tests."""

from datetime import date

import pytest
from pydantic import ValidationError

from stayhub.models.enums import BookingStatus
from stayhub.services.ledger import BookingLedger
from tests.conftest import NOW, make_draft, make_property


class TestCreateBooking:
    def test_assigns_id_and_timestamp(self):
        ledger = BookingLedger(clock=lambda: NOW)
        prop = make_property()

        booking = ledger.create_booking(make_draft(prop))

        assert booking.id.startswith("booking-")
        assert booking.created_at == NOW
        assert ledger.bookings == [booking]

    def test_copies_fields_verbatim(self):
        ledger = BookingLedger()
        prop = make_property(price=180)
        draft = make_draft(
            prop,
            user_id="user9",
            check_in=date(2024, 7, 1),
            check_out=date(2024, 7, 3),
            guests=2,
            total_price=448,
            status=BookingStatus.PENDING,
        )

        booking = ledger.create_booking(draft)

        assert booking.apartment_id == prop.id
        assert booking.apartment == prop
        assert booking.user_id == "user9"
        assert booking.check_in == date(2024, 7, 1)
        assert booking.check_out == date(2024, 7, 3)
        assert booking.guests == 2
        assert booking.total_price == 448
        assert booking.status == BookingStatus.PENDING

    def test_identical_input_yields_distinct_bookings(self):
        ledger = BookingLedger()
        draft = make_draft(make_property())

        first = ledger.create_booking(draft)
        second = ledger.create_booking(draft)

        assert first.id != second.id
        assert len(ledger) == 2

    def test_appends_in_order(self):
        ledger = BookingLedger()
        prop = make_property()
        created = [ledger.create_booking(make_draft(prop, user_id=f"u{i}")) for i in range(5)]
        assert [b.id for b in ledger.bookings] == [b.id for b in created]


class TestCancelBooking:
    def test_sets_status_only(self):
        ledger = BookingLedger()
        booking = ledger.create_booking(make_draft(make_property()))
        before = booking.model_dump(exclude={"status"})

        ledger.cancel_booking(booking.id)

        stored = ledger.get_booking(booking.id)
        assert stored.status == BookingStatus.CANCELLED
        assert stored.model_dump(exclude={"status"}) == before

    def test_unknown_id_is_noop(self):
        ledger = BookingLedger()
        booking = ledger.create_booking(make_draft(make_property()))
        before = ledger.bookings

        ledger.cancel_booking("booking-missing")

        assert ledger.bookings == before
        assert len(ledger) == 1
        assert booking.status == BookingStatus.CONFIRMED

    def test_returned_bookings_are_read_only(self):
        ledger = BookingLedger()
        booking = ledger.create_booking(make_draft(make_property()))
        ledger.cancel_booking(booking.id)

        stored = ledger.get_booking(booking.id)
        with pytest.raises(ValidationError):
            stored.status = BookingStatus.CONFIRMED
        with pytest.raises(ValidationError):
            ledger.filter_by_user("user1")[0].status = BookingStatus.CONFIRMED

        assert ledger.get_booking(booking.id).status == BookingStatus.CANCELLED
        assert booking.status == BookingStatus.CONFIRMED

    def test_cancel_twice_stays_cancelled(self):
        ledger = BookingLedger()
        booking = ledger.create_booking(make_draft(make_property(), status=BookingStatus.PENDING))

        ledger.cancel_booking(booking.id)
        ledger.cancel_booking(booking.id)

        assert ledger.get_booking(booking.id).status == BookingStatus.CANCELLED


class TestReads:
    def test_filter_by_user(self):
        ledger = BookingLedger()
        prop = make_property()
        mine = ledger.create_booking(make_draft(prop, user_id="me"))
        ledger.create_booking(make_draft(prop, user_id="someone-else"))

        assert ledger.filter_by_user("me") == [mine]
        assert ledger.filter_by_user("nobody") == []

    def test_filter_by_properties(self):
        ledger = BookingLedger()
        a = ledger.create_booking(make_draft(make_property(id="a")))
        ledger.create_booking(make_draft(make_property(id="b")))
        c = ledger.create_booking(make_draft(make_property(id="c")))

        assert ledger.filter_by_properties(["a", "c"]) == [a, c]
        assert ledger.filter_by_properties([]) == []

    def test_get_booking_unknown(self):
        assert BookingLedger().get_booking("nope") is None
