"""Quote computation tests."""

from datetime import date, datetime

import pytest

from stayhub.services.pricing import CLEANING_FEE, compute_quote, count_nights, round_half_up


class TestComputeQuote:
    def test_three_night_example(self):
        quote = compute_quote(180, date(2024, 6, 1), date(2024, 6, 4))

        assert quote.nights == 3
        assert quote.subtotal == 540
        assert quote.cleaning_fee == 25
        assert quote.service_fee == 65
        assert quote.total == 630

    @pytest.mark.parametrize("price", [1, 37.5, 95, 180, 350, 999.99])
    @pytest.mark.parametrize("nights", [1, 2, 7, 30])
    def test_total_formula(self, price, nights):
        quote = compute_quote(price, date(2024, 1, 1), date(2024, 1, 1 + nights))

        expected_fee = round_half_up(round(nights * price * 0.12, 6))
        assert quote.nights == nights
        assert quote.total == pytest.approx(nights * price + CLEANING_FEE + expected_fee)

    def test_service_fee_rounds_half_up(self):
        # 37.5 * 0.12 = 4.5
        quote = compute_quote(37.5, date(2024, 1, 1), date(2024, 1, 2))
        assert quote.service_fee == 5
        assert quote.total == 37.5 + 25 + 5

    def test_subtotal_is_not_rounded(self):
        quote = compute_quote(99.99, date(2024, 1, 1), date(2024, 1, 3))
        assert quote.subtotal == pytest.approx(199.98)
        assert quote.service_fee == 24

    def test_monotonic_in_nights_and_price(self):
        totals_by_nights = [
            compute_quote(120, date(2024, 3, 1), date(2024, 3, 1 + n)).total for n in range(1, 20)
        ]
        assert totals_by_nights == sorted(totals_by_nights)

        totals_by_price = [
            compute_quote(p, date(2024, 3, 1), date(2024, 3, 4)).total for p in range(1, 400, 7)
        ]
        assert totals_by_price == sorted(totals_by_price)

    @pytest.mark.parametrize("check_in,check_out", [
        (date(2024, 6, 4), date(2024, 6, 4)),
        (date(2024, 6, 5), date(2024, 6, 4)),
        (None, date(2024, 6, 4)),
        (date(2024, 6, 1), None),
        (None, None),
    ])
    def test_no_quote_without_valid_range(self, check_in, check_out):
        assert compute_quote(180, check_in, check_out) is None

    def test_time_of_day_is_ignored(self):
        quote = compute_quote(
            100,
            datetime(2024, 6, 1, 23, 30),
            datetime(2024, 6, 2, 0, 15),
        )
        assert quote.nights == 1

        assert compute_quote(100, datetime(2024, 6, 1, 8), datetime(2024, 6, 1, 20)) is None


def test_count_nights_spans_months():
    assert count_nights(date(2024, 1, 30), date(2024, 2, 2)) == 3
    assert count_nights(date(2024, 2, 2), date(2024, 1, 30)) == -3
