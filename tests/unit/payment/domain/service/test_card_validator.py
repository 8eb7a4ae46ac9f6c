from datetime import date

import pytest

from flight_booking.payment.domain.service.card_validator import (
    is_valid_card_number,
    is_valid_cvv,
    is_valid_expiry,
    luhn_checksum_ok,
    mask_card_number,
)

AS_OF = date(2025, 6, 1)


class TestCardNumber:
    def test_valid_luhn_number(self):
        assert is_valid_card_number("4532015112830366")

    def test_single_digit_change_breaks_checksum(self):
        assert not is_valid_card_number("4532015112830367")

    @pytest.mark.parametrize(
        "raw", ["4532 0151 1283 0366", "4532-0151-1283-0366", " 4532015112830366 "]
    )
    def test_separators_are_ignored(self, raw):
        assert is_valid_card_number(raw)

    def test_thirteen_digits(self):
        assert is_valid_card_number("4222222222222")

    def test_nineteen_digits(self):
        assert is_valid_card_number("4" + "0" * 17 + "6")

    @pytest.mark.parametrize("raw", ["0" * 12, "0" * 20])
    def test_length_outside_range_fails_despite_checksum(self, raw):
        assert luhn_checksum_ok(raw)
        assert not is_valid_card_number(raw)

    @pytest.mark.parametrize("raw", [None, "", "    ", "abcd-efgh"])
    def test_missing_or_non_numeric(self, raw):
        assert not is_valid_card_number(raw)

    def test_non_ascii_digits_are_stripped(self):
        # Arabic-Indic digits are not card digits
        assert not is_valid_card_number("٤٥٣٢015112830366")


class TestCVV:
    @pytest.mark.parametrize("raw", ["123", "1234", "000"])
    def test_valid(self, raw):
        assert is_valid_cvv(raw)

    @pytest.mark.parametrize("raw", ["12", "12345", "12a", "", None, " 123", "12 3"])
    def test_invalid(self, raw):
        assert not is_valid_cvv(raw)


class TestExpiry:
    def test_current_month_is_valid(self):
        assert is_valid_expiry("06/25", AS_OF)

    def test_future_month_is_valid(self):
        assert is_valid_expiry("01/26", AS_OF)

    def test_previous_month_is_expired(self):
        assert not is_valid_expiry("05/25", AS_OF)

    def test_previous_year_is_expired(self):
        assert not is_valid_expiry("12/24", AS_OF)

    @pytest.mark.parametrize("raw", ["13/25", "00/25", "1/25", "06/2025", "06-25", ""])
    def test_malformed(self, raw):
        assert not is_valid_expiry(raw, AS_OF)

    def test_none(self):
        assert not is_valid_expiry(None, AS_OF)

    def test_same_month_late_in_the_month(self):
        assert is_valid_expiry("06/25", date(2025, 6, 30))


class TestMaskCardNumber:
    def test_keeps_first_and_last_four(self):
        assert mask_card_number("4532015112830366") == "4532****0366"

    def test_strips_separators(self):
        assert mask_card_number("4532 0151 1283 0366") == "4532****0366"

    def test_eight_digits(self):
        assert mask_card_number("12345678") == "1234****5678"

    @pytest.mark.parametrize("raw", ["1234567", "", None])
    def test_short_input_gets_placeholder(self, raw):
        assert mask_card_number(raw) == "****"
