from datetime import date

import pytest

from flight_booking.shared.domain import IsoDateTime


class TestIsoDateTime:
    def test_from_string(self):
        dt = IsoDateTime.from_string("2025-07-01T10:00:00")
        assert dt.date() == date(2025, 7, 1)

    def test_from_string_accepts_z_suffix(self):
        dt = IsoDateTime.from_string("2025-07-01T10:00:00Z")
        assert dt.value.utcoffset() is not None

    def test_invalid_string_raises_error(self):
        with pytest.raises(ValueError, match="Invalid ISO 8601 datetime"):
            IsoDateTime.from_string("yesterday")

    def test_ordering(self):
        early = IsoDateTime.from_string("2025-07-01T10:00:00")
        late = IsoDateTime.from_string("2025-07-01T12:15:00")
        assert early.is_before(late)
        assert late.is_after(early)
        assert early.minutes_until(late) == 135

    def test_is_aware(self):
        assert IsoDateTime.from_string("2025-07-01T10:00:00Z").is_aware()
        assert not IsoDateTime.from_string("2025-07-01T10:00:00").is_aware()
