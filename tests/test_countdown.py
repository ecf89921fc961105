"""
Unit tests for the registration countdown and Thai formatting.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from wizard.constants import REGISTRATION_DEADLINE, THAI_TZ
from wizard.countdown import TimeRemaining, time_remaining
from wizard.formatters import countdown_parts, format_thai_date, registration_label
from wizard.resolver import ActionRecord, Category, RegistrationKind


class TestTimeRemaining:
    """Test the countdown arithmetic."""

    def test_components(self):
        now = REGISTRATION_DEADLINE - timedelta(days=2, hours=3, minutes=4, seconds=5)
        assert time_remaining(REGISTRATION_DEADLINE, now) == TimeRemaining(2, 3, 4, 5, expired=False)

    def test_sub_second_is_truncated(self):
        now = REGISTRATION_DEADLINE - timedelta(seconds=61, milliseconds=900)
        assert time_remaining(REGISTRATION_DEADLINE, now) == TimeRemaining(0, 0, 1, 1, expired=False)

    def test_expired_at_deadline(self):
        assert time_remaining(REGISTRATION_DEADLINE, REGISTRATION_DEADLINE) == TimeRemaining(0, 0, 0, 0, expired=True)

    def test_expired_after_deadline_never_negative(self):
        tr = time_remaining(REGISTRATION_DEADLINE, REGISTRATION_DEADLINE + timedelta(days=3, seconds=7))
        assert tr.expired is True
        assert (tr.days, tr.hours, tr.minutes, tr.seconds) == (0, 0, 0, 0)

    def test_not_expired_just_before(self):
        tr = time_remaining(REGISTRATION_DEADLINE, REGISTRATION_DEADLINE - timedelta(milliseconds=500))
        assert tr.expired is False
        assert min(tr.days, tr.hours, tr.minutes, tr.seconds) >= 0

    def test_timezones_compare_by_instant(self):
        """The deadline is Thai time; 16:59:58 UTC is one second before it."""
        now = datetime(2026, 1, 5, 16, 59, 58, tzinfo=timezone.utc)
        assert time_remaining(REGISTRATION_DEADLINE, now) == TimeRemaining(0, 0, 0, 1, expired=False)

    def test_deadline_is_thai_time(self):
        assert REGISTRATION_DEADLINE.utcoffset() == timedelta(hours=7)
        assert REGISTRATION_DEADLINE == datetime(2026, 1, 5, 23, 59, 59, tzinfo=THAI_TZ)

    def test_countdown_parts_padding(self):
        assert countdown_parts(TimeRemaining(12, 3, 4, 5, expired=False)) == ["12", "03", "04", "05"]


class TestThaiFormatting:
    """Test Buddhist-era dates and registration labels."""

    def test_long_date(self):
        assert format_thai_date(date(2026, 2, 8)) == "8 กุมภาพันธ์ 2569"

    def test_short_date(self):
        assert format_thai_date(date(2026, 1, 5), short=True) == "5 ม.ค. 2569"

    def test_weekday(self):
        assert format_thai_date(date(2026, 1, 3), weekday=True) == "วันเสาร์ที่ 3 มกราคม 2569"

    @pytest.mark.parametrize("category,kind,needs,expected", [
        (Category.ELECTION, RegistrationKind.EARLY, True, "ต้องลงทะเบียนเลือกตั้งล่วงหน้า/นอกเขต"),
        (Category.REFERENDUM, RegistrationKind.OUTSIDE, True, "ต้องลงทะเบียนประชามตินอกเขต"),
        (Category.ELECTION, RegistrationKind.NONE, False, None),
    ])
    def test_registration_label(self, category, kind, needs, expected):
        record = ActionRecord(
            category=category, title="", date=date(2026, 2, 8), needs_registration=needs,
            registration_kind=kind, location="ภูเก็ต", resolved_location="ภูเก็ต", icon="",
        )
        assert registration_label(record) == expected
