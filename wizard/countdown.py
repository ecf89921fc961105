# wizard/countdown.py — time left until the registration deadline
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from .constants import REGISTRATION_DEADLINE


@dataclass(frozen=True)
class TimeRemaining:
    days: int
    hours: int
    minutes: int
    seconds: int
    expired: bool


def time_remaining(deadline: datetime = REGISTRATION_DEADLINE, now: Optional[datetime] = None) -> TimeRemaining:
    """
    Whole days/hours/minutes/seconds until `deadline`.
    At or past the deadline every component is 0 and expired is True.
    Both datetimes must be timezone-aware.
    """
    now = now or datetime.now(timezone.utc)
    left = int((deadline - now).total_seconds())  # truncates sub-second remainders
    if now >= deadline or left <= 0:
        return TimeRemaining(0, 0, 0, 0, expired=(now >= deadline))
    days, rem = divmod(left, 86400)
    hours, rem = divmod(rem, 3600)
    minutes, seconds = divmod(rem, 60)
    return TimeRemaining(days, hours, minutes, seconds, expired=False)
