"""Clock adapters backed by the system wall clock or a pinned instant."""

from datetime import datetime

from birthing_unit.core.ages import ensure_utc, utc_now
from birthing_unit.core.ports import ClockPort


class SystemClock(ClockPort):
    """Reads the real wall clock in UTC on every call."""

    def now(self) -> datetime:
        return utc_now()


class FixedClock(ClockPort):
    """Always reports the same instant.

    Used when a reproducible "now" is configured for the demo.
    """

    def __init__(self, instant: datetime):
        """Initialize with the instant to report (naive values are read as UTC)."""
        self.instant = ensure_utc(instant)

    def now(self) -> datetime:
        return self.instant
