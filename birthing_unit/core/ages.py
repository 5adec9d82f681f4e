"""Year and age arithmetic.

A year is fixed at exactly 365 days for every calculation in this package.
There is no leap-year or calendar-month adjustment, so the same constant
must be used wherever a year-based offset is computed.
"""

from datetime import UTC, datetime, timedelta

DAYS_IN_YEAR = 365
MS_PER_DAY = 24 * 60 * 60 * 1000

# Age assumed for a Person created without a date of birth
MIN_LEGAL_AGE = 16

YEAR = timedelta(milliseconds=DAYS_IN_YEAR * MS_PER_DAY)


def utc_now() -> datetime:
    """Return the current wall-clock instant as an aware UTC datetime."""
    return datetime.now(UTC)


def ensure_utc(value: datetime) -> datetime:
    """Normalize a datetime to aware UTC.

    Naive datetimes are interpreted as already being in UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def years_to_duration(years: int | float) -> timedelta:
    """Convert a number of years into a duration.

    Example: years_to_duration(1) == timedelta(days=365)
    """
    return timedelta(milliseconds=years * DAYS_IN_YEAR * MS_PER_DAY)


def age_in_years(dob: datetime, now: datetime) -> int:
    """Whole years elapsed between ``dob`` and ``now``, rounded down.

    A date of birth in the future yields a negative age.
    """
    return (ensure_utc(now) - ensure_utc(dob)) // YEAR


def age_threshold(years: int | float, now: datetime) -> datetime:
    """Instant at which someone born then turns ``years`` old as of ``now``."""
    return ensure_utc(now) - years_to_duration(years)
