"""Domain models for the Birthing Unit.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import InitVar, dataclass
from datetime import datetime

from .ages import (
    MIN_LEGAL_AGE,
    age_in_years,
    age_threshold,
    ensure_utc,
    utc_now,
    years_to_duration,
)
from .errors import InvalidDateOfBirthError, InvalidFactoryConfigError, InvalidNameError
from .ports import ClockPort

DEFAULT_NAMES: tuple[str, ...] = ("Bob", "Betty")
MIN_RANDOM_AGE = 18
MAX_RANDOM_AGE = 85


def is_valid_name(name: object) -> bool:
    """True if ``name`` is a string with at least one non-whitespace character."""
    return isinstance(name, str) and bool(name.strip())


def _parse_dob(value: object) -> datetime:
    """Coerce a datetime or ISO 8601 string into an aware UTC datetime."""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError as e:
            raise InvalidDateOfBirthError() from e
    if not isinstance(value, datetime):
        raise InvalidDateOfBirthError()
    # Offsets near datetime.min or datetime.max cannot be shifted to UTC
    try:
        return ensure_utc(value)
    except OverflowError as e:
        raise InvalidDateOfBirthError() from e


@dataclass(frozen=True, eq=False)
class Person:
    """A named individual with a date of birth.

    Immutable once created. Equality is identity-based: two Persons with the
    same name and date of birth are still distinct registry entries.

    The date of birth may be given as a datetime (naive values are read as
    UTC) or as an ISO 8601 string. When omitted it defaults to exactly
    MIN_LEGAL_AGE years before the clock's current instant, computed at
    construction time.
    """

    name: str
    dob: datetime = None  # type: ignore[assignment]  # filled in __post_init__
    clock: InitVar[ClockPort | None] = None

    def __post_init__(self, clock: ClockPort | None) -> None:
        """Validate the name and normalize the date of birth."""
        if not is_valid_name(self.name):
            raise InvalidNameError()

        if self.dob is None:
            now = clock.now() if clock is not None else utc_now()
            dob = ensure_utc(now) - years_to_duration(MIN_LEGAL_AGE)
        else:
            dob = _parse_dob(self.dob)
        object.__setattr__(self, "dob", dob)

    @property
    def label(self) -> str:
        """Name followed by the UTC calendar date of birth.

        Example: "Bob (1990-05-12)"
        """
        return f"{self.name} ({self.dob.date().isoformat()})"

    def age(self, now: datetime | None = None) -> int:
        """Current age in whole years, recomputed on every call."""
        return age_in_years(self.dob, now if now is not None else utc_now())

    def is_at_least(self, years: int | float, now: datetime) -> bool:
        """True if this person had turned ``years`` old by ``now``."""
        return self.dob <= age_threshold(years, now)

    def __repr__(self) -> str:
        return f"Person(name={self.name!r}, dob={self.dob.isoformat()!r})"


@dataclass(frozen=True)
class FactoryConfig:
    """Name pool and inclusive age range used to generate random people."""

    names: tuple[str, ...] = DEFAULT_NAMES
    min_age: int = MIN_RANDOM_AGE
    max_age: int = MAX_RANDOM_AGE

    def __post_init__(self) -> None:
        """Validate the pool and age range."""
        if not isinstance(self.names, tuple):
            object.__setattr__(self, "names", tuple(self.names))
        if not self.names:
            raise InvalidFactoryConfigError("Name pool must not be empty.")
        if not all(is_valid_name(name) for name in self.names):
            raise InvalidFactoryConfigError("Name pool entries must be non-empty strings.")
        for field_name in ("min_age", "max_age"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidFactoryConfigError(
                    f"{field_name} must be an integer, got {value!r}"
                )
        if self.min_age < 0:
            raise InvalidFactoryConfigError(
                f"min_age must be non-negative, got {self.min_age}"
            )
        if self.max_age < self.min_age:
            raise InvalidFactoryConfigError(
                f"max_age ({self.max_age}) cannot be less than min_age ({self.min_age})"
            )
