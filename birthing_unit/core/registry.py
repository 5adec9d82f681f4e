"""BirthingUnit: the ordered in-memory registry of Person values.

Insertion order is preserved and observable, duplicates are allowed and
nothing is ever removed. The registry provides no internal locking; a
multi-threaded host must serialize add_people and snapshot reads itself.
"""

import logging
from datetime import datetime

from .ages import ensure_utc, utc_now
from .errors import InvalidCollectionError, InvalidLastNameError, InvalidPersonError
from .models import Person
from .ports import ClockPort

logger = logging.getLogger(__name__)

BOB = "Bob"
BOB_AGE_THRESHOLD = 30
MAX_NAME_LENGTH = 255

# Last names containing this token (any case) leave the name unchanged
MARRIED_NAME_ESCAPE_TOKEN = "test"


class BirthingUnit:
    """Collection of people with add, snapshot, search and married-name operations."""

    def __init__(
        self,
        clock: ClockPort | None = None,
        max_name_length: int = MAX_NAME_LENGTH,
    ):
        """Initialize an empty registry.

        Args:
            clock: ClockPort used for age-threshold filters. If None, the
                system UTC time is read on every query.
            max_name_length: Length at which married names are truncated.

        Raises:
            ValueError: If max_name_length is not a positive integer.
        """
        if (
            isinstance(max_name_length, bool)
            or not isinstance(max_name_length, int)
            or max_name_length <= 0
        ):
            raise ValueError(
                f"max_name_length must be a positive integer, got {max_name_length!r}"
            )
        self.clock = clock
        self.max_name_length = max_name_length
        self._people: list[Person] = []

    def __len__(self) -> int:
        return len(self._people)

    def _now(self) -> datetime:
        return ensure_utc(self.clock.now()) if self.clock is not None else utc_now()

    def add_people(self, people: list[Person] | tuple[Person, ...]) -> None:
        """Append people to the registry in the order given.

        Args:
            people: List or tuple of Person values. May be empty.

        Raises:
            InvalidCollectionError: If ``people`` is not a list or tuple, or
                holds anything other than Person values. The registry is
                left unchanged.
        """
        if not isinstance(people, (list, tuple)):
            raise InvalidCollectionError()
        if not all(isinstance(person, Person) for person in people):
            raise InvalidCollectionError()

        self._people.extend(people)
        logger.debug(f"Added {len(people)} people, registry size is now {len(self._people)}")

    def get_all_people(self) -> list[Person]:
        """Return a snapshot of all stored people.

        The returned list is newly allocated; changing it never affects the
        registry.
        """
        return list(self._people)

    def find_bobs(self, older_than_thirty: bool = False) -> list[Person]:
        """Find every person named exactly "Bob", in registry order.

        Args:
            older_than_thirty: If True, only include Bobs whose 30th birthday
                (by the 365-day year) has already passed.

        Returns:
            Matching people; empty list if there are none.
        """
        bobs = [person for person in self._people if person.name == BOB]
        if not older_than_thirty:
            return bobs

        now = self._now()
        return [person for person in bobs if person.is_at_least(BOB_AGE_THRESHOLD, now)]

    def get_married_name(self, person: Person, last_name: str) -> str:
        """Build the married name for ``person``.

        If ``last_name`` contains "test" in any case, the person's name is
        returned unchanged. Otherwise the name and last name are joined with
        a space and cut to ``max_name_length`` characters.

        Raises:
            InvalidPersonError: If ``person`` is not a Person.
            InvalidLastNameError: If ``last_name`` is empty or whitespace-only.
        """
        if not isinstance(person, Person):
            raise InvalidPersonError()
        if not isinstance(last_name, str) or not last_name.strip():
            raise InvalidLastNameError()

        if MARRIED_NAME_ESCAPE_TOKEN in last_name.lower():
            return person.name

        full_name = f"{person.name} {last_name}"
        return full_name[: self.max_name_length]
