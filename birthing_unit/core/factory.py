"""Random Person generation for seeding test and demo data."""

import logging
from datetime import datetime

from .ages import ensure_utc, utc_now, years_to_duration
from .errors import InvalidCountError
from .models import FactoryConfig, Person
from .ports import ClockPort, RandomPort

logger = logging.getLogger(__name__)


class PersonFactory:
    """Produces Person values with random names and ages.

    Names are drawn uniformly from the configured pool and ages uniformly
    from the inclusive [min_age, max_age] range. Both the random source and
    the clock are injected so tests can obtain deterministic people.
    """

    def __init__(
        self,
        random: RandomPort,
        config: FactoryConfig | None = None,
        clock: ClockPort | None = None,
    ):
        """Initialize the factory.

        Args:
            random: RandomPort implementation used for names and ages.
            config: Name pool and age range. Defaults to FactoryConfig().
            clock: ClockPort implementation. If None, the system UTC time
                is read on every generation.
        """
        self.config = config or FactoryConfig()
        self.random = random
        self.clock = clock

    def _now(self) -> datetime:
        return ensure_utc(self.clock.now()) if self.clock is not None else utc_now()

    def create_random_person(self) -> Person:
        """Create one person with a random name and age."""
        name = self.random.choice(self.config.names)
        age = self.random.randint(self.config.min_age, self.config.max_age)
        dob = self._now() - years_to_duration(age)

        logger.debug(f"Generated person {name!r} aged {age}")
        return Person(name, dob)

    def create_random_people(self, count: int) -> list[Person]:
        """Create ``count`` independently generated people.

        Args:
            count: Number of people to generate. Zero yields an empty list.

        Returns:
            People in generation order.

        Raises:
            InvalidCountError: If count is negative or not an integer.
        """
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise InvalidCountError()

        people = [self.create_random_person() for _ in range(count)]
        logger.debug(f"Generated {len(people)} random people")
        return people
