"""Port interfaces for the Birthing Unit core.

These abstract base classes define the boundaries between core domain
logic and the ambient services it depends on. Implementations live in the
adapters/ package; in-memory fakes live in tests/fakes/.

Both ports are driven ports (the core calls out to them):
   - ClockPort: Source of the current instant
   - RandomPort: Source of uniform random choices
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import datetime
from typing import TypeVar

T = TypeVar("T")


class ClockPort(ABC):
    """Port for reading the current time.

    The core reads "now" through this port at Person construction (when the
    date of birth defaults), on every age query and on every age-threshold
    filter. Results are time-varying and must not be memoized across calls.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current instant.

        Returns:
            Timezone-aware datetime in UTC.
        """


class RandomPort(ABC):
    """Port for drawing uniform random values.

    Implementations decide the underlying generator. Tests inject scripted
    sequences to obtain deterministic people.
    """

    @abstractmethod
    def choice(self, options: Sequence[T]) -> T:
        """Pick one element uniformly at random.

        Args:
            options: Non-empty sequence to choose from.

        Returns:
            One element of ``options``.

        Raises:
            IndexError: If ``options`` is empty.
        """

    @abstractmethod
    def randint(self, low: int, high: int) -> int:
        """Draw an integer uniformly from ``[low, high]`` inclusive.

        Args:
            low: Smallest value that may be returned.
            high: Largest value that may be returned.

        Returns:
            Integer N with low <= N <= high.
        """
