"""RandomPort backed by a private ``random.Random`` instance.

Not suitable for anything security sensitive.
"""

import random
from collections.abc import Sequence
from typing import TypeVar

from birthing_unit.core.ports import RandomPort

T = TypeVar("T")


class StdlibRandomSource(RandomPort):
    """Uniform draws from its own Mersenne Twister generator.

    The module-global generator is never touched, so seeding one source
    does not disturb any other code using ``random``.
    """

    def __init__(self, seed: int | None = None):
        """Initialize the generator.

        Args:
            seed: Optional seed. The same seed yields the same sequence.
        """
        self.seed = seed
        self._rng = random.Random(seed)

    def choice(self, options: Sequence[T]) -> T:
        return self._rng.choice(options)

    def randint(self, low: int, high: int) -> int:
        return self._rng.randint(low, high)
