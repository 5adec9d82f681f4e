"""Fake RandomPort implementation for testing."""

from collections.abc import Sequence
from typing import Any, TypeVar

from birthing_unit.core.ports import RandomPort

T = TypeVar("T")


class FakeRandomPort(RandomPort):
    """Scripted random source for testing.

    Queued choices and integers are returned in order. Once a queue is
    exhausted, choice() returns the first option and randint() returns the
    lower bound. All calls are recorded for assertion.
    """

    def __init__(
        self,
        choices: Sequence[Any] = (),
        ints: Sequence[int] = (),
    ) -> None:
        """Initialize with scripted values."""
        self.queued_choices: list[Any] = list(choices)
        self.queued_ints: list[int] = list(ints)
        self.choice_calls: list[tuple[Any, ...]] = []
        self.randint_calls: list[tuple[int, int]] = []

    def choice(self, options: Sequence[T]) -> T:
        """Return the next queued choice, which must be one of ``options``."""
        self.choice_calls.append(tuple(options))
        if not options:
            raise IndexError("Cannot choose from an empty sequence")
        if not self.queued_choices:
            return options[0]
        value = self.queued_choices.pop(0)
        if value not in options:
            raise ValueError(f"Scripted choice {value!r} is not among {tuple(options)!r}")
        return value

    def randint(self, low: int, high: int) -> int:
        """Return the next queued integer, which must lie within [low, high]."""
        self.randint_calls.append((low, high))
        if not self.queued_ints:
            return low
        value = self.queued_ints.pop(0)
        if not low <= value <= high:
            raise ValueError(f"Scripted int {value} is outside [{low}, {high}]")
        return value

    def queue(self, choices: Sequence[Any] = (), ints: Sequence[int] = ()) -> None:
        """Append more scripted values."""
        self.queued_choices.extend(choices)
        self.queued_ints.extend(ints)

    def reset(self) -> None:
        """Clear scripted values and recorded calls."""
        self.queued_choices.clear()
        self.queued_ints.clear()
        self.choice_calls.clear()
        self.randint_calls.clear()
