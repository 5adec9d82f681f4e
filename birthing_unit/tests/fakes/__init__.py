"""Fake implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
deterministically:

- FakeClock: Settable, advanceable "now"
- FakeRandomPort: Scripted choices and integers with call recording
"""

from .clock import DEFAULT_NOW, FakeClock
from .randomness import FakeRandomPort

__all__ = [
    "DEFAULT_NOW",
    "FakeClock",
    "FakeRandomPort",
]
