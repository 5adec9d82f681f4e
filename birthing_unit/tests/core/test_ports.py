"""Unit tests for port interface contracts.

Tests verify that port abstract base classes are properly defined
and that implementations must satisfy the interface contract.
"""

from collections.abc import Sequence
from datetime import UTC, datetime

import pytest

from birthing_unit.adapters.clock.system import FixedClock, SystemClock
from birthing_unit.adapters.randomness.stdlib import StdlibRandomSource
from birthing_unit.core.ports import ClockPort, RandomPort
from birthing_unit.tests.fakes import FakeClock, FakeRandomPort


class TestClockPort:
    """Tests for the ClockPort contract."""

    def test_cannot_instantiate_abstract_port(self) -> None:
        with pytest.raises(TypeError):
            ClockPort()  # type: ignore[abstract]

    def test_incomplete_implementation_rejected(self) -> None:
        class NoNow(ClockPort):
            pass

        with pytest.raises(TypeError):
            NoNow()  # type: ignore[abstract]

    def test_minimal_implementation(self) -> None:
        class Epoch(ClockPort):
            def now(self) -> datetime:
                return datetime(1970, 1, 1, tzinfo=UTC)

        assert Epoch().now().year == 1970

    @pytest.mark.parametrize("clock_cls", [SystemClock, FakeClock])
    def test_implementations_are_clock_ports(self, clock_cls: type) -> None:
        assert issubclass(clock_cls, ClockPort)

    def test_fixed_clock_is_clock_port(self) -> None:
        assert isinstance(FixedClock(datetime(2000, 1, 1, tzinfo=UTC)), ClockPort)


class TestRandomPort:
    """Tests for the RandomPort contract."""

    def test_cannot_instantiate_abstract_port(self) -> None:
        with pytest.raises(TypeError):
            RandomPort()  # type: ignore[abstract]

    def test_choice_only_implementation_rejected(self) -> None:
        class ChoiceOnly(RandomPort):
            def choice(self, options: Sequence):
                return options[0]

        with pytest.raises(TypeError):
            ChoiceOnly()  # type: ignore[abstract]

    @pytest.mark.parametrize("random_cls", [StdlibRandomSource, FakeRandomPort])
    def test_implementations_are_random_ports(self, random_cls: type) -> None:
        assert isinstance(random_cls(), RandomPort)
