"""Unit tests for fake port implementations.

These tests verify that the fakes work correctly as test doubles
and can be used confidently in tests of core domain logic.
"""

from datetime import UTC, datetime, timedelta

import pytest

from birthing_unit.tests.fakes import DEFAULT_NOW, FakeClock, FakeRandomPort


class TestFakeClock:
    """Tests for FakeClock."""

    def test_defaults_to_fixed_instant(self) -> None:
        clock = FakeClock()
        assert clock.now() == DEFAULT_NOW
        assert clock.now() == DEFAULT_NOW

    def test_counts_reads(self) -> None:
        clock = FakeClock()
        clock.now()
        clock.now()
        assert clock.now_call_count == 2

    def test_set_and_advance(self) -> None:
        clock = FakeClock()
        clock.set(datetime(2000, 1, 1, tzinfo=UTC))
        clock.advance(timedelta(days=1))
        assert clock.now() == datetime(2000, 1, 2, tzinfo=UTC)


class TestFakeRandomPort:
    """Tests for FakeRandomPort."""

    def test_returns_scripted_values_in_order(self) -> None:
        port = FakeRandomPort(choices=["b", "a"], ints=[5, 3])
        assert port.choice(["a", "b"]) == "b"
        assert port.choice(["a", "b"]) == "a"
        assert port.randint(1, 10) == 5
        assert port.randint(1, 10) == 3

    def test_falls_back_when_exhausted(self) -> None:
        port = FakeRandomPort()
        assert port.choice(["x", "y"]) == "x"
        assert port.randint(4, 9) == 4

    def test_records_calls(self) -> None:
        port = FakeRandomPort()
        port.choice(("Bob", "Betty"))
        port.randint(18, 85)
        assert port.choice_calls == [("Bob", "Betty")]
        assert port.randint_calls == [(18, 85)]

    def test_rejects_impossible_script(self) -> None:
        port = FakeRandomPort(choices=["z"], ints=[99])
        with pytest.raises(ValueError):
            port.choice(["a"])
        with pytest.raises(ValueError):
            port.randint(1, 10)

    def test_empty_options_raise(self) -> None:
        with pytest.raises(IndexError):
            FakeRandomPort().choice([])

    def test_queue_and_reset(self) -> None:
        port = FakeRandomPort()
        port.queue(choices=["b"], ints=[2])
        assert port.choice(["a", "b"]) == "b"
        port.reset()
        assert port.choice_calls == []
        assert port.randint(1, 3) == 1
