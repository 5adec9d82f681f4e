"""Unit tests for core domain logic.

These tests exercise core business logic without external dependencies.
The clock and random source are replaced with fakes from tests/fakes/.
"""
