"""Tests for clock and random source adapters."""
