"""Test suite for the Birthing Unit.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - No wall-clock or global-RNG dependence
   - Uses in-memory fakes for ports

2. adapters/: Tests for adapter implementations
   - System clock, fixed clock and stdlib random source

3. fakes/: Port implementations for testing
   - In-memory implementations of ClockPort and RandomPort
   - Used by core unit tests
"""
