"""Clock adapters.

Implementations of ClockPort for reading the current instant.
"""
