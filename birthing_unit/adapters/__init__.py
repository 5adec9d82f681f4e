"""External adapters for the Birthing Unit.

This package provides implementations of the core port interfaces and
the command-line surface.

Adapter Organization:

- clock/: Sources of the current instant (system wall clock, fixed instant)
- randomness/: Random sources for the PersonFactory
- cli/: Command-line commands and output formatting
"""
