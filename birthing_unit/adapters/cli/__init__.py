"""Command-line interface adapters.

Provides CLI commands for working with the registry:
- seed: Generate random people and add them
- list: Show every stored person
- bobs: Show the Bobs, optionally only those over thirty
- marry: Compute a married name for a stored person
"""
