"""Random source adapters.

Implementations of RandomPort used by the PersonFactory.
"""
