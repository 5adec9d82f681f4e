"""Birthing Unit: an in-memory registry of person records.

Provides immutable Person values, a random Person factory for seeding
test data, and the BirthingUnit registry with name and age queries.
"""

__version__ = "0.1.0"
