"""Core domain logic for the Birthing Unit.

This package contains zero external dependencies and represents
the pure business logic of the application. The clock and random
source are reached only through the ports in core.ports.
"""

from .ages import age_in_years, age_threshold, years_to_duration
from .errors import (
    InvalidCollectionError,
    InvalidCountError,
    InvalidDateOfBirthError,
    InvalidFactoryConfigError,
    InvalidLastNameError,
    InvalidNameError,
    InvalidPersonError,
    PersonValidationError,
)
from .factory import PersonFactory
from .models import FactoryConfig, Person
from .registry import BirthingUnit

__all__ = [
    "BirthingUnit",
    "FactoryConfig",
    "InvalidCollectionError",
    "InvalidCountError",
    "InvalidDateOfBirthError",
    "InvalidFactoryConfigError",
    "InvalidLastNameError",
    "InvalidNameError",
    "InvalidPersonError",
    "Person",
    "PersonFactory",
    "PersonValidationError",
    "age_in_years",
    "age_threshold",
    "years_to_duration",
]
