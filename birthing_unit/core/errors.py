"""Validation errors raised by the core domain.

Every error is a synchronous input-validation failure raised at the point
of the offending call. All of them subclass ValueError so adapters can
handle them with a single ``except ValueError`` at the boundary.
"""


class PersonValidationError(ValueError):
    """Base class for all domain validation failures."""

    message = "Invalid input."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class InvalidNameError(PersonValidationError):
    """Raised when a person name is empty or whitespace-only."""

    message = "Name must be a non-empty string."


class InvalidDateOfBirthError(PersonValidationError):
    """Raised when a date of birth is not a well-formed instant."""

    message = "Invalid date of birth."


class InvalidCountError(PersonValidationError):
    """Raised when bulk generation is asked for a negative count."""

    message = "Count must be non-negative."


class InvalidCollectionError(PersonValidationError):
    """Raised when add_people receives something other than a sequence of Persons."""

    message = "Input must be a sequence of Person objects."


class InvalidPersonError(PersonValidationError):
    """Raised when a non-Person value is passed where a Person is required."""

    message = "Invalid person object."


class InvalidLastNameError(PersonValidationError):
    """Raised when a last name is empty or whitespace-only."""

    message = "Last name must be a non-empty string."


class InvalidFactoryConfigError(PersonValidationError):
    """Raised when a FactoryConfig has an empty name pool or a bad age range."""

    message = "Invalid factory configuration."
