"""CLI command implementations for the Birthing Unit.

This adapter maps CLI commands (seed, list, bobs, marry) to PersonFactory
and BirthingUnit operations. It handles CLI-specific formatting and turns
domain validation errors into error results.
"""

import logging
from typing import Any

from birthing_unit.core.factory import PersonFactory
from birthing_unit.core.models import Person
from birthing_unit.core.ports import ClockPort
from birthing_unit.core.registry import BirthingUnit

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("json", "text")


class CLICommandHandler:
    """Handles CLI commands by delegating to the factory and registry."""

    def __init__(
        self,
        unit: BirthingUnit,
        factory: PersonFactory,
        clock: ClockPort | None = None,
    ):
        """Initialize the CLI command handler.

        Args:
            unit: Registry the commands read from and write to.
            factory: Factory used by the seed command.
            clock: Clock used for reporting ages. Defaults to the registry's.
        """
        self.unit = unit
        self.factory = factory
        self.clock = clock if clock is not None else unit.clock

    def seed(self, count: int, verbose: bool = False) -> dict[str, Any]:
        """Generate ``count`` random people and add them to the registry.

        Args:
            count: Number of people to generate.
            verbose: If True, log the generated labels.

        Returns:
            Dictionary with status and message.
        """
        try:
            people = self.factory.create_random_people(count)
            self.unit.add_people(people)

            if verbose:
                logger.info(
                    f"Seeded {len(people)} people",
                    extra={"labels": [person.label for person in people]},
                )

            return {
                "status": "success",
                "operation": "seed",
                "count": len(people),
                "total": len(self.unit),
                "message": f"Added {len(people)} random people",
            }

        except ValueError as e:
            logger.error(f"Failed to seed people: {e}")
            return {
                "status": "error",
                "operation": "seed",
                "message": str(e),
            }

    def list_people(self, output_format: str = "json") -> dict[str, Any]:
        """List every person in registry order.

        Args:
            output_format: Output format ('json', 'text'). Default 'json'.

        Returns:
            Dictionary with the formatted people or status/message on error.
        """
        return self._render("list", self.unit.get_all_people(), output_format)

    def find_bobs(
        self, older_than_thirty: bool = False, output_format: str = "json"
    ) -> dict[str, Any]:
        """List every Bob, optionally only those past their 30th birthday.

        Args:
            older_than_thirty: Restrict to Bobs at least 30 years old.
            output_format: Output format ('json', 'text'). Default 'json'.

        Returns:
            Dictionary with the formatted people or status/message on error.
        """
        result = self._render("bobs", self.unit.find_bobs(older_than_thirty), output_format)
        result["older_than_thirty"] = older_than_thirty
        return result

    def married_name(self, index: int, last_name: str) -> dict[str, Any]:
        """Compute the married name of the person at ``index``.

        Args:
            index: Zero-based position in the registry.
            last_name: Last name to append.

        Returns:
            Dictionary with the married name or status/message on error.
        """
        people = self.unit.get_all_people()
        if not 0 <= index < len(people):
            logger.error(f"No person at index {index}")
            return {
                "status": "error",
                "operation": "marry",
                "index": index,
                "message": f"No person at index {index} (registry holds {len(people)})",
            }

        try:
            married = self.unit.get_married_name(people[index], last_name)
        except ValueError as e:
            logger.error(f"Failed to compute married name: {e}")
            return {
                "status": "error",
                "operation": "marry",
                "index": index,
                "message": str(e),
            }

        return {
            "status": "success",
            "operation": "marry",
            "index": index,
            "name": people[index].name,
            "married_name": married,
        }

    def _render(
        self, operation: str, people: list[Person], output_format: str
    ) -> dict[str, Any]:
        """Format people for output in the requested format."""
        if output_format == "json":
            data: Any = [self._person_to_dict(person) for person in people]
        elif output_format == "text":
            data = "\n".join(person.label for person in people)
        else:
            return {
                "status": "error",
                "operation": operation,
                "message": f"Unsupported format: {output_format}",
            }

        return {
            "status": "success",
            "operation": operation,
            "count": len(people),
            "data": data,
        }

    def _person_to_dict(self, person: Person) -> dict[str, Any]:
        now = self.clock.now() if self.clock is not None else None
        return {
            "name": person.name,
            "dob": person.dob.isoformat(),
            "age": person.age(now),
            "label": person.label,
        }


def run_command(
    handler: CLICommandHandler,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Run a CLI command.

    Maps command names to handler methods.

    Args:
        handler: CLICommandHandler to execute against.
        command: Command name ('seed', 'list', 'bobs', 'marry').
        args: Dictionary of command arguments.

    Returns:
        Dictionary with command result.

    Raises:
        ValueError: If command is not recognized or a required argument is missing.
    """
    if command == "seed":
        return handler.seed(args.get("count", 0), args.get("verbose", False))

    elif command == "list":
        return handler.list_people(args.get("format", "json"))

    elif command == "bobs":
        return handler.find_bobs(
            args.get("older_than_thirty", False),
            args.get("format", "json"),
        )

    elif command == "marry":
        if "last_name" not in args:
            raise ValueError("Missing required parameter: last_name")
        return handler.married_name(args.get("index", 0), args["last_name"])

    else:
        raise ValueError(f"Unknown command: {command}")
