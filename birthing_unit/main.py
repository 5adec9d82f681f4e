"""Composition root for the Birthing Unit.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Adapter instantiation (clock, random source)
- Core service initialization (factory, registry)
- Command selection and output

The registry lives in memory only, so every invocation starts from a
fresh registry seeded with random people.
"""

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from typing import Any

from birthing_unit.adapters.cli.commands import OUTPUT_FORMATS, CLICommandHandler, run_command
from birthing_unit.adapters.clock.system import FixedClock, SystemClock
from birthing_unit.adapters.randomness.stdlib import StdlibRandomSource
from birthing_unit.config import Settings, load_settings
from birthing_unit.core.factory import PersonFactory
from birthing_unit.core.ports import ClockPort
from birthing_unit.core.registry import BirthingUnit

COMMANDS = ("demo", "list", "bobs", "marry")


@dataclass(frozen=True)
class Components:
    """Wired application components."""

    clock: ClockPort
    factory: PersonFactory
    unit: BirthingUnit
    handler: CLICommandHandler


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def build_components(settings: Settings) -> Components:
    """Instantiate adapters and core services from settings.

    Args:
        settings: Validated application settings.

    Returns:
        Components wired together around a single clock.
    """
    logger = logging.getLogger(__name__)

    clock: ClockPort
    if settings.fixed_now is not None:
        clock = FixedClock(settings.fixed_now)
        logger.debug(f"Clock pinned to {clock.now().isoformat()}")
    else:
        clock = SystemClock()

    random_source = StdlibRandomSource(seed=settings.random_seed)
    if settings.random_seed is not None:
        logger.debug(f"Random source seeded with {settings.random_seed}")

    factory = PersonFactory(
        random=random_source,
        config=settings.factory_config(),
        clock=clock,
    )
    unit = BirthingUnit(clock=clock, max_name_length=settings.max_name_length)
    handler = CLICommandHandler(unit, factory, clock=clock)

    return Components(clock=clock, factory=factory, unit=unit, handler=handler)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="birthing-unit",
        description="Seed an in-memory registry with random people and query it.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="demo",
        choices=COMMANDS,
        help="Command to run after seeding (default: demo)",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=None,
        help="Number of random people to seed (default: settings demo_count)",
    )
    parser.add_argument(
        "--older-than-thirty",
        action="store_true",
        help="bobs: only include Bobs at least 30 years old",
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default="text",
        help="Output format for people listings",
    )
    parser.add_argument("--index", type=int, default=0, help="marry: registry position")
    parser.add_argument("--last-name", default=None, help="marry: last name to append")
    parser.add_argument("--env-file", default=None, help="Load settings from this .env file")
    return parser


def execute(components: Components, args: argparse.Namespace, count: int) -> list[dict[str, Any]]:
    """Seed the registry and run the selected command.

    Returns:
        Results of every step, in order. Stops after the first error.
    """
    handler = components.handler
    results = [handler.seed(count)]
    if results[0]["status"] != "success":
        return results

    if args.command == "demo":
        # List everyone, then the Bobs older than thirty
        results.append(run_command(handler, "list", {"format": args.format}))
        results.append(
            run_command(handler, "bobs", {"older_than_thirty": True, "format": args.format})
        )
    elif args.command == "list":
        results.append(run_command(handler, "list", {"format": args.format}))
    elif args.command == "bobs":
        results.append(
            run_command(
                handler,
                "bobs",
                {"older_than_thirty": args.older_than_thirty, "format": args.format},
            )
        )
    elif args.command == "marry":
        params: dict[str, Any] = {"index": args.index}
        if args.last_name is not None:
            params["last_name"] = args.last_name
        results.append(run_command(handler, "marry", params))

    return results


def _print_result(result: dict[str, Any]) -> None:
    """Print a command result, using plain text where the data is already text."""
    if result.get("status") == "success" and isinstance(result.get("data"), str):
        print(result["data"])
    else:
        print(json.dumps(result, indent=2, default=str))


def main(argv: list[str] | None = None) -> int:
    """Application entry point.

    Loads configuration, wires adapters, initializes core services,
    and runs the requested command.

    Exit codes:
        0: Successful run
        1: Command error or fatal error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    args = build_parser().parse_args(argv)
    logger = logging.getLogger(__name__)

    try:
        settings = load_settings(args.env_file)
        configure_logging(settings.log_level, settings.log_format)
        logger.debug("Loading Birthing Unit...")

        components = build_components(settings)
        count = args.count if args.count is not None else settings.demo_count
        results = execute(components, args, count)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user (SIGINT)")
        return 130
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        return 1

    for result in results:
        _print_result(result)

    return 0 if all(result.get("status") == "success" for result in results) else 1


if __name__ == "__main__":
    sys.exit(main())
