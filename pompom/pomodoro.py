"""Command-line arguments and the durations they select."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

from pompom.config import Config, get_config
from pompom.types import Duration, Unit

_VERSION = "1.1.0"


@dataclass(frozen=True)
class Args:
    """Durations given on the command line and the unit they are in."""

    work_duration: int | None = None
    rest_duration: int | None = None
    long_rest_duration: int | None = None
    unit: Unit = Unit.MINUTES


def _non_negative(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text!r}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pompom", description="A no-nonsense cli pomodoro timer"
    )
    parser.add_argument("work_duration", nargs="?", type=_non_negative)
    parser.add_argument("rest_duration", nargs="?", type=_non_negative)
    parser.add_argument("long_rest_duration", nargs="?", type=_non_negative)
    parser.add_argument(
        "-u",
        "--unit",
        choices=[unit.value for unit in Unit],
        default=Unit.MINUTES.value,
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_VERSION}")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> Args:
    """Parse the command line; exits with a usage message on bad input."""
    namespace = _build_parser().parse_args(argv)
    return Args(
        work_duration=namespace.work_duration,
        rest_duration=namespace.rest_duration,
        long_rest_duration=namespace.long_rest_duration,
        unit=Unit(namespace.unit),
    )


def get_pomodoro(args: Args, config: Config | None = None) -> tuple[Duration, Duration, Duration]:
    """Pick work, rest and long-rest durations, preferring the command line."""
    if config is None:
        config = get_config()

    def choose(value: int | None, fallback: Duration) -> Duration:
        return fallback if value is None else args.unit.duration(value)

    return (
        choose(args.work_duration, config.work_duration),
        choose(args.rest_duration, config.rest_duration),
        choose(args.long_rest_duration, config.long_rest_duration),
    )