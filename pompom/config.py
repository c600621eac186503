"""Loading and storing the user's configuration file."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import platformdirs
import tomli_w
from rich.console import Console
from rich.markup import escape

from pompom.splash_screen import SplashScreen
from pompom.types import Duration, Period, Unit

_console = Console(highlight=False)

_DURATION_UNITS = (Unit.SECONDS, Unit.MINUTES, Unit.HOURS)


def _tag(unit: Unit) -> str:
    return unit.name.capitalize()


def _default_schedule() -> list[Period]:
    return [
        Period.WORK,
        Period.REST,
        Period.WORK,
        Period.REST,
        Period.WORK,
        Period.REST,
        Period.WORK,
        Period.LONG_REST,
    ]


@dataclass
class Config:
    """Durations, banner style and the order of periods."""

    work_duration: Duration = field(default_factory=lambda: Duration(Unit.MINUTES, 25))
    rest_duration: Duration = field(default_factory=lambda: Duration(Unit.MINUTES, 5))
    long_rest_duration: Duration = field(default_factory=lambda: Duration(Unit.MINUTES, 30))
    splash_screen_variant: SplashScreen = SplashScreen.ROW
    schedule: list[Period] = field(default_factory=_default_schedule)

    def to_toml(self) -> str:
        """Serialise the configuration as a TOML document."""
        document = {
            "work_duration": {_tag(self.work_duration.unit): self.work_duration.value},
            "rest_duration": {_tag(self.rest_duration.unit): self.rest_duration.value},
            "long_rest_duration": {
                _tag(self.long_rest_duration.unit): self.long_rest_duration.value
            },
            "splash_screen_variant": self.splash_screen_variant.value,
            "schedule": [period.value for period in self.schedule],
        }
        return tomli_w.dumps(document)


def default_config() -> Config:
    """The configuration used when no file overrides it."""
    return Config()


def config_path() -> Path:
    """Where the configuration file lives for this user."""
    return platformdirs.user_config_path("pompom", "LiquidZulu") / "config.toml"


def _parse_duration(entry: Any, fallback: Duration, name: str) -> Duration:
    if isinstance(entry, dict):
        for unit in _DURATION_UNITS:
            tag = _tag(unit)
            if tag in entry:
                value = entry[tag]
                if isinstance(value, int) and not isinstance(value, bool):
                    return Duration(unit, abs(value))
                return fallback
    _console.print(f"[red]ERROR[/red]: could not parse {name}", soft_wrap=True)
    return fallback


def _parse_schedule(entry: Any, fallback: list[Period]) -> list[Period]:
    if not isinstance(entry, list):
        return fallback
    schedule = []
    for item in entry:
        if not isinstance(item, str):
            continue
        try:
            schedule.append(Period.from_name(item))
        except ValueError:
            continue
    return schedule


def parse_config(text: str) -> Config:
    """Build a configuration from TOML text.

    Raises tomllib.TOMLDecodeError for malformed TOML and KeyError when a
    top-level key is missing. Unreadable values fall back to the defaults.
    """
    table = tomllib.loads(text)
    defaults = default_config()
    schedule = _parse_schedule(table["schedule"], defaults.schedule)
    work = _parse_duration(table["work_duration"], defaults.work_duration, "work_duration")
    rest = _parse_duration(table["rest_duration"], defaults.rest_duration, "rest_duration")
    long_rest = _parse_duration(
        table["long_rest_duration"], defaults.long_rest_duration, "long_rest_duration"
    )
    variant_entry = table["splash_screen_variant"]
    variant = (
        SplashScreen.from_name(variant_entry)
        if isinstance(variant_entry, str)
        else defaults.splash_screen_variant
    )
    return Config(
        work_duration=work,
        rest_duration=rest,
        long_rest_duration=long_rest,
        splash_screen_variant=variant,
        schedule=schedule,
    )


def load_config(path: Path) -> Config:
    """Read the configuration at ``path``, creating it with defaults if absent."""
    path = Path(path)
    directory = path.parent
    if not directory.exists():
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as error:
            _console.print(
                f"[yellow]WARNING[/yellow]: Unable to create config dir "
                f"{escape(str(directory))}\n\tUsing default config.\n\n{escape(str(error))}",
                soft_wrap=True,
            )
            return default_config()

    if not path.exists():
        config = default_config()
        try:
            path.write_text(config.to_toml(), encoding="utf-8")
        except OSError as error:
            _console.print(
                f"[yellow]WARNING[/yellow]: unable to create config file at "
                f"{escape(str(directory))}\n{escape(str(error))}",
                soft_wrap=True,
            )
        else:
            _console.print(
                f"[blue]INFO[/blue]: new config file created at {escape(str(directory))}",
                soft_wrap=True,
            )
        return config

    try:
        contents = path.read_text(encoding="utf-8")
    except OSError as error:
        _console.print(
            f"[red]ERROR[/red] at reading contents of {escape(str(path))}: "
            f"{escape(str(error))}",
            soft_wrap=True,
        )
        return default_config()

    try:
        return parse_config(contents)
    except tomllib.TOMLDecodeError as error:
        _console.print(
            f"[red]ERROR[/red] at parsing contents of {escape(str(path))} as Table: "
            f"{escape(str(error))}",
            soft_wrap=True,
        )
        return default_config()


def get_config() -> Config:
    """Load the configuration from the user's configuration directory."""
    return load_config(config_path())