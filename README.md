# pompom

Building blocks for a no-nonsense pomodoro timer: time units and durations,
the periods of a pomodoro schedule, a TOML configuration file, command-line
argument parsing and a coloured start-up banner.

## Installation

```
pip install pompom
```

## Durations and periods

`pompom.types` holds the value types.

```python
from pompom.types import Duration, Period, Unit

work = Unit.MINUTES.duration(25)     # Duration(unit=Unit.MINUTES, value=25)
work.total_seconds()                 # 1500
Duration(Unit.HOURS, 1).total_seconds()  # 3600

Period.from_name("LongRest")         # Period.LONG_REST
Period.from_name("Nap")              # raises ValueError
```

`Unit` is one of `SECONDS`, `MINUTES` or `HOURS`. A `Duration` is frozen
and raises `ValueError` if its value is negative. `Period` is one of
`WORK`, `REST` or `LONG_REST`, named `Work`, `Rest` and `LongRest` in
text.

## Configuration

`pompom.config` reads and writes the configuration file.

```python
from pompom.config import config_path, get_config, load_config, parse_config

config = get_config()        # load_config(config_path())
config.work_duration         # Duration(unit=Unit.MINUTES, value=25) by default
config.schedule              # list of Period values
print(config.to_toml())
```

- `config_path()` is `config.toml` in the user configuration directory for
  `pompom`.
- `load_config(path)` creates the directory and, if the file is missing,
  writes the default configuration there and returns it. If the file cannot
  be read or is not valid TOML, it prints an error and returns the defaults.
- `parse_config(text)` builds a `Config` from TOML text. It raises
  `tomllib.TOMLDecodeError` for malformed TOML and `KeyError` when one of
  the top-level keys is missing.
- `default_config()` returns the defaults: 25 minutes of work, 5 minutes of
  rest, 30 minutes of long rest, the `Row` banner, and the schedule
  Work, Rest, Work, Rest, Work, Rest, Work, LongRest.

A configuration file looks like this:

```toml
schedule = ["Work", "Rest", "Work", "Rest", "Work", "Rest", "Work", "LongRest"]
splash_screen_variant = "Row"

[work_duration]
Minutes = 25

[rest_duration]
Minutes = 5

[long_rest_duration]
Minutes = 30
```

- `schedule`: the periods in order. Entries other than `Work`, `Rest` or
  `LongRest` are skipped. If `schedule` is not an array, the default
  schedule is used.
- `work_duration`, `rest_duration`, `long_rest_duration`: each a table
  with `Seconds`, `Minutes` or `Hours` set to a whole number, checked in
  that order. A negative number is taken as its absolute value; a value
  that is not a whole number gives the default. A table with none of the
  three keys prints an error and gives the default.
- `splash_screen_variant`: `Row`, `Stacked`, or any other string for no
  banner.

## Command-line arguments

`pompom.pomodoro` parses the arguments of a timer command and picks the
durations to use.

```python
from pompom.pomodoro import get_pomodoro, parse_args

args = parse_args(["50", "10", "--unit", "seconds"])
work, rest, long_rest = get_pomodoro(args, config)
```

`parse_args` takes up to three non-negative numbers, the work, rest and
long-rest durations, and `-u`/`--unit` with `seconds`, `minutes` (the
default) or `hours`. `-V`/`--version` prints the version. On bad input it
prints a usage message and exits. `get_pomodoro` uses each duration given
in `args` and takes the rest from `config`; without a `config` it calls
`get_config()`.

## Start-up banner

`pompom.splash_screen` draws the "pom" banner in magenta and cyan.

```python
from pompom.splash_screen import SplashScreen, render_splash, splash_screen

splash_screen(SplashScreen.ROW)          # prints side by side
text = render_splash(SplashScreen.STACKED)   # a rich Text, one above the other
SplashScreen.from_name("Other")          # SplashScreen.NONE
```

`SplashScreen.NONE` prints nothing and renders as empty text.

## What this package does not do

pompom provides the pieces above and nothing more. It has no command to
install and no timer loop: it does not count down periods, show progress
bars or quotes, send desktop notifications or play sounds. A program that
runs a timer has to do those things itself, using the durations and
schedule this package gives it.