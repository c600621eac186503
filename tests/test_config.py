import tomllib

import pytest

from pompom.config import Config, config_path, default_config, load_config, parse_config
from pompom.splash_screen import SplashScreen
from pompom.types import Duration, Period, Unit

BASE = """
schedule = ["Work", "Rest"]
splash_screen_variant = "Stacked"

[work_duration]
Minutes = 50

[rest_duration]
Minutes = 10

[long_rest_duration]
Hours = 1
"""


def _with(replacements):
    text = BASE
    for old, new in replacements.items():
        text = text.replace(old, new)
    return text


def test_default_config_values():
    config = default_config()
    assert config.work_duration == Duration(Unit.MINUTES, 25)
    assert config.rest_duration == Duration(Unit.MINUTES, 5)
    assert config.long_rest_duration == Duration(Unit.MINUTES, 30)
    assert config.splash_screen_variant is SplashScreen.ROW
    assert config.schedule == [Period.WORK, Period.REST] * 3 + [Period.WORK, Period.LONG_REST]


def test_to_toml_round_trip():
    assert parse_config(default_config().to_toml()) == default_config()


def test_to_toml_layout():
    table = tomllib.loads(default_config().to_toml())
    assert table["work_duration"] == {"Minutes": 25}
    assert table["splash_screen_variant"] == "Row"
    assert table["schedule"][-1] == "LongRest"


def test_parse_full_config():
    config = parse_config(BASE)
    assert config == Config(
        work_duration=Duration(Unit.MINUTES, 50),
        rest_duration=Duration(Unit.MINUTES, 10),
        long_rest_duration=Duration(Unit.HOURS, 1),
        splash_screen_variant=SplashScreen.STACKED,
        schedule=[Period.WORK, Period.REST],
    )


def test_seconds_take_priority():
    text = _with({"Minutes = 50": "Hours = 2\nMinutes = 50\nSeconds = 90"})
    assert parse_config(text).work_duration == Duration(Unit.SECONDS, 90)


def test_negative_value_made_positive():
    text = _with({"Minutes = 10": "Minutes = -10"})
    assert parse_config(text).rest_duration == Duration(Unit.MINUTES, 10)


def test_non_integer_falls_back_to_default():
    text = _with({"Minutes = 50": 'Seconds = "lots"\nMinutes = 50'})
    assert parse_config(text).work_duration == default_config().work_duration


def test_unknown_unit_reports_error(capsys):
    text = _with({"Hours = 1": "Days = 1"})
    config = parse_config(text)
    assert config.long_rest_duration == default_config().long_rest_duration
    assert "could not parse long_rest_duration" in capsys.readouterr().out


def test_schedule_skips_unknown_entries():
    text = _with({'["Work", "Rest"]': '["Work", "Nap", 3, "LongRest"]'})
    assert parse_config(text).schedule == [Period.WORK, Period.LONG_REST]


def test_schedule_not_array_uses_default():
    text = _with({'["Work", "Rest"]': '"Work"'})
    assert parse_config(text).schedule == default_config().schedule


def test_unknown_splash_means_none():
    text = _with({'"Stacked"': '"Fancy"'})
    assert parse_config(text).splash_screen_variant is SplashScreen.NONE


def test_non_string_splash_uses_default():
    text = _with({'"Stacked"': "5"})
    assert parse_config(text).splash_screen_variant is SplashScreen.ROW


def test_missing_key_raises():
    text = _with({'splash_screen_variant = "Stacked"': ""})
    with pytest.raises(KeyError):
        parse_config(text)


def test_config_path_name():
    path = config_path()
    assert path.name == "config.toml"
    assert "pompom" in str(path.parent)


def test_load_creates_file_with_defaults(tmp_path, capsys):
    path = tmp_path / "nested" / "config.toml"
    config = load_config(path)
    assert config == default_config()
    assert path.exists()
    assert parse_config(path.read_text(encoding="utf-8")) == default_config()
    assert "INFO" in capsys.readouterr().out


def test_load_reads_existing_file(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(BASE, encoding="utf-8")
    assert load_config(path).long_rest_duration == Duration(Unit.HOURS, 1)


def test_load_invalid_toml_uses_defaults(tmp_path, capsys):
    path = tmp_path / "config.toml"
    path.write_text("schedule = [\"Work\"", encoding="utf-8")
    assert load_config(path) == default_config()
    assert "ERROR" in capsys.readouterr().out


def test_load_unwritable_dir_uses_defaults(tmp_path, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    path = blocker / "sub" / "config.toml"
    assert load_config(path) == default_config()
    assert "WARNING" in capsys.readouterr().out