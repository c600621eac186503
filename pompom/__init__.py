"""Durations, schedules, configuration and arguments for a pomodoro timer."""

__version__ = "1.1.0"