[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pompom"
version = "1.1.0"
description = "Building blocks for a no-nonsense pomodoro timer: durations, schedules, configuration and arguments"
requires-python = ">=3.11"
keywords = ["pomodoro", "timer", "productivity", "schedule", "configuration"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Utilities",
]
dependencies = [
    "platformdirs",
    "rich",
    "tomli-w",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["pompom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
