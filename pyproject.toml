[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fuku"
version = "0.1.0"
description = "Event and command buses, log filtering and a terminal log viewer model for supervising local services"
requires-python = ">=3.10"
keywords = [
    "terminal",
    "tui",
    "logs",
    "log-viewer",
    "event-bus",
    "pubsub",
    "ansi",
    "word-wrap",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Typing :: Typed",
]
dependencies = [
    "wcwidth>=0.2.6",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[tool.hatch.build.targets.wheel]
packages = ["fuku"]

[tool.hatch.build.targets.sdist]
include = [
    "fuku",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP", "SIM"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
