[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advutils"
version = "0.1.0"
description = "Small utilities for control and embedded-style code: IIR filters, PID, button debouncing, events, bounded containers and string hashes"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "pid",
    "iir",
    "filter",
    "debounce",
    "button",
    "event",
    "hash-table",
    "linked-list",
    "fnv1a",
    "embedded",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["advutils"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
