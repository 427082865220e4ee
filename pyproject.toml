[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cwars"
version = "0.1.0"
description = "A small real-time strategy prototype with a scrolling camera and box selection of units"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["game", "rts", "strategy", "pygame"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cwars = "cwars.game:main"

[tool.hatch.build.targets.wheel]
packages = ["cwars"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
