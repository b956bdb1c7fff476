[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reefdive"
version = "0.1.0"
description = "Solvers for a collection of undersea programming puzzles: sonar sweeps, bingo, lanternfish, packet decoding, snailfish arithmetic and more"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "algorithms", "simulation", "path-finding", "command-line"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
reefdive-sonar = "reefdive.sonar:main"
reefdive-dive = "reefdive.dive:main"
reefdive-diagnostic = "reefdive.diagnostic:main"
reefdive-bingo = "reefdive.bingo:main"
reefdive-vents = "reefdive.vents:main"
reefdive-lanternfish = "reefdive.lanternfish:main"
reefdive-crabs = "reefdive.crabs:main"
reefdive-segments = "reefdive.segments:main"
reefdive-basins = "reefdive.basins:main"
reefdive-syntax = "reefdive.syntax:main"
reefdive-octopus = "reefdive.octopus:main"
reefdive-caves = "reefdive.caves:main"
reefdive-origami = "reefdive.origami:main"
reefdive-polymer = "reefdive.polymer:main"
reefdive-chiton = "reefdive.chiton:main"
reefdive-packets = "reefdive.packets:main"
reefdive-trickshot = "reefdive.trickshot:main"
reefdive-snailfish = "reefdive.snailfish:main"

[tool.hatch.build.targets.wheel]
packages = ["reefdive"]

[tool.hatch.build.targets.sdist]
include = ["reefdive", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
