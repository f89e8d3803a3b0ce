[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "submarine"
version = "0.1.0"
description = "Solvers for a submarine-themed series of programming puzzles: sonar sweeps, bingo, vents, lanternfish, syntax scoring, beacons and more."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "submarine", "bingo", "lanternfish", "seven-segment", "beacons"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
submarine-sonar = "submarine.sonar:main"
submarine-navigation = "submarine.navigation:main"
submarine-diagnostics = "submarine.diagnostics:main"
submarine-bingo = "submarine.bingo:main"
submarine-vents = "submarine.vents:main"
submarine-lanternfish = "submarine.lanternfish:main"
submarine-crabs = "submarine.crabs:main"
submarine-segments = "submarine.segments:main"
submarine-heightmap = "submarine.heightmap:main"
submarine-syntax = "submarine.syntax:main"
submarine-octopus = "submarine.octopus:main"
submarine-caves = "submarine.caves:main"
submarine-origami = "submarine.origami:main"
submarine-beacons = "submarine.beacons:main"
submarine-position = "submarine.position:main"

[tool.hatch.build.targets.wheel]
packages = ["submarine"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
