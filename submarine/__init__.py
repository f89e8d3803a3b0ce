"""Solvers for submarine-themed puzzles: sonar, navigation, diagnostics, bingo,
vents, lanternfish, crabs, seven-segment displays, height maps, syntax scoring,
octopuses, caves, origami, positions and beacon scanners."""

__version__ = "0.1.0"