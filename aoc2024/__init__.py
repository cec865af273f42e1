"""Solutions to the 2024 Advent of Code puzzles, days 1 to 18, with shared helpers."""

__version__ = "0.1.0"