"""Advent of Code puzzle solutions, input fetching and answer formatting."""

__version__ = "1.0.0"