"""Puzzle name building."""

import os

from .errors import InvalidPuzzleNameError, InvalidYearError


def make_name(year: str, puzzle: str) -> str:
    """Join year and puzzle into a path-like puzzle name."""
    if not puzzle:
        raise InvalidPuzzleNameError()
    if not year:
        raise InvalidYearError()
    return os.path.join(year, puzzle)