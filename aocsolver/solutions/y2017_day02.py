"""Corruption Checksum: spreadsheet row checksums."""

from __future__ import annotations

import re
from itertools import combinations
from typing import Callable, Sequence, TextIO

from ..constants import Day, Year

_INT_RE = re.compile(r"[+-]?\d+")


class ChecksumNotFoundError(LookupError):
    """No evenly dividing pair exists in a row."""

    def __init__(self, message: str = "checksum not found") -> None:
        super().__init__(message)


def _atoi(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"atoi: invalid syntax {text!r}")
    return int(text)


def min_max_difference(row: Sequence[str]) -> int:
    """Difference between the largest and smallest value of a row."""
    numbers = [_atoi(cell) for cell in row]
    return max(numbers) - min(numbers)


def even_division(row: Sequence[str]) -> int:
    """Result of dividing the only pair in a row where one divides the other."""
    numbers = [_atoi(cell) for cell in row]
    for d1, d2 in combinations(numbers, 2):
        a, b = (d1, d2) if d1 >= d2 else (d2, d1)
        if a % b == 0:
            return a // b
    raise ChecksumNotFoundError()


def find_checksum(stream: TextIO, row_checksum: Callable[[list[str]], int]) -> str:
    """Sum ``row_checksum`` over every line, cells split by spaces or tabs."""
    total = 0
    for line in stream:
        line = line.rstrip("\n")
        if line.endswith("\r"):
            line = line[:-1]
        total += row_checksum(line.replace("\t", " ").split(" "))
    return str(total)


class Solution:
    """Solution for 2017 day 2."""

    year = str(Year.Y2017)
    day = str(Day.DAY02)

    def part1(self, stream: TextIO) -> str:
        return find_checksum(stream, min_max_difference)

    def part2(self, stream: TextIO) -> str:
        return find_checksum(stream, even_division)