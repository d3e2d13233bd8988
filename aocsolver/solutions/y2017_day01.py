"""Inverse Captcha: sum of matching digits."""

from __future__ import annotations

from typing import Sequence, TextIO

from ..constants import Day, Year

_DIGITS = "0123456789"


def make_list(stream: TextIO) -> list[int]:
    """Read single digits, skipping newlines."""
    values = []
    for char in stream.read():
        if char == "\n":
            continue
        if char not in _DIGITS:
            raise ValueError(f"not a digit: {char!r}")
        values.append(int(char))
    return values


def matching_sum(values: Sequence[int], shift: int, circular: bool) -> int:
    """Sum of digits equal to the digit ``shift`` places ahead."""
    values = list(values)
    if circular:
        others = values[shift:] + values[:shift]
    else:
        others = values[shift:]
    return sum(x for x, y in zip(values, others) if x == y)


class Solution:
    """Solution for 2017 day 1."""

    year = str(Year.Y2017)
    day = str(Day.DAY01)

    def part1(self, stream: TextIO) -> str:
        return str(matching_sum(make_list(stream), 1, True))

    def part2(self, stream: TextIO) -> str:
        values = make_list(stream)
        return str(matching_sum(values, len(values) // 2, True))