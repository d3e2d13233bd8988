"""Secure Container: counting valid passwords in a range."""

from __future__ import annotations

import re
from collections import Counter
from typing import Callable, TextIO

from ..constants import Day, Year

_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)


def _atoi(text: str, what: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"failed to convert {what} to int: {text!r}")
    return int(text)


def int_to_digits(n: int) -> tuple[int, ...]:
    """The six lowest decimal digits of ``n``, most significant first."""
    return (
        (n % 1000000) // 100000,
        (n % 100000) // 10000,
        (n % 10000) // 1000,
        (n % 1000) // 100,
        (n % 100) // 10,
        n % 10,
    )


def _pairs(n: int) -> list[tuple[int, int]]:
    digits = int_to_digits(n)
    return list(zip(digits, digits[1:]))


def is_increasing(n: int) -> bool:
    """Digits never decrease from left to right."""
    return all(b >= a for a, b in _pairs(n))


def has_repeated(n: int) -> bool:
    """Two adjacent digits are the same."""
    return any(a == b for a, b in _pairs(n))


def has_repeated_with_double(n: int) -> bool:
    """Some digit from 1 to 9 forms exactly one adjacent pair."""
    repeated = Counter(b for a, b in _pairs(n) if a == b)
    return any(repeated.get(d) == 1 for d in range(1, 10))


def is_password_part1(n: int) -> bool:
    return is_increasing(n) and has_repeated(n)


def is_password_part2(n: int) -> bool:
    return is_increasing(n) and has_repeated_with_double(n)


def find_passwords(low: str, high: str, criteria: Callable[[int], bool]) -> int:
    """Count numbers in ``low..high`` inclusive that meet ``criteria``."""
    lo = _atoi(low, "low")
    hi = _atoi(high, "high")
    return sum(1 for n in range(lo, hi + 1) if criteria(n))


def _run(stream: TextIO, criteria: Callable[[int], bool]) -> str:
    limits = stream.read().strip().split("-")
    if len(limits) != 2:
        raise ValueError("invalid number of limits")
    return str(find_passwords(limits[0], limits[1], criteria))


class Solution:
    """Solution for 2019 day 4."""

    year = str(Year.Y2019)
    day = str(Day.DAY04)

    def part1(self, stream: TextIO) -> str:
        return _run(stream, is_password_part1)

    def part2(self, stream: TextIO) -> str:
        return _run(stream, is_password_part2)