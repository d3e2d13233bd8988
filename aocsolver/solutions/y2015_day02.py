"""I Was Told There Would Be No Math: wrapping paper and ribbon."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, TextIO

from ..constants import Day, Year

_INT_RE = re.compile(r"[+-]?\d+")
_DELIM = "x"
_DIM_NUM = 3


def _lines(stream: TextIO) -> Iterator[str]:
    for line in stream:
        line = line.rstrip("\n")
        if line.endswith("\r"):
            line = line[:-1]
        yield line


@dataclass(frozen=True)
class Box:
    """A cuboid present box."""

    width: int
    height: int
    length: int

    def faces(self) -> list[tuple[int, int]]:
        """The three distinct faces as (width, length) pairs."""
        return [
            (self.width, self.height),
            (self.height, self.length),
            (self.length, self.width),
        ]

    def surface_with_extra(self) -> int:
        """Total surface area plus the area of the smallest face."""
        extra = 0
        area = 0
        for a, b in self.faces():
            square = a * b
            if extra == 0:
                extra = square
            if square < extra:
                extra = square
            area += square
        return area * 2 + extra

    def wrap_ribbon(self) -> int:
        """Smallest perimeter of any face."""
        first, second, _ = sorted((self.height, self.width, self.length))
        return first * 2 + second * 2

    def bow_ribbon(self) -> int:
        return self.width * self.height * self.length

    def ribbon(self) -> int:
        return self.bow_ribbon() + self.wrap_ribbon()


def box_from_dimensions(dimensions: str) -> Box:
    """Parse ``WxHxL`` into a box."""
    dims = dimensions.split(_DELIM)
    if len(dims) != _DIM_NUM:
        raise ValueError(f"invalid dimensions: {dimensions!r}")
    sides = []
    for raw in dims:
        if not _INT_RE.fullmatch(raw):
            raise ValueError(f"atoi dimension: {raw!r}")
        sides.append(int(raw))
    width, height, length = sides
    return Box(width=width, height=height, length=length)


class Solution:
    """Solution for 2015 day 2."""

    year = str(Year.Y2015)
    day = str(Day.DAY02)

    def part1(self, stream: TextIO) -> str:
        return str(sum(box_from_dimensions(line).surface_with_extra() for line in _lines(stream)))

    def part2(self, stream: TextIO) -> str:
        return str(sum(box_from_dimensions(line).ribbon() for line in _lines(stream)))