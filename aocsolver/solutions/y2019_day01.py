"""The Tyranny of the Rocket Equation: fuel requirements."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, TextIO

from ..constants import Day, Year

_DIV_FACTOR = 3
_SUB_FACTOR = 2
_END_NUM = 1
_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


@dataclass
class Module:
    """A spacecraft module of a given mass."""

    mass: int

    def fuel(self) -> int:
        """Mass divided by three, rounded toward zero, minus two."""
        return _trunc_div(self.mass, _DIV_FACTOR) - _SUB_FACTOR


def calc_part1(module: Module) -> Iterator[int]:
    """Fuel for the module's mass alone."""
    yield module.fuel()


def calc_part2(module: Module) -> Iterator[int]:
    """Fuel for the module, then fuel for that fuel, until it is negligible."""
    mass = module.mass
    while True:
        fuel = Module(mass).fuel()
        yield fuel
        if _trunc_div(fuel, _DIV_FACTOR) <= _END_NUM:
            break
        mass = fuel


def calc(stream: TextIO, calc_fn: Callable[[Module], Iterable[int]]) -> str:
    """Sum fuel over all module masses, one per line."""
    lines = stream.read().split("\n")
    if lines[-1] == "":
        lines.pop()
    total = 0
    for line in lines:
        line = line[:-1] if line.endswith("\r") else line
        if not _INT_RE.fullmatch(line):
            raise ValueError(f"failed to parse int: {line!r}")
        total += sum(calc_fn(Module(int(line))))
    return str(total)


class Solution:
    """Solution for 2019 day 1."""

    year = str(Year.Y2019)
    day = str(Day.DAY01)

    def part1(self, stream: TextIO) -> str:
        return calc(stream, calc_part1)

    def part2(self, stream: TextIO) -> str:
        return calc(stream, calc_part2)