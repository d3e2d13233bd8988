"""Crossed Wires: finding where two wires intersect."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, Mapping, TextIO

from ..constants import Day, Year

_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)

_MOVES = {
    "U": (0, 1),
    "D": (0, -1),
    "R": (1, 0),
    "L": (-1, 0),
}


@dataclass(frozen=True)
class Pos:
    """A point on the wire grid."""

    x: int = 0
    y: int = 0

    def manhattan(self) -> int:
        """Taxicab distance from the central port."""
        return abs(self.x) + abs(self.y)


@dataclass
class Wire:
    """A wire laid out from the origin, remembering steps taken to each point."""

    pos: Pos = field(default_factory=Pos)
    steps: int = 0
    visits: dict[Pos, int] = field(default_factory=dict)

    def run(self, path: str) -> None:
        """Lay the wire along a path such as ``R8,U5,L5,D3``."""
        for move in path.split(","):
            if not move:
                raise ValueError("empty move in wire path")
            act, raw_steps = move[0], move[1:]
            if not _INT_RE.fullmatch(raw_steps):
                raise ValueError(f"failed to parse steps: {move!r}")
            count = int(raw_steps)
            delta = _MOVES.get(act)
            if delta is None:
                continue
            dx, dy = delta
            for _ in range(count):
                self.pos = Pos(self.pos.x + dx, self.pos.y + dy)
                self.steps += 1
                self.visits[self.pos] = self.steps


def find_cross(wm1: Mapping[Pos, int], wm2: Mapping[Pos, int]) -> list[Pos]:
    """Points present in both wire maps."""
    return [p for p in wm1 if p in wm2]


def _lines(stream: TextIO) -> Iterator[str]:
    for line in stream:
        line = line.rstrip("\n")
        if line.endswith("\r"):
            line = line[:-1]
        yield line


def run_wires(stream: TextIO) -> list[dict[Pos, int]]:
    """Lay out every wire in the input, one per line."""
    result = []
    for line in _lines(stream):
        wire = Wire()
        wire.run(line)
        result.append(wire.visits)
    return result


def _crossings(stream: TextIO) -> tuple[list[dict[Pos, int]], list[Pos]]:
    wires = run_wires(stream)
    if len(wires) < 2:
        raise ValueError("two wires are required")
    cross = find_cross(wires[0], wires[1])
    if not cross:
        raise ValueError("wires do not cross")
    return wires, cross


class Solution:
    """Solution for 2019 day 3."""

    year = str(Year.Y2019)
    day = str(Day.DAY03)

    def part1(self, stream: TextIO) -> str:
        _, cross = _crossings(stream)
        return str(min(p.manhattan() for p in cross))

    def part2(self, stream: TextIO) -> str:
        wires, cross = _crossings(stream)
        return str(min(wires[0][p] + wires[1][p] for p in cross))