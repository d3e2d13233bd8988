"""No Time for a Taxicab: walking the city grid."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TextIO

from ..constants import Day, Year

# Example command: L4, R5
_COMMAND_RE = re.compile(r"([LR])(\d+)", re.IGNORECASE | re.MULTILINE | re.DOTALL)


class Turn(str, Enum):
    """Which way to turn before walking."""

    LEFT = "L"
    RIGHT = "R"


class Direction(IntEnum):
    """Compass direction the cab is facing."""

    NORTH = 1
    EAST = 2
    SOUTH = 3
    WEST = 4

    def strike_to(self, turn: Turn) -> "Direction":
        """Direction after turning left or right."""
        if turn is Turn.RIGHT:
            return Direction.NORTH if self is Direction.WEST else Direction(self + 1)
        if turn is Turn.LEFT:
            return Direction.WEST if self is Direction.NORTH else Direction(self - 1)
        raise ValueError("invalid direction")


_STEPS = {
    Direction.NORTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, -1),
    Direction.WEST: (-1, 0),
}


@dataclass(frozen=True)
class Position:
    """A point on the city grid."""

    x: int = 0
    y: int = 0

    def manhattan(self) -> int:
        """Taxicab distance from the origin."""
        return abs(self.x) + abs(self.y)


class Navigator:
    """Tracks the current position and every point visited more than once."""

    def __init__(self) -> None:
        self.pos = Position()
        self.visited: set[Position] = set()
        self.revisited: list[Position] = []

    def walk(self, direction: Direction, steps: int) -> None:
        """Walk block by block, recording every position passed."""
        dx, dy = _STEPS[direction]
        for _ in range(steps):
            self.pos = Position(self.pos.x + dx, self.pos.y + dy)
            if self.pos in self.visited:
                self.revisited.append(self.pos)
            self.visited.add(self.pos)


class Cab:
    """Turns and walks following instructions, starting facing north."""

    def __init__(self) -> None:
        self.direction = Direction.NORTH
        self.navigator = Navigator()

    def move(self, turn: Turn, steps: int) -> None:
        self.direction = self.direction.strike_to(turn)
        self.navigator.walk(self.direction, steps)


def split_command(cmd: str) -> tuple[Turn, int]:
    """Parse a command like ``R5`` into its turn and step count."""
    match = _COMMAND_RE.search(cmd)
    if match is None:
        raise ValueError(f"invalid command: {cmd!r}")
    try:
        turn = Turn(match.group(1))
    except ValueError:
        raise ValueError(f"invalid turn value: {match.group(1)!r}") from None
    return turn, int(match.group(2))


def _drive(stream: TextIO) -> Cab:
    cab = Cab()
    for cmd in stream.read().split(", "):
        turn, steps = split_command(cmd)
        cab.move(turn, steps)
    return cab


class Solution:
    """Solution for 2016 day 1."""

    year = str(Year.Y2016)
    day = str(Day.DAY01)

    def part1(self, stream: TextIO) -> str:
        cab = _drive(stream)
        return str(cab.navigator.pos.manhattan())

    def part2(self, stream: TextIO) -> str:
        cab = _drive(stream)
        if not cab.navigator.revisited:
            raise ValueError("no revisited points")
        return str(cab.navigator.revisited[0].manhattan())