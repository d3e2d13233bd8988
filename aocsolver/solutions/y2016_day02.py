"""Bathroom Security: keypad door codes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

from ..constants import Day, Year

_MOVES = {
    "U": (0, -1),
    "D": (0, 1),
    "L": (-1, 0),
    "R": (1, 0),
}


@dataclass
class Keypad:
    """A keypad grid with the finger's position; empty cells are gaps."""

    grid: list[list[str]]
    x: int
    y: int

    def move(self, step: str) -> None:
        """Move the finger one key if a key exists there."""
        try:
            dx, dy = _MOVES[step]
        except KeyError:
            raise ValueError(f"unsupported move {step!r}") from None
        nx, ny = self.x + dx, self.y + dy
        if 0 <= ny < len(self.grid) and 0 <= nx < len(self.grid[ny]) and self.grid[ny][nx]:
            self.x, self.y = nx, ny

    def digit(self) -> str:
        """Key under the finger."""
        return self.grid[self.y][self.x]


def load_keypad_part1() -> Keypad:
    """Plain 3x3 keypad, starting at 5."""
    grid = [
        ["1", "2", "3"],
        ["4", "5", "6"],
        ["7", "8", "9"],
    ]
    return Keypad(grid=grid, x=1, y=1)


def load_keypad_part2() -> Keypad:
    """Diamond-shaped keypad, starting at 5."""
    grid = [
        ["", "", "1", "", ""],
        ["", "2", "3", "4", ""],
        ["5", "6", "7", "8", "9"],
        ["", "A", "B", "C", ""],
        ["", "", "D", "", ""],
    ]
    return Keypad(grid=grid, x=0, y=2)


def get_door_code(keypad: Keypad, stream: TextIO) -> str:
    """Follow instructions; each newline presses the current key."""
    code = []
    for char in stream.read():
        if char == "\n":
            code.append(keypad.digit())
            continue
        keypad.move(char)
    return "".join(code)


class Solution:
    """Solution for 2016 day 2."""

    year = str(Year.Y2016)
    day = str(Day.DAY02)

    def part1(self, stream: TextIO) -> str:
        return get_door_code(load_keypad_part1(), stream)

    def part2(self, stream: TextIO) -> str:
        return get_door_code(load_keypad_part2(), stream)