"""Not Quite Lisp: Santa's elevator floors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

from ..constants import Day, Year

UP = "("
DOWN = ")"

GROUND = 0
BASEMENT = -1


@dataclass
class Elevator:
    """Tracks the current floor."""

    floor: int = GROUND

    def up(self) -> None:
        self.floor += 1

    def down(self) -> None:
        self.floor -= 1

    def move(self, step: str) -> None:
        """Apply one instruction; characters other than parentheses are ignored."""
        if step == UP:
            self.up()
        elif step == DOWN:
            self.down()


class Solution:
    """Solution for 2015 day 1."""

    year = str(Year.Y2015)
    day = str(Day.DAY01)

    def part1(self, stream: TextIO) -> str:
        elevator = Elevator()
        for char in stream.read():
            elevator.move(char)
        return str(elevator.floor)

    def part2(self, stream: TextIO) -> str:
        elevator = Elevator()
        position = 0
        for char in stream.read():
            if elevator.floor == BASEMENT:
                break
            position += 1
            elevator.move(char)
        return str(position)