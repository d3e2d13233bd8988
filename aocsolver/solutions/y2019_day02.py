"""1202 Program Alarm: running the Intcode gravity assist program."""

from __future__ import annotations

from typing import TextIO

from ..constants import Day, Year
from ..intcomputer import IntComputer

_EXPECTED = 19690720
_NOUN = 12
_VERB = 2


def noun_verb(noun: int, verb: int) -> int:
    """Combine noun and verb into the puzzle answer."""
    return 100 * noun + verb


class Solution:
    """Solution for 2019 day 2."""

    year = str(Year.Y2019)
    day = str(Day.DAY02)

    def part1(self, stream: TextIO) -> str:
        computer = IntComputer.load(stream)
        computer.input(_NOUN, _VERB)
        return str(computer.execute())

    def part2(self, stream: TextIO) -> str:
        computer = IntComputer.load(stream)
        for noun in range(100):
            for verb in range(100):
                computer.reset()
                computer.input(noun, verb)
                if computer.execute() == _EXPECTED:
                    return str(noun_verb(noun, verb))
        raise LookupError("can't find noun and verb")