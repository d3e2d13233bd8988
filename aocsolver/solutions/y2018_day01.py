"""Chronal Calibration: frequency drift."""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field
from typing import TextIO

from ..constants import Day, Year

_DELTA_RE = re.compile(r"(?P<sign>[+-])(?P<digits>\d+)", re.DOTALL | re.ASCII)


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


@dataclass(frozen=True)
class FreqDelta:
    """A signed change of frequency."""

    sign: str
    d: int


def get_freq_delta(line: str) -> FreqDelta:
    """Parse a change such as ``+2`` or ``-13``."""
    match = _DELTA_RE.search(line)
    if match is None:
        raise ValueError(f"wrong matches for line[{line}], should be [3]")
    return FreqDelta(sign=match.group("sign"), d=int(match.group("digits")))


@dataclass
class Device:
    """Applies frequency changes and counts how often each frequency is reached."""

    frequency: int = 0
    seen: Counter = field(default_factory=lambda: Counter({0: 1}))

    def apply(self, delta: FreqDelta) -> None:
        if delta.sign == "+":
            self.frequency += delta.d
        elif delta.sign == "-":
            self.frequency -= delta.d
        self.seen[self.frequency] += 1

    def seen_twice(self, freq: int) -> bool:
        """Whether ``freq`` has been reached more than once."""
        return self.seen[freq] > 1


class Solution:
    """Solution for 2018 day 1."""

    year = str(Year.Y2018)
    day = str(Day.DAY01)

    def part1(self, stream: TextIO) -> str:
        device = Device()
        for line in _lines(stream.read()):
            device.apply(get_freq_delta(line))
        return str(device.frequency)

    def part2(self, stream: TextIO) -> str:
        lines = _lines(stream.read())
        if not lines:
            raise ValueError("no frequency changes given")
        device = Device()
        while True:
            for line in lines:
                device.apply(get_freq_delta(line))
                if device.seen_twice(device.frequency):
                    return str(device.frequency)