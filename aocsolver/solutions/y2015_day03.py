"""Perfectly Spherical Houses in a Vacuum: present deliveries."""

from __future__ import annotations

from collections import Counter
from typing import Sequence, TextIO

from ..constants import Day, Year

_MOVES = {
    "^": (0, 1),
    "v": (0, -1),
    ">": (1, 0),
    "<": (-1, 0),
}


class UnknownDirectionError(ValueError):
    """A delivery instruction is not one of ^ v > <."""

    def __init__(self, message: str = "unknown direction") -> None:
        super().__init__(message)


class Santa:
    """A deliveryman walking a grid and counting visits per house."""

    def __init__(self) -> None:
        self.location = (0, 0)
        self.visited: Counter[tuple[int, int]] = Counter({self.location: 1})

    def visit(self, address: str) -> None:
        """Move one house in the given direction and deliver there."""
        try:
            dx, dy = _MOVES[address]
        except KeyError:
            raise UnknownDirectionError(
                f"failed to visit address {address!r}: unknown direction"
            ) from None
        x, y = self.location
        self.location = (x + dx, y + dy)
        self.visited[self.location] += 1


class SantaDelivery:
    """One or two deliverymen taking turns on instructions."""

    def __init__(self, santas: Sequence[Santa]) -> None:
        self.santas = list(santas)

    def deliver(self, addresses: Sequence[str]) -> None:
        for i, address in enumerate(addresses):
            santa = self.santas[0]
            if i % 2 == 0 and len(self.santas) == 2:
                santa = self.santas[1]
            santa.visit(address)

    def houses_visited(self) -> int:
        """Number of distinct houses that got at least one present."""
        houses: set[tuple[int, int]] = set()
        for santa in self.santas:
            houses.update(santa.visited)
        return len(houses)


def make_addresses_list(stream: TextIO) -> list[str]:
    """Read instructions as single characters, skipping newlines."""
    return [char for char in stream.read() if char != "\n"]


def solve(stream: TextIO, santa_num: int) -> str:
    addresses = make_addresses_list(stream)
    delivery = SantaDelivery([Santa() for _ in range(santa_num)])
    delivery.deliver(addresses)
    return str(delivery.houses_visited())


class Solution:
    """Solution for 2015 day 3."""

    year = str(Year.Y2015)
    day = str(Day.DAY03)

    def part1(self, stream: TextIO) -> str:
        return solve(stream, 1)

    def part2(self, stream: TextIO) -> str:
        return solve(stream, 2)