"""Inventory Management System: box ID checksums."""

from __future__ import annotations

from collections import Counter
from itertools import combinations
from typing import TextIO

from ..constants import Day, Year


def make_boxes_list(stream: TextIO) -> list[str]:
    """Read box IDs, one per line."""
    lines = stream.read().split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def has_n_same_letters(s: str, n: int) -> bool:
    """Whether some letter occurs exactly ``n`` times in ``s``."""
    if n <= 0:
        return False
    return n in Counter(s).values()


def has_n_diff_letters(box1: str, box2: str, n: int) -> bool:
    """Whether equal-length IDs differ in exactly ``n`` positions."""
    if n < 0 or len(box1) != len(box2):
        return False
    return sum(a != b for a, b in zip(box1, box2)) == n


def get_common_boxes_part(box1: str, box2: str) -> str:
    """Letters shared at the same positions by two equal-length IDs."""
    if len(box1) != len(box2):
        return ""
    return "".join(a for a, b in zip(box1, box2) if a == b)


class Solution:
    """Solution for 2018 day 2."""

    year = str(Year.Y2018)
    day = str(Day.DAY02)

    def part1(self, stream: TextIO) -> str:
        boxes = make_boxes_list(stream)
        twos = sum(has_n_same_letters(box, 2) for box in boxes)
        threes = sum(has_n_same_letters(box, 3) for box in boxes)
        return str(twos * threes)

    def part2(self, stream: TextIO) -> str:
        boxes = make_boxes_list(stream)
        common = ""
        for box1, box2 in combinations(boxes, 2):
            if has_n_diff_letters(box1, box2, 1):
                common = get_common_boxes_part(box1, box2)
                break
        if not common:
            raise LookupError("not found")
        return common