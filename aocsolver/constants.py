"""Puzzle days, years and shared display strings."""

from enum import IntEnum

UNKNOWN = "unknown"
UNSOLVED = "not solved"
UNDEFINED = "undefined"
IN_PROGRESS = "in progress"

# Environment variable holding the site session cookie.
AOC_SESSION = "AOC_SESSION"


class Day(IntEnum):
    """Puzzle day; its string form is the plain day number."""

    DAY01 = 1
    DAY02 = 2
    DAY03 = 3
    DAY04 = 4
    DAY05 = 5
    DAY06 = 6
    DAY07 = 7
    DAY08 = 8
    DAY09 = 9
    DAY10 = 10
    DAY11 = 11
    DAY12 = 12
    DAY13 = 13
    DAY14 = 14
    DAY15 = 15
    DAY16 = 16
    DAY17 = 17
    DAY18 = 18
    DAY19 = 19
    DAY20 = 20
    DAY21 = 21
    DAY22 = 22
    DAY23 = 23
    DAY24 = 24
    DAY25 = 25

    def __str__(self) -> str:
        return str(self.value)


class Year(IntEnum):
    """Puzzle year; its string form is the year number."""

    Y2015 = 2015
    Y2016 = 2016
    Y2017 = 2017
    Y2018 = 2018
    Y2019 = 2019
    Y2020 = 2020
    Y2021 = 2021
    Y2022 = 2022
    Y2023 = 2023
    Y2024 = 2024

    def __str__(self) -> str:
        return str(self.value)