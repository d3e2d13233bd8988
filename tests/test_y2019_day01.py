import io

import pytest

from aocsolver.solutions.y2019_day01 import (
    Module,
    Solution,
    calc,
    calc_part1,
    calc_part2,
)

_INPUT = "12\n14\n1969\n100756\n"


class _FailingStream:
    def read(self, *args):
        raise OSError("custom error")


def test_year_and_day():
    assert Solution().year == "2019"
    assert Solution().day == "1"


@pytest.mark.parametrize(
    "mass, want",
    [(12, 2), (14, 2), (1969, 654), (100756, 33583)],
)
def test_module_fuel(mass, want):
    assert Module(mass).fuel() == want


@pytest.mark.parametrize(
    "mass, want",
    [(12, 2), (14, 2), (1969, 654), (100756, 33583)],
)
def test_calc_part1(mass, want):
    assert sum(calc_part1(Module(mass))) == want


@pytest.mark.parametrize(
    "mass, want",
    [(12, 2), (14, 2), (1969, 966), (100756, 50346)],
)
def test_calc_part2(mass, want):
    assert sum(calc_part2(Module(mass))) == want


def test_calc_part1_total():
    assert calc(io.StringIO(_INPUT), calc_part1) == "34241"


def test_calc_part2_total():
    assert calc(io.StringIO(_INPUT), calc_part2) == "51316"


def test_solution_parts():
    assert Solution().part1(io.StringIO(_INPUT)) == "34241"
    assert Solution().part2(io.StringIO(_INPUT)) == "51316"


def test_calc_invalid_number():
    with pytest.raises(ValueError):
        calc(io.StringIO("12\nabc\n"), calc_part1)


def test_calc_read_error():
    with pytest.raises(OSError):
        calc(_FailingStream(), calc_part1)