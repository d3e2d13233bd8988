import io

import pytest

from aocsolver.solutions.y2015_day01 import Elevator, Solution


class _ErrStream(io.TextIOBase):
    def read(self, size=-1):
        raise OSError("custom error")

    def readline(self, size=-1):
        raise OSError("custom error")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("(())", "0"),
        ("()()", "0"),
        ("(((", "3"),
        ("(()(()(", "3"),
        ("))(((((", "3"),
        ("())", "-1"),
        ("))(", "-1"),
        (")))", "-3"),
        (")())())", "-3"),
    ],
)
def test_part1(text, expected):
    assert Solution().part1(io.StringIO(text)) == expected


def test_part1_read_error():
    with pytest.raises(OSError):
        Solution().part1(_ErrStream())


@pytest.mark.parametrize("text, expected", [(")", "1"), ("()())", "5")])
def test_part2(text, expected):
    assert Solution().part2(io.StringIO(text)) == expected


def test_part2_read_error():
    with pytest.raises(OSError):
        Solution().part2(_ErrStream())


def test_elevator_moves_and_ignores_other_characters():
    elevator = Elevator()
    for step in "((x)\n(":
        elevator.move(step)
    assert elevator.floor == 2
    elevator.down()
    elevator.down()
    elevator.down()
    assert elevator.floor == -1
    elevator.up()
    assert elevator.floor == 0