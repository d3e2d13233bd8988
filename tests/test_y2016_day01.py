import io

import pytest

from aocsolver.solutions.y2016_day01 import (
    Cab,
    Direction,
    Navigator,
    Position,
    Solution,
    Turn,
    split_command,
)


class _FailingStream(io.TextIOBase):
    def read(self, size=-1):
        raise OSError("custom error")

    def readline(self, size=-1):
        raise OSError("custom error")


def test_year_and_day():
    solution = Solution()
    assert solution.year == "2016"
    assert solution.day == "1"


@pytest.mark.parametrize(
    "text, want",
    [
        ("R2, L3", "5"),
        ("R2, R2, R2", "2"),
        ("R5, L5, R5, R3", "12"),
    ],
)
def test_part1(text, want):
    assert Solution().part1(io.StringIO(text)) == want


def test_part1_read_error():
    with pytest.raises(OSError):
        Solution().part1(_FailingStream())


def test_part2():
    assert Solution().part2(io.StringIO("R8, R4, R4, R8")) == "4"


def test_part2_read_error():
    with pytest.raises(OSError):
        Solution().part2(_FailingStream())


def test_part2_no_revisited():
    with pytest.raises(ValueError):
        Solution().part2(io.StringIO("R2, L3"))


def test_part1_invalid_command():
    with pytest.raises(ValueError):
        Solution().part1(io.StringIO("X2, L3"))


@pytest.mark.parametrize(
    "start, turn, want",
    [
        (Direction.NORTH, Turn.RIGHT, Direction.EAST),
        (Direction.WEST, Turn.RIGHT, Direction.NORTH),
        (Direction.NORTH, Turn.LEFT, Direction.WEST),
        (Direction.SOUTH, Turn.LEFT, Direction.EAST),
    ],
)
def test_strike_to(start, turn, want):
    assert start.strike_to(turn) is want


def test_split_command():
    assert split_command("R5") == (Turn.RIGHT, 5)
    assert split_command("L12\n") == (Turn.LEFT, 12)


@pytest.mark.parametrize("cmd", ["", "X3", "l3"])
def test_split_command_invalid(cmd):
    with pytest.raises(ValueError):
        split_command(cmd)


def test_manhattan():
    assert Position(-3, 4).manhattan() == 7


def test_navigator_walk_records_revisits():
    nav = Navigator()
    nav.walk(Direction.NORTH, 2)
    nav.walk(Direction.SOUTH, 1)
    assert nav.pos == Position(0, 1)
    assert nav.revisited == [Position(0, 1)]


def test_cab_move():
    cab = Cab()
    cab.move(Turn.RIGHT, 2)
    assert cab.direction is Direction.EAST
    assert cab.navigator.pos == Position(2, 0)