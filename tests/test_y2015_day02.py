import io

import pytest

from aocsolver.solutions.y2015_day02 import Box, Solution, box_from_dimensions


class _ErrStream(io.TextIOBase):
    def read(self, size=-1):
        raise OSError("custom error")

    def readline(self, size=-1):
        raise OSError("custom error")


@pytest.mark.parametrize("text, expected", [("2x3x4\n", "58"), ("1x1x10\n", "43")])
def test_part1(text, expected):
    assert Solution().part1(io.StringIO(text)) == expected


def test_part1_read_error():
    with pytest.raises(OSError):
        Solution().part1(_ErrStream())


@pytest.mark.parametrize("text, expected", [("2x3x4\n", "34"), ("1x1x10\n", "14")])
def test_part2(text, expected):
    assert Solution().part2(io.StringIO(text)) == expected


def test_part2_read_error():
    with pytest.raises(OSError):
        Solution().part2(_ErrStream())


def test_box_from_dimensions():
    assert box_from_dimensions("2x3x4") == Box(width=2, height=3, length=4)


@pytest.mark.parametrize("bad", ["2x3", "2x3x4x5", "2xax4", "", "2x 3x4"])
def test_box_from_dimensions_invalid(bad):
    with pytest.raises(ValueError):
        box_from_dimensions(bad)


def test_box_measures():
    box = Box(width=2, height=3, length=4)
    assert sorted(a * b for a, b in box.faces()) == [6, 8, 12]
    assert box.surface_with_extra() == 58
    assert box.wrap_ribbon() == 10
    assert box.bow_ribbon() == 24
    assert box.ribbon() == 34


def test_multiple_lines_sum():
    assert Solution().part1(io.StringIO("2x3x4\n1x1x10\n")) == "101"
    assert Solution().part2(io.StringIO("2x3x4\r\n1x1x10\r\n")) == "48"