import pytest

from aocsolver.constants import Day, Year
from aocsolver.menu import (
    EXIT,
    get_url,
    is_abort,
    is_back,
    is_exit,
    make_menu_items_list,
    searcher,
)


@pytest.mark.parametrize(
    "items, commands, want",
    [
        (["1", "2", "3"], [], ["1", "2", "3"]),
        (["1", "2", "3"], ["cmd1", "cmd2"], ["1", "2", "3", "cmd1", "cmd2"]),
    ],
)
def test_make_menu_items_list(items, commands, want):
    assert make_menu_items_list(items, *commands) == want


def test_searcher():
    items = make_menu_items_list(["one", "two", "three"], EXIT)
    search = searcher(items)
    assert search("o", 0) is True
    with pytest.raises(IndexError):
        search("o", 10)
    assert search("t", 2) is True
    assert search("1", 2) is False


def test_searcher_ignores_case_and_spaces():
    search = searcher(["Day One"])
    assert search("DAYo ne", 0) is True


def test_get_url():
    assert get_url(str(Year.Y2022), str(Day.DAY01)) == "https://adventofcode.com/2022/day/1"


@pytest.mark.parametrize("choice, want", [("exit", True), ("EXIT", True), ("back", False)])
def test_is_exit(choice, want):
    assert is_exit(choice) is want


@pytest.mark.parametrize("choice, want", [("Back", True), ("exit", False)])
def test_is_back(choice, want):
    assert is_back(choice) is want


def test_is_abort():
    assert is_abort(RuntimeError("^C")) is True
    assert is_abort(RuntimeError("other failure")) is False