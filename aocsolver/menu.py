"""Helpers for the interactive year and puzzle menus."""

from __future__ import annotations

from typing import Callable, Sequence

EXIT = "exit"
BACK = "back"
PAGE_SIZE = 10
ABORT = "^C"

_URL_FMT = "https://adventofcode.com/{year}/day/{day}"


def make_menu_items_list(items: Sequence[str], *args: str) -> list[str]:
    """Menu entries followed by command entries."""
    return [*items, *args]


def _normalize(text: str) -> str:
    return text.lower().replace(" ", "")


def searcher(items: Sequence[str]) -> Callable[[str, int], bool]:
    """Build a case- and space-insensitive substring matcher over ``items``."""

    def search(query: str, index: int) -> bool:
        return _normalize(query) in _normalize(items[index])

    return search


def get_url(year: str, day: str) -> str:
    """Page of the puzzle for the given year and day."""
    return _URL_FMT.format(year=year, day=day)


def is_exit(choice: str) -> bool:
    return choice.casefold() == EXIT.casefold()


def is_back(choice: str) -> bool:
    return choice.casefold() == BACK.casefold()


def is_abort(error: BaseException) -> bool:
    """Whether the prompt error came from an interrupt."""
    return str(error).endswith(ABORT)