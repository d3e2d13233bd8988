"""Fetching puzzle input from the Advent of Code site."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from typing import Any, Optional

import requests

_BASE_URL = "https://adventofcode.com"


class InputError(Exception):
    """Puzzle input could not be fetched."""


class InputNotFoundError(InputError):
    """Input is not unlocked yet or the date is invalid."""


class UnauthorizedError(InputError):
    """Session is empty or invalid."""

    def __init__(self, message: str = "unauthorized") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Date:
    year: str
    day: str

    def __str__(self) -> str:
        return posixpath.join(self.year, self.day)


def input_url(date: Date) -> str:
    """URL of the input for the given date."""
    return _BASE_URL + posixpath.join("/", date.year, "day", date.day, "input")


class Fetcher:
    """Downloads puzzle input with a session cookie."""

    def __init__(self, client: Optional[Any] = None, timeout: float = 30.0) -> None:
        self.client = client if client is not None else requests.Session()
        self.timeout = timeout

    def fetch(self, date: Date, session: str) -> bytes:
        """Return the raw input for ``date``."""
        timeout = self.timeout if self.timeout and self.timeout > 0 else None
        try:
            response = self.client.get(
                input_url(date), cookies={"session": session}, timeout=timeout
            )
        except (requests.RequestException, OSError) as exc:
            raise InputError(f"send request: {exc}") from exc

        try:
            body = response.content
        except (requests.RequestException, OSError) as exc:
            raise InputError(f"read response body: {exc}") from exc

        status = response.status_code
        if status == 200:
            if not body.strip():
                raise InputError("empty response received")
            return body
        if status == 404:
            raise InputNotFoundError(f"[{date}]: puzzle input not found")
        if status == 400:
            raise UnauthorizedError()
        reason = getattr(response, "reason", "") or ""
        raise InputError(f"[{date}] failed to get puzzle input[{status} {reason}]".rstrip())