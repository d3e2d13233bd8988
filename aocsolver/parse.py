"""Integer parsing helpers."""

from __future__ import annotations

import re
from typing import TextIO

_INT_RE = re.compile(r"[+-]?\d+")


def _atoi(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"parse int: invalid syntax {text!r}")
    return int(text)


def parse_ints(stream: TextIO, sep: str) -> list[int]:
    """Parse integers, one per line, or separated by ``sep`` within lines."""
    result: list[int] = []
    for line in stream:
        line = line.rstrip("\n")
        if line.endswith("\r"):
            line = line[:-1]
        parts = line.split(sep) if sep else [line]
        result.extend(_atoi(part) for part in parts)
    return result