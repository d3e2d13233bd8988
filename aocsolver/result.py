"""Puzzle result and its table rendering."""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Optional, Sequence, TextIO

from .constants import UNKNOWN, UNSOLVED
from .metrics import Metrics, MetricsFlag

_PADDING = 3


@dataclass
class Result:
    year: str = ""
    name: str = ""
    part1: str = ""
    part2: str = ""
    metrics: Optional[Metrics] = None

    def __str__(self) -> str:
        year = self.year or UNKNOWN
        name = self.name or UNKNOWN
        part1 = self.part1 or UNSOLVED
        part2 = self.part2 or UNSOLVED

        table: list[list[str]] = [
            [],
            [f"{year}/{name} puzzle answer:"],
            ["part1", part1],
            ["part2", part2],
            [],
        ]
        if self.metrics is not None:
            table.append(["metrics:"])
            for m in self.metrics:
                if m.m_type & MetricsFlag.NONE:
                    table.append([str(m.m_type)])
                else:
                    table.append([str(m.m_type), m.metadata])
        table.append([])

        buf = io.StringIO()
        print_table(buf, table)
        return "\n   " + buf.getvalue().strip() + "\n"


def print_table(stream: TextIO, table: Sequence[Sequence[str]]) -> None:
    """Write rows as aligned columns; empty rows go out before the aligned block."""
    rows: list[list[str]] = []
    for line in table:
        if not line:
            stream.write("\n")
        elif len(line) == 1:
            rows.append(("\t" + line[0] + "\t").split("\t"))
        else:
            rows.append(("\t   " + "\t".join(line) + "\t").split("\t"))
    stream.write(_align(rows))


def _align(rows: list[list[str]]) -> str:
    widths: list[list[int]] = [[0] * (len(r) - 1) for r in rows]
    max_cols = max((len(r) for r in rows), default=0) - 1
    for col in range(max_cols):
        start = 0
        while start < len(rows):
            if len(rows[start]) <= col + 1:
                start += 1
                continue
            end = start
            while end < len(rows) and len(rows[end]) > col + 1:
                end += 1
            block = [len(rows[i][col]) for i in range(start, end)]
            width = 0 if all(w == 0 for w in block) else max(block) + _PADDING
            for i in range(start, end):
                widths[i][col] = width
            start = end

    out = []
    for row, row_widths in zip(rows, widths):
        cells = [cell.ljust(w) for cell, w in zip(row, row_widths)]
        cells.append(row[-1])
        out.append("".join(cells) + "\n")
    return "".join(out)