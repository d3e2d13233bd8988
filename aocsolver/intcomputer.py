"""Intcode computer.

A program is a comma-separated list of integers loaded into memory. Opcode 1
adds the values at two addresses and stores the sum at a third; opcode 2
multiplies likewise; opcode 99 halts and yields the value at address 0. The
instruction pointer advances by 4 after each instruction.
"""

from __future__ import annotations

import re
from typing import Iterable, TextIO

_OPT_ADD = 1
_OPT_MULT = 2
_OPT_ABORT = 99
_SHIFT = 4
_INT_RE = re.compile(r"[+-]?\d+")


class ValueNotExistError(LookupError):
    """A value was not found in memory."""

    def __init__(self, message: str = "value not exist") -> None:
        super().__init__(message)


class IntComputer:
    """Holds an Intcode program and its working memory."""

    def __init__(self, program: Iterable[int]) -> None:
        self.initial = list(program)
        self.memory: dict[int, int] = {}
        self.reset()

    @classmethod
    def load(cls, stream: TextIO) -> "IntComputer":
        """Read a comma-separated program from a text stream."""
        numbers = []
        for raw in stream.read().strip().split(","):
            if not _INT_RE.fullmatch(raw):
                raise ValueError(f"failed to convert string to int: {raw!r}")
            numbers.append(int(raw))
        return cls(numbers)

    def execute(self) -> int:
        """Run the program and return the value at address 0 on halt."""
        mem = self.memory
        i = 0
        while i < len(mem):
            opt, a_pos, b_pos, res_pos = (mem.get(i + k, 0) for k in range(4))
            if opt == _OPT_ADD:
                try:
                    self.add(a_pos, b_pos, res_pos)
                except ValueNotExistError as exc:
                    raise ValueNotExistError(
                        f"failed to add pos[{i}]: [intcode:{opt} {a_pos} {b_pos} {res_pos}]: {exc}"
                    ) from exc
            elif opt == _OPT_MULT:
                try:
                    self.mult(a_pos, b_pos, res_pos)
                except ValueNotExistError as exc:
                    raise ValueNotExistError(
                        f"failed to mult pos[{i}]: [intcode:{opt} {a_pos} {b_pos} {res_pos}]: {exc}"
                    ) from exc
            elif opt == _OPT_ABORT:
                if 0 not in mem:
                    raise ValueNotExistError()
                return mem[0]
            else:
                raise ValueError(f"not supported opt code [{opt}] at pos [{i}]")
            i += _SHIFT
        return 0

    def add(self, a_pos: int, b_pos: int, res_pos: int) -> None:
        if a_pos not in self.memory:
            raise ValueNotExistError(f"apos:{a_pos}: value not exist")
        if b_pos not in self.memory:
            raise ValueNotExistError(f"bpos:{b_pos}: value not exist")
        self.memory[res_pos] = self.memory[a_pos] + self.memory[b_pos]

    def mult(self, a_pos: int, b_pos: int, res_pos: int) -> None:
        if a_pos not in self.memory or b_pos not in self.memory:
            raise ValueNotExistError()
        self.memory[res_pos] = self.memory[a_pos] * self.memory[b_pos]

    def input(self, noun: int, verb: int) -> None:
        """Set noun (address 1) and verb (address 2)."""
        self.memory[1] = noun
        self.memory[2] = verb

    def reset(self) -> None:
        """Restore memory to the loaded program."""
        self.memory = dict(enumerate(self.initial))