"""Errors raised when looking puzzles up."""


class PuzzleError(Exception):
    """Base class for puzzle lookup errors."""


class InvalidPuzzleNameError(PuzzleError, ValueError):
    """No such puzzle exists."""

    def __init__(self, message: str = "invalid puzzle name") -> None:
        super().__init__(message)


class InvalidYearError(PuzzleError, ValueError):
    """No such year exists."""

    def __init__(self, message: str = "invalid year") -> None:
        super().__init__(message)


class PuzzleNotImplementedError(PuzzleError, NotImplementedError):
    """The puzzle has no solution yet."""

    def __init__(self, message: str = "not implemented") -> None:
        super().__init__(message)