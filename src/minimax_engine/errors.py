"""
Exception hierarchy for the minimax engine.

Everything raised on purpose by this package derives from MinimaxError, so
callers can catch engine failures without swallowing unrelated bugs.
"""


class MinimaxError(Exception):
    """Base class for all engine errors."""


class InvalidStateError(MinimaxError, ValueError):
    """A GameState was built with inconsistent dimensions or cells."""


class InvalidHeuristicError(MinimaxError, ValueError):
    """A heuristic returned a value the search cannot order (NaN)."""


class SearchError(MinimaxError):
    """The search could not produce a usable result."""


class NoLegalMoveError(SearchError):
    """The root state has no move to commit."""

    def __init__(self, message: str, value: float):
        super().__init__(message)
        self.value = value


class MoveError(MinimaxError):
    """Base class for problems with a Move."""


class MoveAlreadyAppliedError(MoveError):
    """apply() was called twice on the same Move."""


class IllegalMoveError(MoveError, ValueError):
    """A move was requested that the live game does not allow."""
