"""
Core types, constants, and data structures.

This module contains the fundamental types shared by the games and the search:
- Outcome: tagged view of a heuristic value
- SearchResult: (value, child) pair returned by every search
- SearchStats: node counters for one or more searches
- Score sentinels and the helpers that interpret them
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, NamedTuple

from minimax_engine.errors import InvalidHeuristicError

if TYPE_CHECKING:
    from minimax_engine.games.game_state import GameState


# ─── Score sentinels ──────────────────────────────────────────────────────────

WIN_SCORE = math.inf    # Forced win for the maximizing player
LOSS_SCORE = -math.inf  # Forced loss for the maximizing player
DRAW_SCORE = 0.0        # Neutral evaluation used by the bundled games

# ──────────────────────────────────────────────────────────────────────────────


class Outcome(Enum):
    """How a state looks from the maximizing player's side."""
    WIN = auto()
    LOSS = auto()
    DRAW = auto()
    ONGOING = auto()


def is_forced(value: float) -> bool:
    """Return True if value is one of the forced win/loss sentinels."""
    return value == WIN_SCORE or value == LOSS_SCORE


def checked_score(value: float) -> float:
    """
    Validate a heuristic value before the search orders it.

    NaN compares false against everything, which would silently freeze the
    ideal child at the first successor, so it is rejected outright.
    """
    value = float(value)
    if math.isnan(value):
        raise InvalidHeuristicError("heuristic returned NaN")
    return value


def classify(value: float, terminal: bool = False) -> Outcome:
    """
    Map a heuristic value to an Outcome.

    Infinite values are forced outcomes. A finite value is a DRAW only when
    the caller knows the state is terminal; otherwise the game is ONGOING.
    """
    value = checked_score(value)
    if value == WIN_SCORE:
        return Outcome.WIN
    if value == LOSS_SCORE:
        return Outcome.LOSS
    return Outcome.DRAW if terminal else Outcome.ONGOING


class SearchResult(NamedTuple):
    """Best value found below a node and the child that achieves it."""

    value: float
    child: "GameState"

    @property
    def has_move(self) -> bool:
        """True if the chosen child carries a move that can be applied."""
        return self.child.producing_move is not None

    @property
    def outcome(self) -> Outcome:
        """
        Tagged view of the value.

        A finite value is a DRAW only when the search stopped at a dead end,
        i.e. the returned child has no move left to make.
        """
        if is_forced(self.value):
            return classify(self.value)
        return classify(self.value, terminal=self.child.is_terminal())


@dataclass
class SearchStats:
    """Counters accumulated while searching. Never affects the result."""

    nodes: int = 0
    evaluations: int = 0
    terminals: int = 0
    cutoffs: int = 0

    def reset(self) -> None:
        self.nodes = 0
        self.evaluations = 0
        self.terminals = 0
        self.cutoffs = 0

    @property
    def interior(self) -> int:
        """Nodes that were expanded into successors."""
        return self.nodes - self.evaluations - self.terminals
