"""
Core module - fundamental types, sentinels, and hashing.

This module provides the building blocks used by the games and the search.
"""

from minimax_engine.core.types import (
    Outcome,
    SearchResult,
    SearchStats,
    WIN_SCORE,
    LOSS_SCORE,
    DRAW_SCORE,
    is_forced,
    checked_score,
    classify,
)
from minimax_engine.core.hashing import hash_state

__all__ = [
    # Types
    "Outcome",
    "SearchResult",
    "SearchStats",
    # Constants
    "WIN_SCORE",
    "LOSS_SCORE",
    "DRAW_SCORE",
    # Functions
    "is_forced",
    "checked_score",
    "classify",
    "hash_state",
]
