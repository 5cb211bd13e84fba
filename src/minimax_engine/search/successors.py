"""
Successor enumeration with deduplication.
"""

from __future__ import annotations

from typing import Dict, List, TYPE_CHECKING

if TYPE_CHECKING:
    from minimax_engine.games.game_state import GameState


def enumerate_successors(state: "GameState") -> List["GameState"]:
    """
    Build the branching set for one ply.

    Loci are visited in ascending order and each locus's children in the
    order successors() returns them. A child whose cells match the parent's
    is a no-op and is dropped. A child value-equal to one already accepted
    is dropped too, so the first occurrence wins.

    Returns an empty list when the state has no legal moves.
    """
    accepted: List["GameState"] = []
    buckets: Dict[str, List["GameState"]] = {}

    for locus in range(state.width * state.height):
        for child in state.successors(locus):
            if not child.differs_from(state):
                continue

            bucket = buckets.setdefault(child.state_key(), [])
            if any(child.equals(seen) for seen in bucket):
                continue

            bucket.append(child)
            accepted.append(child)

    return accepted
