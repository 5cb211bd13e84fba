"""
Depth-limited minimax, with and without alpha-beta pruning.

Both variants walk the tree depth-first and return a SearchResult holding the
minimax value of the node and the child that achieves it. Pruning only skips
branches that cannot change the value, so for identical inputs the two
variants always agree on the value.

Terminal conditions, first match wins:
    1. depth <= 0                    -> (heuristic, state)
    2. heuristic is +inf or -inf     -> (heuristic, state)
    3. no successors                 -> (heuristic, state)

In each of these the returned child is the state itself, which carries no
move of its own to apply.
"""

from __future__ import annotations

import math
from typing import Optional, TYPE_CHECKING

from minimax_engine.core.types import SearchResult, SearchStats, checked_score, is_forced
from minimax_engine.search.successors import enumerate_successors

if TYPE_CHECKING:
    from minimax_engine.games.game_state import GameState


def search_alphabeta(
    state: "GameState",
    depth: int,
    maximizing_player: int,
    alpha: float = -math.inf,
    beta: float = math.inf,
    stats: Optional[SearchStats] = None,
) -> SearchResult:
    """
    Minimax with alpha-beta pruning.

    Args:
        state: Node to search from.
        depth: Plies left to look ahead.
        maximizing_player: Player whose turns take the max over children;
            every other player minimizes.
        alpha: Best value the maximizer is already assured of on this path.
        beta: Best value the minimizer is already assured of on this path.
        stats: Optional counters to accumulate into.

    Returns:
        SearchResult(value, child).
    """
    if stats is not None:
        stats.nodes += 1

    h = checked_score(state.heuristic())
    if depth <= 0:
        if stats is not None:
            stats.evaluations += 1
        return SearchResult(h, state)
    if is_forced(h):
        if stats is not None:
            stats.terminals += 1
        return SearchResult(h, state)

    children = enumerate_successors(state)
    if not children:
        if stats is not None:
            stats.terminals += 1
        return SearchResult(h, state)

    maximizing = state.player_ply == maximizing_player
    value = -math.inf if maximizing else math.inf
    ideal = children[0]

    for child in children:
        child_value, _ = search_alphabeta(
            child, depth - 1, maximizing_player, alpha, beta, stats
        )

        if maximizing:
            if child_value > value:
                value, ideal = child_value, child
                alpha = max(alpha, value)
                if value >= beta:
                    if stats is not None:
                        stats.cutoffs += 1
                    break  # beta cutoff
        else:
            if child_value < value:
                value, ideal = child_value, child
                beta = min(beta, value)
                if value <= alpha:
                    if stats is not None:
                        stats.cutoffs += 1
                    break  # alpha cutoff

    return SearchResult(value, ideal)


def search_plain(
    state: "GameState",
    depth: int,
    maximizing_player: int,
    stats: Optional[SearchStats] = None,
) -> SearchResult:
    """Exhaustive minimax. Reference for search_alphabeta; never prunes."""
    if stats is not None:
        stats.nodes += 1

    h = checked_score(state.heuristic())
    if depth <= 0:
        if stats is not None:
            stats.evaluations += 1
        return SearchResult(h, state)
    if is_forced(h):
        if stats is not None:
            stats.terminals += 1
        return SearchResult(h, state)

    children = enumerate_successors(state)
    if not children:
        if stats is not None:
            stats.terminals += 1
        return SearchResult(h, state)

    maximizing = state.player_ply == maximizing_player
    value = -math.inf if maximizing else math.inf
    ideal = children[0]

    for child in children:
        child_value, _ = search_plain(child, depth - 1, maximizing_player, stats)

        if maximizing:
            if child_value > value:
                value, ideal = child_value, child
        elif child_value < value:
            value, ideal = child_value, child

    return SearchResult(value, ideal)


def search(
    state: "GameState",
    depth: int,
    maximizing_player: int,
    use_pruning: bool = True,
    stats: Optional[SearchStats] = None,
) -> SearchResult:
    """Run the pruning or the plain variant from a root with open bounds."""
    if use_pruning:
        return search_alphabeta(
            state, depth, maximizing_player, -math.inf, math.inf, stats
        )
    return search_plain(state, depth, maximizing_player, stats)
