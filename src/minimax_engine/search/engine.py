"""
MinimaxEngine - owns the live root state and commits decided moves.
"""

from __future__ import annotations

import logging
from typing import Optional, TYPE_CHECKING

from minimax_engine.core.types import SearchResult, SearchStats
from minimax_engine.errors import NoLegalMoveError
from minimax_engine.search.minimax import search

if TYPE_CHECKING:
    from minimax_engine.games.game_state import GameState

logger = logging.getLogger(__name__)


class MinimaxEngine:
    """
    Searches from ``current_board`` and applies the best move it finds.

    ``decided_next_board`` is either ``current_board`` itself (nothing decided
    yet) or the child picked by the last decide(), whose producing move has
    been applied.

    Not safe for concurrent searches on the same instance.
    """

    def __init__(self, board: "GameState"):
        self.current_board = board
        self.decided_next_board = board
        self.last_result: Optional[SearchResult] = None
        self.stats = SearchStats()

    def evaluate(
        self,
        depth: int,
        maximizing_player: int,
        use_pruning: bool = True,
    ) -> SearchResult:
        """
        Search from ``current_board`` without committing anything.

        Never raises for a position without moves. In that case
        ``result.child`` is ``current_board`` itself.
        """
        self.stats.reset()
        result = search(
            self.current_board, depth, maximizing_player, use_pruning, self.stats
        )
        self.last_result = result

        logger.debug(
            "Searched depth=%d pruning=%s: value=%s nodes=%d cutoffs=%d",
            depth, use_pruning, result.value, self.stats.nodes, self.stats.cutoffs,
        )
        return result

    def decide(
        self,
        depth: int,
        maximizing_player: int,
        use_pruning: bool = True,
    ) -> None:
        """
        Search, then apply the best move and re-root on the resulting state.

        Args:
            depth: How many plies ahead to search.
            maximizing_player: Which player the search maximizes for.
            use_pruning: Use alpha-beta pruning (same result, fewer nodes).

        Raises:
            NoLegalMoveError: The search chose the current board itself (no
                successors, a forced outcome already reached, or depth <= 0).
                Nothing is applied and the engine state is unchanged.
        """
        result = self.evaluate(depth, maximizing_player, use_pruning)

        if result.child is self.current_board or not result.has_move:
            raise NoLegalMoveError(
                f"No move to apply from {self.current_board!r} "
                f"(depth={depth}, value={result.value})",
                result.value,
            )

        self.decided_next_board = result.child
        logger.info(
            "Decided %r with value %s after %d nodes",
            result.child.producing_move, result.value, self.stats.nodes,
        )
        self.apply_next_move()

    def apply_next_move(self) -> None:
        """Apply the decided move and make the decided state current."""
        move = self.decided_next_board.producing_move
        if move is None or self.decided_next_board is self.current_board:
            raise NoLegalMoveError("No decided move to apply", self.current_board.heuristic())

        move.apply()
        self.current_board = self.decided_next_board

    def reroot(self, board: "GameState") -> None:
        """
        Copy ``board`` into ``current_board`` in place.

        Used when the live game moved without the engine (e.g. an opponent's
        turn), so the engine's root keeps its identity.
        """
        self.current_board.clone_into(board)
        self.decided_next_board = self.current_board
        logger.debug("Re-rooted engine on %r", self.current_board)
