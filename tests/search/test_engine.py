"""
Tests for minimax_engine.search.engine

Tests deciding, applying and re-rooting, including full tic-tac-toe games.
"""

import math

import numpy as np
import pytest

from minimax_engine.core.types import Outcome
from minimax_engine.errors import MoveAlreadyAppliedError, NoLegalMoveError
from minimax_engine.games.connect_four import ConnectFour
from minimax_engine.games.tic_tac_toe import TicTacToe
from minimax_engine.search.engine import MinimaxEngine

from scripted import ScriptedState, scripted_child


def _self_play(game, depth: int, use_pruning: bool) -> MinimaxEngine:
    """One engine, maximizing for player 1, plays both sides to the end."""
    engine = MinimaxEngine(game.snapshot(max_player=1))
    while not game.is_over():
        engine.decide(depth, maximizing_player=1, use_pruning=use_pruning)
    return engine


class TestInitialState:
    """Engine construction."""

    def test_decided_defaults_to_current(self, ttt_root):
        engine = MinimaxEngine(ttt_root)
        assert engine.current_board is ttt_root
        assert engine.decided_next_board is ttt_root
        assert engine.last_result is None


class TestDecide:
    """decide() searches, applies the move and re-roots."""

    def test_applies_move_to_live_game(self, ttt_game: TicTacToe):
        """The decided move lands on the live board."""
        ttt_game.set_position([1, 1, 0, 2, 2, 0, 0, 0, 0], player=1)
        engine = MinimaxEngine(ttt_game.snapshot(max_player=1))

        engine.decide(3, maximizing_player=1)

        assert ttt_game.history == [2]
        assert ttt_game.winner() == 1
        assert engine.current_board is engine.decided_next_board
        assert engine.current_board.producing_move.applied

    def test_current_board_matches_live_game(self, ttt_game: TicTacToe):
        """After a decision the engine's state mirrors the live game."""
        engine = MinimaxEngine(ttt_game.snapshot(max_player=1))
        engine.decide(2, maximizing_player=1)
        assert np.array_equal(engine.current_board.cells, ttt_game.cells)
        assert engine.current_board.player_ply == ttt_game.current_player()

    def test_scripted_move_applied_once(self, textbook_tree, move_log):
        """The ideal child's move is applied exactly once."""
        engine = MinimaxEngine(textbook_tree)
        engine.decide(2, maximizing_player=1)

        assert move_log == [(0,)]
        assert engine.current_board is textbook_tree.script[0][0]
        assert engine.last_result.value == 3

    def test_without_pruning_same_choice(self, textbook_tree, move_log):
        engine = MinimaxEngine(textbook_tree)
        engine.decide(2, maximizing_player=1, use_pruning=False)
        assert engine.current_board is textbook_tree.script[0][0]
        assert engine.stats.nodes == 13

    def test_reapplying_raises(self, textbook_tree):
        """A committed move cannot be applied a second time."""
        engine = MinimaxEngine(textbook_tree)
        engine.decide(2, maximizing_player=1)
        with pytest.raises(MoveAlreadyAppliedError):
            engine.current_board.producing_move.apply()

    def test_single_successor_committed(self, move_log):
        """Depth 1 with one legal move plays it even when it loses."""
        root = ScriptedState(2, 1, [0, 0])
        only = scripted_child(root, 1, score=-math.inf, log=move_log)
        root.script = {1: [only]}

        engine = MinimaxEngine(root)
        engine.decide(1, maximizing_player=1)

        assert engine.current_board is only
        assert move_log == [(1,)]


class TestNoMove:
    """Roots without a move fail loudly and leave the engine untouched."""

    def test_no_successors_raises(self, move_log):
        root = ScriptedState(2, 1, [1, 2], score=1.5)
        engine = MinimaxEngine(root)

        with pytest.raises(NoLegalMoveError) as exc_info:
            engine.decide(3, maximizing_player=1)

        assert exc_info.value.value == 1.5
        assert engine.current_board is root
        assert engine.decided_next_board is root
        assert move_log == []

    def test_depth_zero_raises(self, textbook_tree, move_log):
        engine = MinimaxEngine(textbook_tree)
        with pytest.raises(NoLegalMoveError):
            engine.decide(0, maximizing_player=1)
        assert move_log == []

    def test_forced_root_raises(self, ttt_game: TicTacToe):
        """A finished game has nothing to decide."""
        ttt_game.set_position([1, 1, 1, 2, 2, 0, 0, 0, 0], player=2)
        engine = MinimaxEngine(ttt_game.snapshot(max_player=1))

        with pytest.raises(NoLegalMoveError) as exc_info:
            engine.decide(4, maximizing_player=1)

        assert exc_info.value.value == math.inf
        assert ttt_game.history == []

    def test_evaluate_does_not_raise(self):
        """evaluate() reports the value even without a move."""
        root = ScriptedState(1, 1, [0], score=-2.0)
        result = MinimaxEngine(root).evaluate(3, maximizing_player=1)
        assert result.value == -2.0
        assert result.child is root

    def test_evaluate_full_board_is_draw(self, ttt_game: TicTacToe):
        """A drawn, full board is tagged DRAW."""
        ttt_game.set_position([1, 2, 1, 1, 2, 2, 2, 1, 1], player=2)
        result = MinimaxEngine(ttt_game.snapshot(max_player=1)).evaluate(3, maximizing_player=1)
        assert result.value == 0
        assert result.outcome is Outcome.DRAW

    def test_evaluate_open_board_is_ongoing(self, ttt_root):
        result = MinimaxEngine(ttt_root).evaluate(1, maximizing_player=1)
        assert result.outcome is Outcome.ONGOING

    def test_apply_without_decision_raises(self, ttt_root):
        with pytest.raises(NoLegalMoveError):
            MinimaxEngine(ttt_root).apply_next_move()


class TestReroot:
    """reroot() copies a position into the engine's current board."""

    def test_reroot_keeps_identity(self, ttt_game: TicTacToe):
        engine = MinimaxEngine(ttt_game.snapshot(max_player=1))
        root = engine.current_board

        ttt_game.apply_move(4)
        engine.reroot(ttt_game.snapshot(max_player=1))

        assert engine.current_board is root
        assert root.cells[4] == 1
        assert root.player_ply == 2
        assert engine.decided_next_board is root

    def test_decide_after_reroot(self, ttt_game: TicTacToe):
        """The engine keeps playing after the opponent moved on the live game."""
        engine = MinimaxEngine(ttt_game.snapshot(max_player=2))
        ttt_game.apply_move(0)  # X, played outside the engine
        engine.reroot(ttt_game.snapshot(max_player=2))

        engine.decide(2, maximizing_player=2)

        assert len(ttt_game.history) == 2
        assert ttt_game.current_player() == 1


class TestFullGames:
    """Optimal play from the empty board."""

    def test_tic_tac_toe_alphabeta_draws(self, ttt_game: TicTacToe):
        engine = _self_play(ttt_game, depth=9, use_pruning=True)

        assert ttt_game.winner() == 0
        assert ttt_game.is_over()
        assert engine.current_board.heuristic() == 0
        assert len(ttt_game.history) == 9

    def test_finished_game_cannot_continue(self, ttt_game: TicTacToe):
        engine = _self_play(ttt_game, depth=9, use_pruning=True)
        with pytest.raises(NoLegalMoveError):
            engine.decide(9, maximizing_player=1)

    @pytest.mark.slow
    def test_tic_tac_toe_plain_draws(self, ttt_game: TicTacToe):
        """Exhaustive search reaches the same draw, move for move."""
        engine = _self_play(ttt_game, depth=9, use_pruning=False)

        reference = TicTacToe()
        _self_play(reference, depth=9, use_pruning=True)

        assert ttt_game.winner() == 0
        assert engine.current_board.heuristic() == 0
        assert ttt_game.history == reference.history

    def test_connect_four_self_play_finishes(self, small_c4: ConnectFour):
        """Shallow search on a small board plays a legal game to the end."""
        _self_play(small_c4, depth=3, use_pruning=True)
        assert small_c4.is_over()
        assert small_c4.winner() in (0, 1, 2)
