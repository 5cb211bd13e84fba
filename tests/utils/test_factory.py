"""
Tests for minimax_engine.utils.factory

Tests factory functions for creating games and engines.
"""

import numpy as np
import pytest

from minimax_engine.games.game_base import GameBase
from minimax_engine.search.engine import MinimaxEngine
from minimax_engine.utils.config import GAMES
from minimax_engine.utils.factory import create_engine, create_game


class TestCreateGame:
    """create_game function tests."""

    @pytest.mark.parametrize("name", list(GAMES))
    def test_creates_fresh_game(self, name):
        game = create_game(name)
        assert isinstance(game, GameBase)
        assert game.game_id() == name
        assert game.current_player() == 1
        assert not game.is_over()

    def test_games_are_independent(self):
        a = create_game("tic_tac_toe")
        b = create_game("tic_tac_toe")
        a.apply_move(0)
        assert b.cells[0] == 0

    def test_unknown_game_raises(self):
        with pytest.raises(ValueError, match="Unknown game"):
            create_game("go")


class TestCreateEngine:
    """create_engine function tests."""

    def test_engine_rooted_at_game(self):
        game = create_game("connect_four")
        game.apply_move(3)
        engine = create_engine(game, max_player=2)

        assert isinstance(engine, MinimaxEngine)
        assert np.array_equal(engine.current_board.cells, game.cells)
        assert engine.current_board.player_ply == 2
        assert engine.current_board.max_player == 2

    def test_engine_moves_reach_game(self):
        game = create_game("tic_tac_toe")
        engine = create_engine(game, max_player=1)
        engine.decide(1, maximizing_player=1)
        assert len(game.history) == 1
