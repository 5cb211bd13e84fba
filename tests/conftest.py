"""
Shared test fixtures for minimax_engine tests.

Design principles:
- Game-agnostic fixtures where possible
- Scripted states for exact control over scores and successors
- Minimal, focused fixtures
"""

from typing import List

import pytest

from minimax_engine.games.connect_four import ConnectFour
from minimax_engine.games.tic_tac_toe import TicTacToe, TicTacToeState

from scripted import ScriptedState, build_tree


# =============================================================================
# Game Fixtures
# =============================================================================

@pytest.fixture
def ttt_game() -> TicTacToe:
    """Fresh TicTacToe game."""
    return TicTacToe()


@pytest.fixture
def ttt_root(ttt_game: TicTacToe) -> TicTacToeState:
    """Empty TicTacToe snapshot scored for player 1."""
    return ttt_game.snapshot(max_player=1)


@pytest.fixture
def small_c4() -> ConnectFour:
    """4x4 ConnectFour needing three in a row."""
    return ConnectFour(width=4, height=4, connect=3)


@pytest.fixture
def move_log() -> List[tuple]:
    """Shared log that RecordingMove.apply() writes to."""
    return []


# =============================================================================
# Tree Fixtures
# =============================================================================

@pytest.fixture
def textbook_tree(move_log: List[tuple]) -> ScriptedState:
    """
    Two-ply tree with minimax value 3.

    Alpha-beta prunes the last two leaves of the second branch.
    """
    return build_tree([[3, 12, 8], [2, 4, 6], [14, 5, 2]], log=move_log)
