"""
Search module - successor enumeration, minimax variants, and the engine.
"""

from minimax_engine.search.successors import enumerate_successors
from minimax_engine.search.minimax import search, search_alphabeta, search_plain
from minimax_engine.search.engine import MinimaxEngine

__all__ = [
    "enumerate_successors",
    "search",
    "search_alphabeta",
    "search_plain",
    "MinimaxEngine",
]
