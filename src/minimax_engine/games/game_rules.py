"""
NumPy utilities for flat-grid board games.

Cells are stored row-major in a flat array, so locus = row * width + col.
Line tables are precomputed index arrays that let win detection run as a
single fancy-indexing operation.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Tuple

import numpy as np


def in_bounds(width: int, height: int, r: int, c: int) -> bool:
    """Return True if (r, c) is inside the grid."""
    return 0 <= r < height and 0 <= c < width


def index_of(width: int, r: int, c: int) -> int:
    """Flat locus of (r, c)."""
    return r * width + c


def coords_of(width: int, locus: int) -> Tuple[int, int]:
    """(row, col) of a flat locus."""
    return divmod(locus, width)


@lru_cache(maxsize=None)
def lines_of_length(width: int, height: int, length: int) -> np.ndarray:
    """
    Every straight run of ``length`` cells: rows, columns and both diagonals.

    Returns an (N, length) int array of flat indices. Cached per grid shape;
    the returned array is read-only.
    """
    directions = ((0, 1), (1, 0), (1, 1), (1, -1))
    lines = []
    for r in range(height):
        for c in range(width):
            for dr, dc in directions:
                end_r = r + dr * (length - 1)
                end_c = c + dc * (length - 1)
                if not in_bounds(width, height, end_r, end_c):
                    continue
                lines.append([index_of(width, r + dr * k, c + dc * k) for k in range(length)])

    table = np.array(lines, dtype=np.intp).reshape(-1, length)
    table.setflags(write=False)
    return table


def line_winner(cells: np.ndarray, lines: np.ndarray) -> int:
    """
    Return the player owning a complete line, or 0.

    If several players own lines (only possible in hand-built positions) the
    one whose line comes first in the table is returned.
    """
    if lines.size == 0:
        return 0
    vals = cells[lines]
    owned = (vals[:, 0] != 0) & np.all(vals == vals[:, :1], axis=1)
    if not owned.any():
        return 0
    return int(vals[np.argmax(owned), 0])


def open_lines(cells: np.ndarray, lines: np.ndarray, player: int) -> int:
    """
    Count lines that ``player`` has started and nobody else has blocked.
    """
    if lines.size == 0:
        return 0
    vals = cells[lines]
    mine = vals == player
    clear = mine | (vals == 0)
    return int(np.count_nonzero(np.all(clear, axis=1) & np.any(mine, axis=1)))


def board_full(cells: np.ndarray) -> bool:
    """Return True if no cell is empty."""
    return not np.any(cells == 0)
