"""
State hashing utilities - used to bucket successors before equals().
"""

import hashlib

import numpy as np


def hash_state(width: int, height: int, player_ply: int, cells: np.ndarray) -> str:
    """
    Hash everything that takes part in GameState value equality.

    Equal states always share a hash; the converse is not guaranteed, so
    callers still confirm with GameState.equals. Cells are widened to int64
    so the hash depends on values, not storage width. Falls back to repr
    for object arrays.
    """
    prefix = f"{width}x{height}:{player_ply}:".encode()
    if cells.dtype == np.object_:
        data = repr(cells.tolist()).encode()
    else:
        data = np.ascontiguousarray(cells, dtype=np.int64).tobytes()

    return hashlib.sha256(prefix + data).hexdigest()[:16]
