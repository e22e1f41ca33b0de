"""
Array views of a board for hosts that work with numpy.

Grid encoding:
- Shape: (H, W), row 0 is the TOP row
- +1 = X stone, -1 = O stone, 0 = empty

Plane encoding:
- Shape: (2, H, W)
- Channel 0: stones of the player to move
- Channel 1: opponent stones
"""

from __future__ import annotations

import numpy as np

from .board import Board, Player
from .engine import legal_moves


NUM_CHANNELS = 2

_VALUES = {Player.X: 1, Player.O: -1}


def to_grid(board: Board) -> np.ndarray:
    """
    Encode the board as a signed grid.

    Args:
        board: Board to encode

    Returns:
        numpy array of shape (H, W) with int8 dtype
    """
    grid = np.zeros((board.height, board.width), dtype=np.int8)
    for column, stack in enumerate(board.columns):
        for row, stone in enumerate(stack):
            grid[board.height - 1 - row, column] = _VALUES[stone]
    return grid


def encode_planes(board: Board) -> np.ndarray:
    """
    Encode the board as two binary planes from the active player's view.

    On a finished game the active player is the last mover, so plane 0
    holds the winner's stones after a win.

    Returns:
        numpy array of shape (2, H, W) with float32 dtype
    """
    grid = to_grid(board)
    own = _VALUES[board.active_player]

    encoded = np.zeros((NUM_CHANNELS, board.height, board.width), dtype=np.float32)
    encoded[0] = (grid == own).astype(np.float32)
    encoded[1] = (grid == -own).astype(np.float32)
    return encoded


def legal_mask(board: Board) -> np.ndarray:
    """
    Get mask of legal columns.

    Returns:
        Boolean array of shape (W,) where True = legal move
    """
    mask = np.zeros(board.width, dtype=bool)
    for column in legal_moves(board):
        mask[column] = True
    return mask
