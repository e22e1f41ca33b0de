"""
Win and draw detection.

A freshly placed stone can only complete lines that pass through it, so the
move check walks the four line directions through that single cell instead
of scanning the whole board.
"""

from __future__ import annotations

from typing import Optional

from .board import Board, Player

# (d_column, d_row); each is walked in both senses
DIRECTIONS = (
    (1, 0),   # horizontal
    (0, 1),   # vertical
    (1, 1),   # diagonal up-right
    (1, -1),  # diagonal down-right
)


def _run_length(board: Board, column: int, row: int, dc: int, dr: int, player: Player) -> int:
    """Count consecutive stones of player starting next to (column, row)."""
    count = 0
    c, r = column + dc, row + dr
    while count < board.options.connect and board.cell(c, r) is player:
        count += 1
        c, r = c + dc, r + dr
    return count


def detect(board: Board, column: int, row: int) -> Optional[Player]:
    """
    Check whether the stone at (column, row) is part of a winning line.

    Args:
        board: Board to inspect
        column: Column of the stone
        row: Row of the stone (0 = bottom)

    Returns:
        The owner of the stone if it completes K in a row, otherwise None
    """
    player = board.cell(column, row)
    if player is None:
        return None

    connect = board.options.connect
    for dc, dr in DIRECTIONS:
        count = 1
        count += _run_length(board, column, row, dc, dr, player)
        count += _run_length(board, column, row, -dc, -dr, player)
        if count >= connect:
            return player
    return None


def is_full(board: Board) -> bool:
    return board.stone_count == board.options.num_cells


def find_winners(board: Board) -> set[Player]:
    """Scan every stone and return all players owning a winning line."""
    winners: set[Player] = set()
    for column, stack in enumerate(board.columns):
        for row, player in enumerate(stack):
            if player in winners:
                continue
            if detect(board, column, row) is not None:
                winners.add(player)
    return winners
