"""
Connect-K game logic.

Rules:
- W columns x H rows, stones drop to the lowest free cell of a column
- X moves first, players alternate
- First to get K in a row (horizontal, vertical, or diagonal) wins
- If the board fills up with no winner, it's a draw

``apply_move`` is the only function that mutates a Board. Every check runs
before the board is touched, so a rejected move leaves it unchanged.
"""

from __future__ import annotations

import operator
from typing import Optional

from ..errors import (
    ColumnFullError,
    GameOverError,
    InvalidColumnError,
    MoveFormatError,
    NotYourTurnError,
)
from .board import Board, GameResult, Player
from .detect import detect, is_full
from .options import GameOptions


def new_board(options: GameOptions) -> Board:
    """Create an empty board with X to move."""
    return Board(options=options)


def legal_moves(board: Board) -> set[int]:
    """Return the set of columns that can still take a stone."""
    if board.is_terminal():
        return set()
    height = board.height
    return {c for c, stack in enumerate(board.columns) if len(stack) < height}


def legal_moves_list(board: Board) -> list[int]:
    """Return legal columns in ascending order."""
    return sorted(legal_moves(board))


def apply_move(board: Board, column: int, player: Optional[Player] = None) -> None:
    """
    Drop the active player's stone into a column.

    Args:
        board: Board to mutate
        column: Column index (0 to W-1)
        player: If given, the player submitting the move; must be the active one

    Raises:
        GameOverError: the game already ended
        InvalidColumnError: column is not an index on this board
        ColumnFullError: the column has no free cell
        NotYourTurnError: player is not the active player
    """
    if board.is_terminal():
        raise GameOverError("game is already over")

    if isinstance(column, bool):
        raise InvalidColumnError(f"column must be an integer, got {column!r}")
    try:
        column = operator.index(column)
    except TypeError:
        raise InvalidColumnError(f"column must be an integer, got {column!r}") from None
    if column < 0 or column >= board.width:
        raise InvalidColumnError(f"column {column} does not exist, must be 0-{board.width - 1}")

    stack = board.columns[column]
    if len(stack) >= board.height:
        raise ColumnFullError(f"column {column} is full")

    if player is not None and player is not board.active_player:
        raise NotYourTurnError(f"it is {board.active_player.symbol}'s turn, not {player.symbol}'s")

    mover = board.active_player
    stack.append(mover)
    row = len(stack) - 1

    winner = detect(board, column, row)
    if winner is not None:
        board.result = GameResult.win(winner)
    elif is_full(board):
        board.result = GameResult.DRAW
    else:
        board.active_player = mover.other


def result(board: Board) -> GameResult:
    return board.result


def to_move(board: Board) -> Optional[Player]:
    """Player to move, or None when the game is over."""
    if board.is_terminal():
        return None
    return board.active_player


def parse_move(text: str) -> int:
    """
    Parse move text into a column index.

    Surrounding whitespace is ignored; anything other than a plain
    non-negative decimal number is rejected.
    """
    stripped = text.strip()
    if not stripped.isascii() or not stripped.isdigit():
        raise MoveFormatError(f'failed to parse move "{text.strip()}"')
    return int(stripped)


def format_move(column: int) -> str:
    return str(column)


def render(board: Board) -> str:
    """
    Render the board as plain text.

    Rows are printed top to bottom between ``|`` separators, followed by the
    column indices. Cells are widened to fit the largest index.
    """
    cell_width = len(str(board.width - 1))
    lines = []

    for row in range(board.height - 1, -1, -1):
        cells = []
        for column in range(board.width):
            stone = board.cell(column, row)
            symbol = stone.symbol if stone is not None else " "
            cells.append(symbol * cell_width)
        lines.append("|" + "|".join(cells) + "|")

    lines.append("".join(f" {c:>{cell_width}}" for c in range(board.width)) + " ")
    return "\n".join(lines)
