"""
Text serialization of board state.

State strings look like ``XOOXXXO/XOOX//OXXO#x``:
- each run of ``X`` and ``O`` between slashes is one column, bottom to top
- after ``#`` comes a single marker:
  - lowercase ``x``/``o``: that player moves next
  - uppercase ``X``/``O``: that player has won
  - ``-``: the game is drawn

Only the canonical form written by ``export_state`` is accepted, and the
marker must agree with what the stones on the board say.
"""

from __future__ import annotations

from ..errors import (
    ColumnOverflowError,
    InconsistentStateError,
    InvalidStoneError,
    StateFormatError,
)
from .board import Board, GameResult, Player
from .detect import find_winners, is_full
from .options import GameOptions

COLUMN_SEP = "/"
MARKER_SEP = "#"
DRAW_MARKER = "-"

_STONES = {p.symbol: p for p in Player}
_TO_MOVE = {p.marker: p for p in Player}


def _parse_columns(options: GameOptions, body: str) -> list[list[Player]]:
    parts = body.split(COLUMN_SEP)
    if len(parts) != options.width:
        raise StateFormatError(
            f"state has {len(parts)} columns, expected {options.width}"
        )

    columns = []
    for index, part in enumerate(parts):
        stack = []
        for ch in part:
            stone = _STONES.get(ch)
            if stone is None:
                raise InvalidStoneError(f'"{ch}" in column {index} is not a valid stone')
            stack.append(stone)
        if len(stack) > options.height:
            raise ColumnOverflowError(
                f"column {index} holds {len(stack)} stones, height is {options.height}"
            )
        columns.append(stack)
    return columns


def import_state(options: GameOptions, text: str) -> Board:
    """
    Decode a state string into a new Board.

    Args:
        options: Options of the game the state belongs to
        text: State string in canonical form

    Returns:
        Freshly built Board

    Raises:
        StateFormatError: grammar violation
        InvalidStoneError: a column contains something other than X or O
        ColumnOverflowError: a column is taller than the board
        InconsistentStateError: the marker disagrees with the stones
    """
    if not isinstance(text, str):
        raise StateFormatError(f"state must be a string, got {type(text).__name__}")
    if text.count(MARKER_SEP) != 1:
        raise StateFormatError(f'state must contain exactly one "{MARKER_SEP}"')

    body, marker = text.split(MARKER_SEP)
    if len(marker) != 1:
        raise StateFormatError(f'state marker must be a single character, got "{marker}"')
    if marker not in _TO_MOVE and marker not in _STONES and marker != DRAW_MARKER:
        raise StateFormatError(f'"{marker}" is not a valid player or result marker')

    columns = _parse_columns(options, body)
    board = Board(options=options, columns=columns)

    x_count = sum(stack.count(Player.X) for stack in columns)
    o_count = board.stone_count - x_count
    if x_count - o_count not in (0, 1):
        raise InconsistentStateError(
            f"{x_count} X stones and {o_count} O stones cannot come from alternating moves"
        )

    # X moves first: even count means X is next, odd means X moved last
    next_player = Player.X if board.stone_count % 2 == 0 else Player.O
    last_mover = next_player.other
    winners = find_winners(board)
    full = is_full(board)

    if marker in _TO_MOVE:
        if _TO_MOVE[marker] is not next_player:
            raise InconsistentStateError(
                f'marker "{marker}" but {next_player.symbol} is to move'
            )
        if winners:
            raise InconsistentStateError("game marked ongoing but a winning line exists")
        if full:
            raise InconsistentStateError("game marked ongoing but the board is full")
        board.active_player = next_player
        board.result = GameResult.ONGOING

    elif marker in _STONES:
        winner = _STONES[marker]
        if winner not in winners:
            raise InconsistentStateError(f"{winner.symbol} marked as winner without a winning line")
        if winner.other in winners:
            raise InconsistentStateError("both players have a winning line")
        if winner is not last_mover:
            raise InconsistentStateError(
                f"{winner.symbol} marked as winner but {last_mover.symbol} moved last"
            )
        board.active_player = winner
        board.result = GameResult.win(winner)

    else:
        if not full:
            raise InconsistentStateError("game marked drawn but the board is not full")
        if winners:
            raise InconsistentStateError("game marked drawn but a winning line exists")
        board.active_player = last_mover
        board.result = GameResult.DRAW

    return board


def _marker(board: Board) -> str:
    if board.result is GameResult.DRAW:
        return DRAW_MARKER
    winner = board.result.winner
    if winner is not None:
        return winner.symbol
    return board.active_player.marker


def export_state(board: Board) -> str:
    """Encode a Board as its canonical state string."""
    body = COLUMN_SEP.join(
        "".join(stone.symbol for stone in stack) for stack in board.columns
    )
    return f"{body}{MARKER_SEP}{_marker(board)}"
