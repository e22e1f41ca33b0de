"""
Host-facing game session.

Bundles options and board behind the method surface a turn-based game
runtime expects: create from an options string and optional state, import
and export state, list and make moves, read results.
"""

from __future__ import annotations

from typing import Optional

from .board import Board, GameResult, Player
from .codec import export_state, import_state
from .engine import apply_move, legal_moves_list, new_board, render, to_move
from .options import (
    DEFAULT_OPTIONS,
    MAX_HEIGHT,
    MAX_WIDTH,
    GameOptions,
    format_options,
    parse_options,
)


class GameSession:
    """
    One running game.

    Args:
        options: Options string (``<W>x<H>@<K>``); defaults to ``7x6@4``
        state: Optional state string to resume from
        max_width: Largest accepted board width
        max_height: Largest accepted board height
    """

    def __init__(
        self,
        options: Optional[str] = None,
        state: Optional[str] = None,
        max_width: int = MAX_WIDTH,
        max_height: int = MAX_HEIGHT,
    ):
        if options is None:
            self.options: GameOptions = DEFAULT_OPTIONS
        else:
            self.options = parse_options(options, max_width=max_width, max_height=max_height)
        self.board: Board = new_board(self.options)
        self.import_state(state)

    def import_state(self, state: Optional[str]) -> None:
        """Load a state string; None resets to an empty board.

        On error the current board is kept.
        """
        if state is None:
            self.board = new_board(self.options)
        else:
            self.board = import_state(self.options, state)

    def export_state(self) -> str:
        return export_state(self.board)

    def export_options(self) -> str:
        return format_options(self.options)

    def legal_moves(self) -> list[int]:
        return legal_moves_list(self.board)

    def make_move(self, column: int, player: Optional[Player] = None) -> None:
        apply_move(self.board, column, player)

    def result(self) -> GameResult:
        return self.board.result

    def to_move(self) -> Optional[Player]:
        return to_move(self.board)

    def winner(self) -> Optional[Player]:
        return self.board.result.winner

    def render(self) -> str:
        return render(self.board)

    def copy(self) -> GameSession:
        other = GameSession.__new__(GameSession)
        other.options = self.options
        other.board = self.board.copy()
        return other
