"""
connectk - rules engine for generalized Connect Four.

Connect K stones in a row on a W x H board. The engine parses options,
imports and exports state strings, lists and applies moves, and reports the
result; everything around it (UI, persistence, networking) belongs to the
host.

Usage:
    from connectk import parse_options, new_board, apply_move, export_state

    options = parse_options("7x6@4")
    board = new_board(options)
    apply_move(board, 3)
    print(export_state(board))  # ///X///#o
"""

__version__ = "0.1.0"

from .errors import (
    ErrorKind,
    ConnectKError,
    ConfigError,
    StateError,
    MoveError,
)
from .game import (
    GameOptions,
    Player,
    GameResult,
    Board,
    GameSession,
    parse_options,
    format_options,
    new_board,
    import_state,
    export_state,
    legal_moves,
    apply_move,
    result,
)

__all__ = [
    "ErrorKind",
    "ConnectKError",
    "ConfigError",
    "StateError",
    "MoveError",
    "GameOptions",
    "Player",
    "GameResult",
    "Board",
    "GameSession",
    "parse_options",
    "format_options",
    "new_board",
    "import_state",
    "export_state",
    "legal_moves",
    "apply_move",
    "result",
    "__version__",
]
