"""Game module - Connect-K rules, state codec and encodings."""

from .options import (
    MAX_WIDTH,
    MAX_HEIGHT,
    DEFAULT_OPTIONS,
    GameOptions,
    parse_options,
    format_options,
)
from .board import Player, GameResult, Board
from .detect import detect, is_full, find_winners
from .engine import (
    new_board,
    legal_moves,
    legal_moves_list,
    apply_move,
    result,
    to_move,
    parse_move,
    format_move,
    render,
)
from .codec import import_state, export_state
from .encoding import NUM_CHANNELS, to_grid, encode_planes, legal_mask
from .session import GameSession

__all__ = [
    "MAX_WIDTH",
    "MAX_HEIGHT",
    "DEFAULT_OPTIONS",
    "GameOptions",
    "parse_options",
    "format_options",
    "Player",
    "GameResult",
    "Board",
    "detect",
    "is_full",
    "find_winners",
    "new_board",
    "legal_moves",
    "legal_moves_list",
    "apply_move",
    "result",
    "to_move",
    "parse_move",
    "format_move",
    "render",
    "import_state",
    "export_state",
    "NUM_CHANNELS",
    "to_grid",
    "encode_planes",
    "legal_mask",
    "GameSession",
]
