"""Utilities module."""

from .config import Config, get_default_config
from .logging import (
    Logger,
    MoveRecord,
    console,
    print_config,
    print_board,
)

__all__ = [
    "Config",
    "get_default_config",
    "Logger",
    "MoveRecord",
    "console",
    "print_config",
    "print_board",
]
