"""
Exceptions raised by the Connect-K rules engine.

Every error is an ordinary ValueError subclass carrying an ErrorKind, so a
host can either catch the broad family (ConfigError, StateError, MoveError)
or branch on ``err.kind``. Nothing here is fatal: the engine validates before
it mutates, so a caught error always leaves the board as it was.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Machine-readable reason attached to every engine error."""

    INVALID_FORMAT = "invalid_format"
    OUT_OF_RANGE = "out_of_range"
    UNSATISFIABLE_CONNECT = "unsatisfiable_connect"
    INVALID_STONE = "invalid_stone"
    COLUMN_OVERFLOW = "column_overflow"
    INCONSISTENT_STATE = "inconsistent_state"
    GAME_OVER = "game_over"
    INVALID_COLUMN = "invalid_column"
    COLUMN_FULL = "column_full"
    NOT_YOUR_TURN = "not_your_turn"


class ConnectKError(ValueError):
    """Base class for all engine errors."""

    # Set on the concrete subclasses; the family bases carry no kind
    kind: Optional[ErrorKind] = None

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# --- Options ---

class ConfigError(ConnectKError):
    """The options string could not be turned into GameOptions."""


class OptionsFormatError(ConfigError):
    kind = ErrorKind.INVALID_FORMAT


class OptionsRangeError(ConfigError):
    kind = ErrorKind.OUT_OF_RANGE


class UnsatisfiableConnectError(ConfigError):
    kind = ErrorKind.UNSATISFIABLE_CONNECT


# --- State strings ---

class StateError(ConnectKError):
    """A state string was rejected by the codec."""


class StateFormatError(StateError):
    kind = ErrorKind.INVALID_FORMAT


class InvalidStoneError(StateError):
    kind = ErrorKind.INVALID_STONE


class ColumnOverflowError(StateError):
    kind = ErrorKind.COLUMN_OVERFLOW


class InconsistentStateError(StateError):
    kind = ErrorKind.INCONSISTENT_STATE


# --- Moves ---

class MoveError(ConnectKError):
    """A move was rejected; the board is unchanged."""


class GameOverError(MoveError):
    kind = ErrorKind.GAME_OVER


class InvalidColumnError(MoveError):
    kind = ErrorKind.INVALID_COLUMN


class ColumnFullError(MoveError):
    kind = ErrorKind.COLUMN_FULL


class NotYourTurnError(MoveError):
    kind = ErrorKind.NOT_YOUR_TURN


class MoveFormatError(MoveError):
    kind = ErrorKind.INVALID_FORMAT
