"""
Board representation.

The board is stored column by column:
- ``columns[c]`` lists the stones in column c from bottom to top
- the height of a column is the length of its list
- row 0 is the bottom row

X always moves first, so while the game is running the player to move
follows from the number of stones on the board.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .options import GameOptions


class Player(Enum):
    """The two players. X moves first."""

    X = "X"
    O = "O"

    @property
    def other(self) -> Player:
        return Player.O if self is Player.X else Player.X

    @property
    def symbol(self) -> str:
        """Stone character, also the winner marker."""
        return self.value

    @property
    def marker(self) -> str:
        """Lowercase 'to move' marker."""
        return self.value.lower()

    @classmethod
    def from_id(cls, player_id: int) -> Player:
        """Map a host player id (1 or 2) to a Player."""
        if player_id == 1:
            return cls.X
        if player_id == 2:
            return cls.O
        raise ValueError(f"invalid player id {player_id}, must be 1 or 2")

    @property
    def id(self) -> int:
        return 1 if self is Player.X else 2


class GameResult(Enum):
    """Game status: running, won by one player, or drawn."""

    ONGOING = "ongoing"
    X_WINS = "x_wins"
    O_WINS = "o_wins"
    DRAW = "draw"

    @classmethod
    def win(cls, player: Player) -> GameResult:
        return cls.X_WINS if player is Player.X else cls.O_WINS

    @property
    def winner(self) -> Optional[Player]:
        if self is GameResult.X_WINS:
            return Player.X
        if self is GameResult.O_WINS:
            return Player.O
        return None

    def is_over(self) -> bool:
        return self is not GameResult.ONGOING


@dataclass
class Board:
    """
    One game position.

    Only ``engine.apply_move`` mutates a board once it is built; the codec
    constructs boards directly.

    Attributes:
        options: Board dimensions and connect length
        columns: Stones per column, bottom to top
        active_player: Player to move; the last mover once the game is over
        result: Current game result
    """

    options: GameOptions
    columns: list[list[Player]] = field(default_factory=list)
    active_player: Player = Player.X
    result: GameResult = GameResult.ONGOING

    def __post_init__(self):
        if not self.columns:
            self.columns = [[] for _ in range(self.options.width)]
        if len(self.columns) != self.options.width:
            raise ValueError(f"Board must have {self.options.width} columns")

    @property
    def width(self) -> int:
        return self.options.width

    @property
    def height(self) -> int:
        return self.options.height

    @property
    def heights(self) -> list[int]:
        return [len(col) for col in self.columns]

    @property
    def stone_count(self) -> int:
        return sum(len(col) for col in self.columns)

    def cell(self, column: int, row: int) -> Optional[Player]:
        """Stone at (column, row), or None if empty or off the board."""
        if not (0 <= column < self.width and 0 <= row < self.height):
            return None
        stack = self.columns[column]
        if row >= len(stack):
            return None
        return stack[row]

    def is_terminal(self) -> bool:
        return self.result.is_over()

    def copy(self) -> Board:
        return Board(
            options=self.options,
            columns=[list(col) for col in self.columns],
            active_player=self.active_player,
            result=self.result,
        )
