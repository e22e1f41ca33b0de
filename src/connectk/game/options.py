"""
Game options: board width, board height and connect length.

Options are written as ``<W>x<H>@<K>``, e.g. ``7x6@4`` for classic Connect 4.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..errors import OptionsFormatError, OptionsRangeError, UnsatisfiableConnectError

MAX_WIDTH = 255
MAX_HEIGHT = 255
MIN_CONNECT = 2

# No signs, no whitespace, no leading zeros
_NUMBER = r"(0|[1-9][0-9]*)"
_OPTIONS_RE = re.compile(rf"{_NUMBER}x{_NUMBER}@{_NUMBER}")


@dataclass(frozen=True)
class GameOptions:
    """Validated, immutable board configuration."""

    width: int
    height: int
    connect: int

    @property
    def num_cells(self) -> int:
        return self.width * self.height

    def __str__(self) -> str:
        return format_options(self)


DEFAULT_OPTIONS = GameOptions(width=7, height=6, connect=4)


def parse_options(
    text: str,
    max_width: int = MAX_WIDTH,
    max_height: int = MAX_HEIGHT,
) -> GameOptions:
    """
    Parse an options string into GameOptions.

    Args:
        text: Options in the form ``<W>x<H>@<K>``
        max_width: Largest accepted board width
        max_height: Largest accepted board height

    Returns:
        Validated GameOptions

    Raises:
        OptionsFormatError: text does not match the grammar
        OptionsRangeError: a dimension or the connect length is out of bounds
        UnsatisfiableConnectError: connect length exceeds both dimensions
    """
    if not isinstance(text, str):
        raise OptionsFormatError(f"options must be a string, got {type(text).__name__}")

    match = _OPTIONS_RE.fullmatch(text)
    if match is None:
        raise OptionsFormatError(f'options "{text}" do not match <W>x<H>@<K>')

    width, height, connect = (int(g) for g in match.groups())

    if not 1 <= width <= max_width:
        raise OptionsRangeError(f"width must be in [1, {max_width}], got {width}")
    if not 1 <= height <= max_height:
        raise OptionsRangeError(f"height must be in [1, {max_height}], got {height}")
    if connect < MIN_CONNECT:
        raise OptionsRangeError(f"connect length must be at least {MIN_CONNECT}, got {connect}")

    if connect > max(width, height):
        raise UnsatisfiableConnectError(
            f"connect length {connect} exceeds both width {width} and height {height}"
        )

    return GameOptions(width=width, height=height, connect=connect)


def format_options(options: GameOptions) -> str:
    """Return the canonical options string."""
    return f"{options.width}x{options.height}@{options.connect}"
