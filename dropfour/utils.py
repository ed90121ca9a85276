"""
utils.py - Constants, enumerations and helpers shared across dropfour

This module holds the board dimensions, player and status types, the
direction table used for run counting and the ASCII board renderer.
"""

from enum import Enum, auto
from typing import Dict, NamedTuple, Optional, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of tokens in a row to win

EMPTY = 0  # Grid value of an empty cell


class Player(Enum):
    """The two players. Values are what the board grid stores."""
    ONE = 1
    TWO = 2

    def other(self) -> 'Player':
        """Get the other player."""
        return Player.TWO if self == Player.ONE else Player.ONE

    @property
    def number(self) -> int:
        """1 or 2, as shown to users."""
        return self.value

    def __str__(self):
        return f"Player {self.value}"


# Empty cell or the player that owns it
CellState = Optional[Player]

# Presentation only; game logic never looks at symbols
PLAYER_SYMBOLS: Dict[Player, str] = {
    Player.ONE: "O",
    Player.TWO: "X",
}


class Position(NamedTuple):
    """A (column, row) cell coordinate. Row 0 is the top of the board."""
    column: int
    row: int

    def step(self, d_column: int, d_row: int) -> 'Position':
        return Position(self.column + d_column, self.row + d_row)


class GameStatus(Enum):
    """Status of the game after the most recent move."""
    ONGOING = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        return self != GameStatus.ONGOING

    def winner(self) -> Optional[Player]:
        if self == GameStatus.PLAYER_ONE_WIN:
            return Player.ONE
        if self == GameStatus.PLAYER_TWO_WIN:
            return Player.TWO
        return None

    @classmethod
    def win_for(cls, player: Player) -> 'GameStatus':
        return cls.PLAYER_ONE_WIN if player == Player.ONE else cls.PLAYER_TWO_WIN


class IllegalReason(Enum):
    """Why a column request was rejected."""
    OUT_OF_RANGE = "column out of range"
    COLUMN_FULL = "column is full"
    UNPARSABLE = "unrecognized input"

    def __str__(self):
        return self.value


class Axis(Enum):
    VERTICAL = auto()
    HORIZONTAL = auto()
    DIAGONAL = auto()
    ANTI_DIAGONAL = auto()


Direction = Tuple[int, int]  # (d_column, d_row)

# Each axis is counted outward from the placed token in both directions
DIRECTION_PAIRS: Dict[Axis, Tuple[Direction, Direction]] = {
    Axis.VERTICAL: ((0, 1), (0, -1)),
    Axis.HORIZONTAL: ((1, 0), (-1, 0)),
    Axis.DIAGONAL: ((1, 1), (-1, -1)),
    Axis.ANTI_DIAGONAL: ((1, -1), (-1, 1)),
}


def is_valid_position(position: Position) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        position: The (column, row) coordinate to check

    Returns:
        True if the position is on the board, False otherwise
    """
    return 0 <= position.column < COLS and 0 <= position.row < ROWS


def render_board_ascii(grid: np.ndarray, symbols: Optional[Dict[Player, str]] = None) -> str:
    """
    Render a grid as ASCII art, with column numbers above and below.

    Args:
        grid: A (ROWS, COLS) array of cell values
        symbols: Token symbol for each player, defaults to PLAYER_SYMBOLS

    Returns:
        The board drawing, one line per text row
    """
    symbols = symbols or PLAYER_SYMBOLS
    by_value = {player.value: symbol for player, symbol in symbols.items()}

    numbers = "".join(f"  {col} " for col in range(1, COLS + 1))
    separator = "+" + "---+" * COLS

    lines = [numbers, separator]
    for row in range(ROWS):
        cells = (by_value.get(int(grid[row, col]), " ") for col in range(COLS))
        lines.append("|" + "".join(f" {cell} |" for cell in cells))
        lines.append(separator)
    lines.append(numbers)

    return "\n".join(lines)
