"""
moves.py - Move legality and landing-cell resolution

Columns passed to the resolver are the 1-indexed numbers players type;
positions it returns are 0-indexed board coordinates.
"""

from dataclasses import dataclass
from typing import Union

from dropfour.debug import debug
from dropfour.errors import IllegalMoveError
from dropfour.game.board import Board
from dropfour.utils import COLS, EMPTY, IllegalReason, Position


@dataclass(frozen=True)
class LegalMove:
    position: Position


@dataclass(frozen=True)
class IllegalMove:
    column: int
    reason: IllegalReason


MoveOutcome = Union[LegalMove, IllegalMove]


class MoveResolver:
    """Decides whether a column can be played and where the token lands."""

    def __init__(self, board: Board):
        self.board = board

    def check(self, column: int) -> MoveOutcome:
        """
        Classify a requested column.

        Args:
            column: The column the player asked for (1-indexed)

        Returns:
            LegalMove with the landing position, or IllegalMove with the reason
        """
        if not 1 <= column <= COLS:
            debug.debug(f"Column {column} out of range", "moves")
            return IllegalMove(column, IllegalReason.OUT_OF_RANGE)

        if self.board.grid[0, column - 1] != EMPTY:
            debug.debug(f"Column {column} is full", "moves")
            return IllegalMove(column, IllegalReason.COLUMN_FULL)

        row = self.board.lowest_empty_row(column - 1)
        return LegalMove(Position(column - 1, row))

    def is_legal_move(self, column: int) -> bool:
        """True iff the column is within [1, COLS] and its top cell is empty."""
        return isinstance(self.check(column), LegalMove)

    def resolve_drop(self, column: int) -> Position:
        """
        Find the cell that will receive a token dropped into a column.

        The column is scanned from the bottom row upward and the first empty
        cell is returned.

        Raises:
            IllegalMoveError: if the column is not a legal move
        """
        outcome = self.check(column)
        if isinstance(outcome, IllegalMove):
            raise IllegalMoveError(outcome.column, outcome.reason)
        return outcome.position
