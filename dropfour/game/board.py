"""
board.py - Board representation for dropfour

This module implements the Board class, which owns the grid of cells and
supports dropping tokens and querying occupancy. Legality of a requested
column is decided by the move resolver; the board only refuses moves it
physically cannot make.
"""

import numpy as np
from typing import Optional

from dropfour.debug import debug
from dropfour.errors import IllegalMoveError, InvalidPositionError
from dropfour.utils import (ROWS, COLS, EMPTY, Player, CellState, Position,
                            IllegalReason, is_valid_position, render_board_ascii)


class Board:
    """
    A 7x6 grid stored as a (ROWS, COLS) numpy array indexed [row, column].

    Row 0 is the top of the board. Tokens fill each column from the bottom
    up, so a column never has an empty cell below an occupied one.
    """

    def __init__(self):
        """Create an empty board."""
        self.initialize()

    def initialize(self) -> None:
        """Set every cell to empty."""
        debug.debug("Initializing board", "board")
        self.grid = np.full((ROWS, COLS), EMPTY, dtype=np.int8)

    def copy(self) -> 'Board':
        """
        Create a deep copy of the board.

        Returns:
            A new Board with the same cell contents
        """
        new_board = Board.__new__(Board)
        new_board.grid = self.grid.copy()
        return new_board

    def is_full(self) -> bool:
        """True iff no empty cell remains anywhere."""
        return not np.any(self.grid == EMPTY)

    def cell_at(self, position: Position) -> CellState:
        """
        Get the state of a cell.

        Args:
            position: The cell to look up

        Returns:
            The occupying player, or None if the cell is empty

        Raises:
            InvalidPositionError: if the position is off the board
        """
        if not is_valid_position(position):
            raise InvalidPositionError(f"Position {tuple(position)} is outside the board")

        value = int(self.grid[position.row, position.column])
        return None if value == EMPTY else Player(value)

    def lowest_empty_row(self, column: int) -> Optional[int]:
        """
        Find where a token dropped into a column would land.

        Args:
            column: The column to check (0-indexed)

        Returns:
            The row index of the lowest empty cell, or None if the column is full
        """
        for row in range(ROWS - 1, -1, -1):
            if self.grid[row, column] == EMPTY:
                return row
        return None

    def place(self, column: int, token: Player) -> Position:
        """
        Drop a token into the lowest empty row of a column.

        Args:
            column: The column to drop into (0-indexed)
            token: The player dropping the token

        Returns:
            The position where the token landed

        Raises:
            IllegalMoveError: if the column is off the board or already full
        """
        if not 0 <= column < COLS:
            raise IllegalMoveError(column + 1, IllegalReason.OUT_OF_RANGE)

        row = self.lowest_empty_row(column)
        if row is None:
            raise IllegalMoveError(column + 1, IllegalReason.COLUMN_FULL)

        self.grid[row, column] = token.value
        position = Position(column, row)
        debug.trace(f"{token} placed at {tuple(position)}", "board")
        return position

    def empty_cells(self) -> int:
        """Number of cells still free."""
        return int(np.count_nonzero(self.grid == EMPTY))

    def get_state(self) -> np.ndarray:
        """
        Get the current cell values.

        Returns:
            A copy of the grid, so callers cannot mutate the board
        """
        return self.grid.copy()

    def render(self) -> str:
        """Render the board as a string."""
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()
