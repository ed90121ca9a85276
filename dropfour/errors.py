"""
errors.py - Exception types raised by the game engine and the console interface
"""

from typing import Any, Optional


class DropFourError(Exception):
    """Base class for all dropfour errors."""


class IllegalMoveError(DropFourError, ValueError):
    """A token cannot be dropped into the requested column."""

    def __init__(self, column: int, reason: Any, message: Optional[str] = None):
        self.column = column
        self.reason = reason
        super().__init__(message or f"Cannot play column {column}: {reason}")


class InvalidPositionError(DropFourError, IndexError):
    """A cell lookup was made outside the grid."""


class GameOverError(DropFourError):
    """An action was submitted after the game had already ended."""


class InputStreamFailure(DropFourError):
    """The input source broke; the game cannot continue."""
