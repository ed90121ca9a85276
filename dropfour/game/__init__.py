"""
dropfour.game - Core game mechanics

This package contains the board, move resolution, win/draw detection
and the turn controller that drives a game.
"""

from dropfour.game.board import Board
from dropfour.game.moves import MoveResolver
from dropfour.game.rules import game_status
from dropfour.game.controller import TurnController

__all__ = ['Board', 'MoveResolver', 'game_status', 'TurnController']
