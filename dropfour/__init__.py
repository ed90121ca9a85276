"""
dropfour - Two-player four-in-a-row console game

This package provides the game-state engine for a 7x6 gravity grid game:
board representation, move legality, win/draw detection and the turn loop,
plus a thin console interface around it.
"""

# Version number
__version__ = '0.1.0'
