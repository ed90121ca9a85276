"""
dropfour.interfaces - User interfaces for the game

This package contains the console front end: input parsing, board
display and result announcement.
"""

# Don't import anything here to avoid circular imports
__all__ = []
