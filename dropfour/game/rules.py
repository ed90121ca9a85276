"""
rules.py - Win and draw detection

Status is decided from the token just placed: along each of the four axes,
same-player tokens are counted outward from that cell in both directions,
and the longest run decides whether the move won.
"""

from typing import List, Tuple

from dropfour.debug import debug
from dropfour.game.board import Board
from dropfour.utils import (CONNECT_N, DIRECTION_PAIRS, Direction, GameStatus,
                            Player, Position, is_valid_position)


def count_tokens_from(board: Board, position: Position, direction: Direction, token: Player) -> int:
    """
    Count the token at a position plus the matching tokens beyond it.

    Args:
        board: The board to inspect
        position: The starting cell, counted as the first token
        direction: (d_column, d_row) step to walk
        token: The player whose tokens are counted

    Returns:
        Length of the run starting at position, at least 1
    """
    d_column, d_row = direction
    count = 1
    probe = position.step(d_column, d_row)

    while is_valid_position(probe) and board.grid[probe.row, probe.column] == token.value:
        count += 1
        probe = probe.step(d_column, d_row)

    return count


def axis_run_length(board: Board, position: Position,
                    pair: Tuple[Direction, Direction], token: Player) -> int:
    """Run length through a position along one axis."""
    forward, backward = pair
    # The origin is counted by both directions
    return (count_tokens_from(board, position, forward, token)
            + count_tokens_from(board, position, backward, token) - 1)


def longest_run(board: Board, position: Position, token: Player) -> int:
    """Longest run through a position across all four axes."""
    return max(axis_run_length(board, position, pair, token)
               for pair in DIRECTION_PAIRS.values())


def winning_line(board: Board, position: Position, token: Player) -> List[Position]:
    """
    Get the cells of a winning run through a position.

    Returns:
        Cells of the first axis with a run of CONNECT_N or more, ordered
        from one end to the other, or an empty list if there is none
    """
    for forward, backward in DIRECTION_PAIRS.values():
        length = axis_run_length(board, position, (forward, backward), token)
        if length < CONNECT_N:
            continue

        back_count = count_tokens_from(board, position, backward, token)
        start = position.step(backward[0] * (back_count - 1), backward[1] * (back_count - 1))
        return [start.step(forward[0] * i, forward[1] * i) for i in range(length)]

    return []


def game_status(board: Board, position: Position, token: Player) -> GameStatus:
    """
    Decide the game status after a token was placed.

    Args:
        board: The board after the move
        position: Where the token landed
        token: The player who moved

    Returns:
        A win for the player if the move completed a run of CONNECT_N,
        otherwise DRAW if the board is full, otherwise ONGOING
    """
    debug.start_timer("win_check")
    run = longest_run(board, position, token)
    debug.end_timer("win_check", "rules")

    # A move that fills the board and completes a run is a win
    if run >= CONNECT_N:
        debug.info(f"{token} wins with a run of {run} through {tuple(position)}", "rules")
        return GameStatus.win_for(token)

    if board.is_full():
        debug.info("Board is full, game ends in a draw", "rules")
        return GameStatus.DRAW

    return GameStatus.ONGOING
