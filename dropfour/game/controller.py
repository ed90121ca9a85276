"""
controller.py - Turn loop for a two-player game

This module provides:
1. The input actions a front end hands to the game
2. The TurnController state machine that applies them
3. The final GameResult reported when a game ends
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional, Union

from dropfour.debug import debug
from dropfour.errors import GameOverError, InputStreamFailure
from dropfour.game.board import Board
from dropfour.game.moves import IllegalMove, MoveResolver
from dropfour.game.rules import game_status, winning_line
from dropfour.utils import GameStatus, IllegalReason, Player, Position


@dataclass(frozen=True)
class PlayColumn:
    """The player named a column (1-indexed, not yet validated)."""
    column: int


@dataclass(frozen=True)
class QuitRequest:
    """The player asked to leave the game."""


@dataclass(frozen=True)
class UnrecognizedInput:
    """The player typed something that is neither a column nor quit."""
    text: str = ""


InputAction = Union[PlayColumn, QuitRequest, UnrecognizedInput]


class TurnState(Enum):
    AWAITING_INPUT = auto()
    EVALUATING = auto()
    FINISHED = auto()
    ABORTED = auto()


class TurnEventKind(Enum):
    MOVE_APPLIED = auto()
    ILLEGAL_MOVE = auto()
    WIN = auto()
    DRAW = auto()
    QUIT = auto()


@dataclass(frozen=True)
class TurnEvent:
    """What happened when an action was submitted."""
    kind: TurnEventKind
    player: Player
    status: GameStatus = GameStatus.ONGOING
    position: Optional[Position] = None
    reason: Optional[IllegalReason] = None

    @property
    def board_changed(self) -> bool:
        return self.position is not None


class Outcome(Enum):
    WIN = auto()
    DRAW = auto()
    ABORTED = auto()


@dataclass(frozen=True)
class GameResult:
    """How a finished game ended."""
    outcome: Outcome
    winner: Optional[Player] = None

    @classmethod
    def from_status(cls, status: GameStatus) -> 'GameResult':
        if status == GameStatus.DRAW:
            return cls(Outcome.DRAW)
        if status.winner() is not None:
            return cls(Outcome.WIN, status.winner())
        raise ValueError(f"Game is not over: {status}")

    @classmethod
    def aborted(cls) -> 'GameResult':
        return cls(Outcome.ABORTED)


ActionReader = Callable[[Player], InputAction]
BoardRenderer = Callable[[Board], None]
IllegalMoveHandler = Callable[[TurnEvent], None]


class TurnController:
    """
    Drives a game: alternates players, applies moves and stops on a win,
    a draw or a quit.

    The controller owns its Board for the whole game. Player ONE moves first.
    """

    def __init__(self, board: Optional[Board] = None):
        self.board = board if board is not None else Board()
        self.resolver = MoveResolver(self.board)
        self._reset_turns()

    def _reset_turns(self) -> None:
        self.state = TurnState.AWAITING_INPUT
        self.current_player = Player.ONE
        self.status = GameStatus.ONGOING
        self.last_position: Optional[Position] = None
        self.moves_made = 0

    def start(self) -> None:
        """Clear the board and begin a new game."""
        debug.debug("Starting new game", "controller")
        self.board.initialize()
        self._reset_turns()

    def is_over(self) -> bool:
        return self.state in (TurnState.FINISHED, TurnState.ABORTED)

    def result(self) -> Optional[GameResult]:
        """
        Get the final result.

        Returns:
            The result of a finished or aborted game, None while it is running
        """
        if self.state == TurnState.ABORTED:
            return GameResult.aborted()
        if self.state == TurnState.FINISHED:
            return GameResult.from_status(self.status)
        return None

    def submit(self, action: InputAction) -> TurnEvent:
        """
        Apply one input action for the current player.

        Args:
            action: The action produced by the input collaborator

        Returns:
            A TurnEvent describing the transition

        Raises:
            GameOverError: if the game has already finished or been aborted
        """
        if self.is_over():
            raise GameOverError(f"Game is over ({self.state.name.lower()})")

        player = self.current_player

        if isinstance(action, QuitRequest):
            debug.info(f"{player} quit the game", "controller")
            self.state = TurnState.ABORTED
            return TurnEvent(TurnEventKind.QUIT, player)

        if isinstance(action, UnrecognizedInput):
            debug.debug(f"Unrecognized input from {player}: {action.text!r}", "controller")
            return TurnEvent(TurnEventKind.ILLEGAL_MOVE, player, reason=IllegalReason.UNPARSABLE)

        if not isinstance(action, PlayColumn):
            raise TypeError(f"Unsupported input action: {action!r}")

        outcome = self.resolver.check(action.column)
        if isinstance(outcome, IllegalMove):
            debug.debug(f"{player} cannot play column {action.column}: {outcome.reason}", "controller")
            return TurnEvent(TurnEventKind.ILLEGAL_MOVE, player, reason=outcome.reason)

        position = self.board.place(outcome.position.column, player)
        self.last_position = position
        self.moves_made += 1
        self.state = TurnState.EVALUATING
        return self._evaluate(player, position)

    def _evaluate(self, player: Player, position: Position) -> TurnEvent:
        self.status = game_status(self.board, position, player)

        if self.status.is_game_over():
            self.state = TurnState.FINISHED
            if self.status == GameStatus.DRAW:
                debug.info(f"Draw after {self.moves_made} moves", "controller")
                return TurnEvent(TurnEventKind.DRAW, player, self.status, position)

            line = winning_line(self.board, position, player)
            debug.info(f"{player} wins after {self.moves_made} moves, "
                       f"line {[tuple(p) for p in line]}", "controller")
            return TurnEvent(TurnEventKind.WIN, player, self.status, position)

        self.current_player = player.other()
        self.state = TurnState.AWAITING_INPUT
        debug.trace(f"Switching to {self.current_player}", "controller")
        return TurnEvent(TurnEventKind.MOVE_APPLIED, player, self.status, position)

    def run(self, read_action: ActionReader, render: BoardRenderer,
            on_illegal: Optional[IllegalMoveHandler] = None) -> GameResult:
        """
        Play a whole game.

        Args:
            read_action: Called with the current player; returns their next action
            render: Called with the board at the start and after every move
            on_illegal: Called with the event when input is rejected

        Returns:
            The final GameResult (a win, a draw, or aborted on quit)

        Raises:
            InputStreamFailure: if read_action reports that input is broken
        """
        self.start()
        render(self.board)

        while not self.is_over():
            try:
                action = read_action(self.current_player)
            except InputStreamFailure as e:
                debug.error(f"Input failed during {self.current_player}'s turn: {e}", "controller")
                raise

            event = self.submit(action)

            if event.kind == TurnEventKind.ILLEGAL_MOVE:
                if on_illegal is not None:
                    on_illegal(event)
                continue

            if event.board_changed:
                render(self.board)

        return self.result()
