"""
cli.py - Command-line interface for playing dropfour

This module wires the turn controller to a text console: it reads and
interprets what players type, redraws the board after every move and
announces the result.
"""

import argparse
import re
import sys
from typing import List, Optional, TextIO

from dropfour import __version__
from dropfour.debug import debug, DebugLevel, LEVEL_NAMES
from dropfour.errors import InputStreamFailure
from dropfour.game.board import Board
from dropfour.game.controller import (GameResult, InputAction, Outcome, PlayColumn,
                                      QuitRequest, TurnController, TurnEvent,
                                      UnrecognizedInput)
from dropfour.utils import COLS, Player

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

ILLEGAL_MOVE_MESSAGE = "You cannot play at this location."
INPUT_ERROR_MESSAGE = "Error while inputting"

# A column is whatever integer the line starts with; trailing text is ignored
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_action(line: str) -> InputAction:
    """
    Interpret one line typed by a player.

    Args:
        line: Raw input line

    Returns:
        PlayColumn for a leading integer, QuitRequest for 'q' or 'Q',
        UnrecognizedInput for anything else
    """
    match = _LEADING_INT.match(line)
    if match:
        return PlayColumn(int(match.group(1)))

    text = line.strip()
    if text[:1] in ("q", "Q"):
        return QuitRequest()

    return UnrecognizedInput(text)


class ConsoleInput:
    """Prompts the current player and reads their action from a text stream."""

    def __init__(self, stream: Optional[TextIO] = None, out: Optional[TextIO] = None,
                 err: Optional[TextIO] = None):
        self._stream = stream
        self._out = out
        self._err = err

    def __call__(self, player: Player) -> InputAction:
        out = self._out or sys.stdout
        out.write(f"Play {player.number}: ")
        out.flush()

        while True:
            try:
                line = (self._stream or sys.stdin).readline()
            except OSError as e:
                raise self._failure(f"Error reading input: {e}") from e

            if line == "":
                raise self._failure("Input stream closed")

            # Blank lines are skipped, the prompt stays on screen
            if line.strip():
                return parse_action(line)

    def _failure(self, reason: str) -> InputStreamFailure:
        (self._err or sys.stderr).write(INPUT_ERROR_MESSAGE + "\n")
        return InputStreamFailure(reason)


class ConsoleRenderer:
    """Redraws the full board."""

    def __init__(self, out: Optional[TextIO] = None):
        self._out = out

    def __call__(self, board: Board) -> None:
        out = self._out or sys.stdout
        out.write("\n" + board.render() + "\n")
        out.flush()


def report_illegal(event: TurnEvent, err: Optional[TextIO] = None) -> None:
    """Tell the player their input was rejected."""
    debug.debug(f"Rejected input from {event.player}: {event.reason}", "cli")
    (err or sys.stderr).write(ILLEGAL_MOVE_MESSAGE + "\n")


def announce_result(result: GameResult, out: Optional[TextIO] = None) -> None:
    """Print the winner or the draw. Aborted games announce nothing."""
    out = out or sys.stdout
    if result.outcome == Outcome.WIN:
        out.write(f"Player {result.winner.number} wins!\n")
    elif result.outcome == Outcome.DRAW:
        out.write("It's a draw!\n")


def configure_debug(args: argparse.Namespace) -> None:
    """Configure logging from parsed arguments."""
    if args.debug:
        debug.configure(level=DebugLevel.DEBUG)
    else:
        debug.set_from_string(args.debug_level)

    if args.log_file:
        debug.configure(log_file=args.log_file)

    if args.components:
        debug.configure(components=[c.strip() for c in args.components.split(",") if c.strip()])


class SimpleCLI:
    """Console front end: parses arguments and plays one game."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
                 stderr: Optional[TextIO] = None):
        self.stdin = stdin
        self.stdout = stdout
        self.stderr = stderr
        self.args: Optional[argparse.Namespace] = None

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(prog='dropfour',
                                         description='Two-player four-in-a-row console game')
        parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play a game (default)')
        play_parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        play_parser.add_argument('--debug-level', choices=sorted(LEVEL_NAMES), default='warning',
                                 help='Logging level (default: warning)')
        play_parser.add_argument('--log-file', default=None, help='Also write logs to this file')
        play_parser.add_argument('--components', default=None,
                                 help='Comma-separated components to log (default: all)')

        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments; no command means 'play'."""
        argv = sys.argv[1:] if argv is None else list(argv)
        parser = self.build_parser()

        self.args = parser.parse_args(argv)
        if self.args.command is None:
            self.args = parser.parse_args(argv + ['play'])

        configure_debug(self.args)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """
        Run the CLI.

        Returns:
            Process exit code
        """
        if self.args is None:
            self.parse_args(argv)

        if self.args.command == 'play':
            return self.play_game()

        (self.stderr or sys.stderr).write("Please specify a command. Use --help for options.\n")
        return EXIT_FAILURE

    def play_game(self) -> int:
        """
        Play one game on the console.

        Returns:
            EXIT_SUCCESS after a win, a draw or a quit; EXIT_FAILURE if input broke
        """
        debug.info(f"Starting console game, columns 1-{COLS}", "cli")
        controller = TurnController()

        try:
            result = controller.run(
                ConsoleInput(self.stdin, self.stdout, self.stderr),
                ConsoleRenderer(self.stdout),
                on_illegal=lambda event: report_illegal(event, self.stderr),
            )
        except InputStreamFailure as e:
            debug.error(f"Game aborted: {e}", "cli")
            return EXIT_FAILURE

        announce_result(result, self.stdout)
        return EXIT_SUCCESS


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
