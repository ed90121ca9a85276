import io

import pytest

from dropfour.debug import debug, DebugLevel
from dropfour.errors import InputStreamFailure
from dropfour.game.controller import (GameResult, Outcome, PlayColumn, QuitRequest,
                                      UnrecognizedInput)
from dropfour.interfaces.cli import (EXIT_FAILURE, EXIT_SUCCESS, ILLEGAL_MOVE_MESSAGE,
                                     INPUT_ERROR_MESSAGE, ConsoleInput, SimpleCLI,
                                     announce_result, parse_action)
from dropfour.utils import Player


def play_console(text: str, *args: str):
    stdin, stdout, stderr = io.StringIO(text), io.StringIO(), io.StringIO()
    code = SimpleCLI(stdin, stdout, stderr).run(list(args))
    return code, stdout.getvalue(), stderr.getvalue()


@pytest.mark.parametrize("line, expected", [
    ("4\n", PlayColumn(4)),
    ("  7  \n", PlayColumn(7)),
    ("3abc\n", PlayColumn(3)),
    ("-2\n", PlayColumn(-2)),
    ("9", PlayColumn(9)),
    ("q\n", QuitRequest()),
    ("Q\n", QuitRequest()),
    ("quit\n", QuitRequest()),
    ("x\n", UnrecognizedInput("x")),
    ("abc 4\n", UnrecognizedInput("abc 4")),
])
def test_parse_action(line: str, expected) -> None:
    assert parse_action(line) == expected


def test_console_input_prompts_and_skips_blank_lines() -> None:
    out = io.StringIO()
    reader = ConsoleInput(io.StringIO("\n   \n5\n"), out, io.StringIO())

    assert reader(Player.TWO) == PlayColumn(5)
    assert out.getvalue() == "Play 2: "


def test_console_input_end_of_stream_is_fatal() -> None:
    err = io.StringIO()
    reader = ConsoleInput(io.StringIO(""), io.StringIO(), err)

    with pytest.raises(InputStreamFailure):
        reader(Player.ONE)
    assert err.getvalue() == INPUT_ERROR_MESSAGE + "\n"


def test_console_input_read_error_is_fatal() -> None:
    class BrokenStream:
        def readline(self):
            raise OSError("device gone")

    with pytest.raises(InputStreamFailure):
        ConsoleInput(BrokenStream(), io.StringIO(), io.StringIO())(Player.ONE)


@pytest.mark.parametrize("result, expected", [
    (GameResult(Outcome.WIN, Player.ONE), "Player 1 wins!\n"),
    (GameResult(Outcome.WIN, Player.TWO), "Player 2 wins!\n"),
    (GameResult(Outcome.DRAW), "It's a draw!\n"),
    (GameResult.aborted(), ""),
])
def test_announce_result(result: GameResult, expected: str) -> None:
    out = io.StringIO()
    announce_result(result, out)
    assert out.getvalue() == expected


def test_console_vertical_win() -> None:
    code, out, err = play_console("4\n1\n4\n1\n4\n1\n4\n", "play")

    assert code == EXIT_SUCCESS
    assert out.endswith("Player 1 wins!\n")
    assert out.count("Play 1: ") == 4
    assert out.count("Play 2: ") == 3
    # Initial board plus one redraw per move
    assert out.count("  1   2   3   4   5   6   7 ") == 2 * 8
    assert err == ""


def test_console_draw(draw_sequence) -> None:
    text = "\n".join(str(col) for col in draw_sequence) + "\n"

    code, out, err = play_console(text)

    assert code == EXIT_SUCCESS
    assert out.endswith("It's a draw!\n")
    assert "wins" not in out


def test_console_illegal_column_reprompts_same_player() -> None:
    code, out, err = play_console("9\nq\n", "play")

    assert code == EXIT_SUCCESS
    assert err == ILLEGAL_MOVE_MESSAGE + "\n"
    assert out.count("Play 1: ") == 2
    assert "Play 2: " not in out
    assert "wins" not in out and "draw" not in out


def test_console_garbage_input_reprompts() -> None:
    code, out, err = play_console("hello\n2\nq\n")

    assert code == EXIT_SUCCESS
    assert err.count(ILLEGAL_MOVE_MESSAGE) == 1
    assert out.count("Play 1: ") == 2
    assert out.count("Play 2: ") == 1


def test_console_quit_announces_nothing() -> None:
    code, out, err = play_console("q\n")

    assert code == EXIT_SUCCESS
    assert out.rstrip().endswith("Play 1:")
    assert err == ""


def test_console_input_failure_exits_with_failure() -> None:
    code, out, err = play_console("3\n")

    assert code == EXIT_FAILURE
    assert INPUT_ERROR_MESSAGE in err
    assert "wins" not in out


def test_no_command_defaults_to_play() -> None:
    cli = SimpleCLI()
    cli.parse_args([])

    assert cli.args.command == 'play'
    assert cli.args.debug_level == 'warning'


def test_debug_flags_configure_logging(tmp_path) -> None:
    log_file = tmp_path / "game.log"
    cli = SimpleCLI()
    cli.parse_args(['play', '--debug-level', 'info', '--log-file', str(log_file),
                    '--components', 'controller, rules'])

    assert debug.level == DebugLevel.INFO
    debug.info("logged to file", "controller")
    debug.info("filtered out", "board")
    debug.configure(log_file="")

    contents = log_file.read_text()
    assert "[controller] logged to file" in contents
    assert "filtered out" not in contents


def test_debug_switch_wins_over_level() -> None:
    SimpleCLI().parse_args(['play', '--debug', '--debug-level', 'error'])
    assert debug.level == DebugLevel.DEBUG


def test_version_flag(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        SimpleCLI().run(['--version'])

    assert excinfo.value.code == 0
    assert "dropfour" in capsys.readouterr().out
