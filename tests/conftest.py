import pytest

from dropfour.debug import debug, DebugLevel
from dropfour.game.board import Board
from dropfour.game.controller import PlayColumn, TurnController
from dropfour.utils import COLS, ROWS

# 42 alternating moves (1-indexed columns) that fill the board with no run
# longer than two. Columns 1-2 and 3-4 are filled in pairs, 5-7 together.
DRAW_SEQUENCE = (
    [2, 1, 1, 2, 1, 2, 2, 1, 2, 1, 1, 2]
    + [4, 3, 3, 4, 3, 4, 4, 3, 4, 3, 3, 4]
    + [6, 5, 5, 7, 7, 6, 5, 6, 7, 5, 6, 5, 5, 7, 6, 7, 7, 6]
)


def draw_pattern_value(row: int, col: int) -> int:
    """Cell value left by DRAW_SEQUENCE."""
    return 1 + ((((row + 1) // 2) % 2) ^ (col % 2))


@pytest.fixture(autouse=True)
def reset_debug():
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, log_file="", components=[])


@pytest.fixture
def board() -> Board:
    return Board()


@pytest.fixture
def controller() -> TurnController:
    return TurnController()


@pytest.fixture
def draw_board() -> Board:
    """A full board with no four-in-a-row anywhere."""
    b = Board()
    for row in range(ROWS):
        for col in range(COLS):
            b.grid[row, col] = draw_pattern_value(row, col)
    return b


@pytest.fixture
def play():
    """Submit a list of 1-indexed columns and return the events."""
    def _play(ctrl: TurnController, columns):
        return [ctrl.submit(PlayColumn(col)) for col in columns]
    return _play


@pytest.fixture
def stack():
    """Write tokens bottom-up into a 0-indexed column, bypassing the rules."""
    def _stack(b: Board, column: int, players) -> None:
        for offset, player in enumerate(players):
            b.grid[ROWS - 1 - offset, column] = player.value
    return _stack


@pytest.fixture
def draw_sequence():
    return list(DRAW_SEQUENCE)
