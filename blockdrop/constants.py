"""Board dimensions, colours and the enumerations shared by the game."""

from enum import Enum, IntEnum

WIDTH = 10
HEIGHT = 20

UI_WIDTH = 150

SCORES_FILE = "resources/scores.txt"

EMPTY_CELL = "_"

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
YELLOW = (255, 255, 0)
MAGENTA = (255, 0, 255)
CYAN = (0, 255, 255)

PIECE_COLORS = {
    "I": CYAN,
    "O": YELLOW,
    "T": MAGENTA,
    "S": GREEN,
    "Z": RED,
    "J": BLUE,
    "L": WHITE,
}


class Patterns(IntEnum):
    """The seven tetromino shapes, in the order used for random draws."""

    I = 0  # noqa: E741
    O = 1  # noqa: E741
    T = 2
    J = 3
    L = 4
    S = 5
    Z = 6


class MenuOptions(Enum):
    PLAY = 0
    ABOUT = 1
    LEADERS_BOARD = 2
    EXIT = 3
    NONE = 5


class PatternPosition(IntEnum):
    DEG_0 = 0
    DEG_90 = 1
    DEG_180 = 2
    DEG_270 = 3


class DisplaysOptions(IntEnum):
    SCORE = 0
    NEXT_PATTERN = 1


class Button(Enum):
    PAUSE = 0
    PLAY = 1
    RETRY = 2
    HOME = 3
    NONE = 4


class ButtonStatus(IntEnum):
    NORMAL = 0
    CLICKED = 1
    HOVERED = 2