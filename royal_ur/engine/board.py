from __future__ import annotations

import numpy as np

from .config import config
from .side import Side

# Rows of the picture: top private lane, shared lane, bottom private lane.
# The gaps in the outer rows hold the pile count and the finished count.
_BLANK = "....00..\n........\n....00.."

# Index into the picture of every position along each side's path.
TOP_PATH = (4, 3, 2, 1, 0, 9, 10, 11, 12, 13, 14, 15, 16, 7, 6, 5)
BOTTOM_PATH = (22, 21, 20, 19, 18, 9, 10, 11, 12, 13, 14, 15, 16, 25, 24, 23)

BOARD_CHANNELS = 4
CHANNEL_MINE = 0
CHANNEL_OPPONENT = 1
CHANNEL_ROSETTE = 2
CHANNEL_SHARED = 3


def render(top: Side, bottom: Side) -> str:
    """Draw the board as three rows of text.

    The top side's pieces are ``T`` and the bottom side's ``B``. An
    in-progress game might look like::

        .TT.31..
        ...T..B.
        B...50..
    """
    cells = list(_BLANK)
    for side, path in ((top, TOP_PATH), (bottom, BOTTOM_PATH)):
        cells[path[config.START_POSITION]] = str(side.remaining)
        cells[path[config.FINISH_POSITION]] = str(side.finished)
    for pos in range(1, config.FINISH_POSITION):
        if top.has(pos):
            cells[TOP_PATH[pos]] = "T"
        if bottom.has(pos):
            cells[BOTTOM_PATH[pos]] = "B"
    return "".join(cells)


def _static_channels() -> np.ndarray:
    static = np.zeros((2, config.PATH_LENGTH), dtype=np.float32)
    static[0, list(config.ROSETTES)] = 1.0
    static[1, config.SHARED_LANE_START : config.SHARED_LANE_END + 1] = 1.0
    return static


_STATIC = _static_channels()


def build_tensor(self: Side, other: Side) -> np.ndarray:
    """Stack the board as seen by ``self`` into a (4, 16) float array.

    Only the shared lane of the opponent is visible in the mover's frame;
    its private cells lie on a different path.
    """
    out = np.zeros((BOARD_CHANNELS, config.PATH_LENGTH), dtype=np.float32)
    out[CHANNEL_MINE] = self.to_array()
    lane = slice(config.SHARED_LANE_START, config.SHARED_LANE_END + 1)
    out[CHANNEL_OPPONENT, lane] = other.to_array()[lane]
    out[CHANNEL_ROSETTE : CHANNEL_SHARED + 1] = _STATIC
    return out
