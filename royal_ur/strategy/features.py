from __future__ import annotations

from typing import Iterable

import numpy as np

from ..engine.board import CHANNEL_OPPONENT, CHANNEL_ROSETTE, CHANNEL_SHARED
from ..engine.config import config
from .types import MoveOption, StrategyContext


def _estimate_risk(
    opponent: np.ndarray, shared: np.ndarray, rosette: np.ndarray, pos: int
) -> float:
    """Share of opponent pieces within one throw behind ``pos`` in the shared lane.

    Opponent pieces still in their private lane can also reach the shared
    lane; only the visible ones are counted.
    """
    if pos >= config.FINISH_POSITION or not shared[pos] or rosette[pos]:
        return 0.0
    lo = max(config.SHARED_LANE_START, pos - config.MAX_STEPS)
    threats = float(opponent[lo:pos].sum())
    return min(threats / config.MAX_STEPS, 1.0)


def build_move_options(
    board: np.ndarray, steps: int, options: Iterable[int]
) -> StrategyContext:
    """Convert the board tensor and the legal starts into a strategy context."""
    steps = int(steps)
    opponent = board[CHANNEL_OPPONENT]
    rosette = board[CHANNEL_ROSETTE]
    shared = board[CHANNEL_SHARED]

    moves = []
    for start in sorted(options):
        end = start + steps
        on_board = end < config.FINISH_POSITION
        moves.append(
            MoveOption(
                start=start,
                end=end,
                steps=steps,
                progress=steps,
                distance_to_goal=config.FINISH_POSITION - end,
                can_capture=on_board and bool(shared[end]) and bool(opponent[end]),
                enters=start == config.START_POSITION,
                finishes=end == config.FINISH_POSITION,
                rosette=on_board and bool(rosette[end]),
                risk=_estimate_risk(opponent, shared, rosette, end),
                exposure=_estimate_risk(opponent, shared, rosette, start),
            )
        )
    return StrategyContext(board=board, steps=steps, moves=moves)
