from __future__ import annotations

from typing import ClassVar, Optional

from .base import BaseStrategy
from .types import MoveOption, StrategyContext


class KillerStrategy(BaseStrategy):
    """Greedy capturer.

    Takes the capture that sends home the most advanced opponent piece.
    Without a capture it lands on a rosette, pulling out the most threatened
    piece first. Otherwise it moves the rearmost piece among the least
    threatened landings.
    """

    name: ClassVar[str] = "killer"

    def select_move(self, ctx: StrategyContext) -> Optional[MoveOption]:
        moves = list(ctx.iter_legal())
        if not moves:
            return None

        captures = [m for m in moves if m.can_capture]
        if captures:
            return max(captures, key=lambda m: m.end)

        rosettes = [m for m in moves if m.rosette]
        if rosettes:
            return max(rosettes, key=lambda m: (m.exposure, -m.start))

        return min(moves, key=lambda m: (m.risk, m.start))
