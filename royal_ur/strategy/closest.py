from __future__ import annotations

from typing import ClassVar, Optional

from .base import BaseStrategy
from .types import MoveOption, StrategyContext


class ClosestStrategy(BaseStrategy):
    """Advances the piece closest to the finish."""

    name: ClassVar[str] = "closest"

    def select_move(self, ctx: StrategyContext) -> Optional[MoveOption]:
        return max(ctx.iter_legal(), key=lambda m: m.start, default=None)
