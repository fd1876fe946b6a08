from __future__ import annotations

from typing import ClassVar, Optional

from .base import BaseStrategy
from .types import MoveOption, StrategyContext


class FarthestStrategy(BaseStrategy):
    """Advances the piece farthest from the finish, entering new pieces first."""

    name: ClassVar[str] = "farthest"

    def select_move(self, ctx: StrategyContext) -> Optional[MoveOption]:
        return min(ctx.iter_legal(), key=lambda m: m.start, default=None)
