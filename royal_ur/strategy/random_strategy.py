from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import ClassVar, Optional

from .base import BaseStrategy
from .types import MoveOption, StrategyContext


@dataclass(slots=True)
class RandomStrategy(BaseStrategy):
    name: ClassVar[str] = "random"

    rng_seed: int | None = None
    rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.rng = random.Random(self.rng_seed)

    def select_move(self, ctx: StrategyContext) -> Optional[MoveOption]:
        moves = list(ctx.iter_legal())
        if not moves:
            return None
        return self.rng.choice(moves)
