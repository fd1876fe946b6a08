from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Optional

from loguru import logger

if TYPE_CHECKING:  # avoid runtime imports to prevent circular deps
    from ..strategy.base import BaseStrategy

from .config import config
from .side import Side

FALLBACK_STRATEGY = "farthest"


@dataclass(slots=True)
class Player:
    name: str
    strategy_name: str = FALLBACK_STRATEGY
    strategy: Optional["BaseStrategy"] = field(default=None)
    side: Side = field(default_factory=Side.start)

    def reset(self) -> None:
        self.side = Side.start()

    def has_won(self) -> bool:
        return self.side.is_complete()

    def _ensure_strategy(self) -> "BaseStrategy":
        if self.strategy is None:
            from ..strategy.registry import create as create_strategy

            try:
                self.strategy = create_strategy(self.strategy_name)
            except KeyError as e:
                logger.warning(
                    f"Unknown strategy '{self.strategy_name}' for {self.name}, "
                    f"falling back to {FALLBACK_STRATEGY}: {e}"
                )
                self.strategy_name = FALLBACK_STRATEGY
                self.strategy = create_strategy(FALLBACK_STRATEGY)
        return self.strategy

    def choose(self, other: Side, steps: int, options: Iterable[int]) -> int:
        """Ask the strategy for a start position; ``config.INVALID`` if none."""
        options = set(options)
        if not options:
            return config.INVALID
        strategy = self._ensure_strategy()
        return strategy.decide(self.side, other, steps, options)
