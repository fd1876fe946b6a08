"""Move-choice strategies for scripted or interactive play."""

from .base import BaseStrategy
from .closest import ClosestStrategy
from .farthest import FarthestStrategy
from .features import build_move_options
from .human import HumanStrategy
from .killer import KillerStrategy
from .random_strategy import RandomStrategy
from .registry import STRATEGY_REGISTRY, available, create
from .types import MoveOption, StrategyContext

__all__ = [
    "MoveOption",
    "StrategyContext",
    "build_move_options",
    "BaseStrategy",
    "FarthestStrategy",
    "ClosestStrategy",
    "KillerStrategy",
    "RandomStrategy",
    "HumanStrategy",
    "STRATEGY_REGISTRY",
    "available",
    "create",
]
