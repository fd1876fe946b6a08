from __future__ import annotations

from typing import Dict, Type

from .base import BaseStrategy
from .closest import ClosestStrategy
from .farthest import FarthestStrategy
from .human import HumanStrategy
from .killer import KillerStrategy
from .random_strategy import RandomStrategy

STRATEGY_REGISTRY: Dict[str, Type[BaseStrategy]] = {
    FarthestStrategy.name: FarthestStrategy,
    ClosestStrategy.name: ClosestStrategy,
    KillerStrategy.name: KillerStrategy,
    RandomStrategy.name: RandomStrategy,
    HumanStrategy.name: HumanStrategy,
}


def create(strategy_name: str, **kwargs) -> BaseStrategy:
    cls = STRATEGY_REGISTRY.get(strategy_name.lower())
    if cls is None:
        raise KeyError(f"Unknown strategy '{strategy_name}'.")
    return cls(**kwargs)


def available(ignore_human: bool = True) -> Dict[str, Type[BaseStrategy]]:
    if ignore_human:
        return {
            name: cls
            for name, cls in STRATEGY_REGISTRY.items()
            if name != HumanStrategy.name
        }
    return dict(STRATEGY_REGISTRY)
