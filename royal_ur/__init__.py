"""
Royal Game of Ur
A compact rules engine, scripted strategies and a game simulator.
"""

from royal_ur.engine import (
    Game,
    GameRecord,
    Move,
    MoveResult,
    Player,
    Side,
    apply_move,
    config,
    is_consistent,
    legal_moves,
    render,
    run_matchup,
)
from royal_ur.strategy import STRATEGY_REGISTRY, BaseStrategy, create

__all__ = [
    "Game",
    "GameRecord",
    "Move",
    "MoveResult",
    "Player",
    "Side",
    "apply_move",
    "config",
    "is_consistent",
    "legal_moves",
    "render",
    "run_matchup",
    "STRATEGY_REGISTRY",
    "BaseStrategy",
    "create",
]
