from .board import build_tensor, render
from .config import config
from .game import Game
from .player import Player
from .rules import apply_move, is_consistent, legal_mask, legal_moves
from .side import Side
from .simulator import MatchupSummary, run_matchup
from .types import GameRecord, Move, MoveEvents, MoveResult, RollRecord

__all__ = [
    "config",
    "Side",
    "legal_mask",
    "legal_moves",
    "apply_move",
    "is_consistent",
    "render",
    "build_tensor",
    "Move",
    "MoveEvents",
    "MoveResult",
    "RollRecord",
    "GameRecord",
    "Player",
    "Game",
    "MatchupSummary",
    "run_matchup",
]
