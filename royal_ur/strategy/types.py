from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

import numpy as np


@dataclass(slots=True)
class MoveOption:
    """Structured metadata about a legal move."""

    start: int
    end: int
    steps: int
    progress: int
    distance_to_goal: int
    can_capture: bool
    enters: bool
    finishes: bool
    rosette: bool
    risk: float  # threat on the landing cell
    exposure: float  # threat on the cell being left


@dataclass(slots=True)
class StrategyContext:
    """Input payload shared by heuristic strategies."""

    board: np.ndarray  # shape (channels, path_length)
    steps: int
    moves: List[MoveOption]

    def iter_legal(self) -> Iterable[MoveOption]:
        return iter(self.moves)
