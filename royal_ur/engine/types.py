from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(slots=True)
class Move:
    player_index: int
    start: int
    steps: int

    @property
    def end(self) -> int:
        return self.start + self.steps


@dataclass(slots=True)
class MoveEvents:
    entered: bool = False
    finished: bool = False
    captured: bool = False
    rosette: bool = False


@dataclass(slots=True)
class MoveResult:
    start: int
    end: int
    events: MoveEvents
    extra_turn: bool


@dataclass(slots=True)
class RollRecord:
    player_index: int
    steps: int
    options: List[int]
    choice: Optional[int] = None
    result: Optional[MoveResult] = None

    @property
    def forfeited(self) -> bool:
        return self.result is None


@dataclass(slots=True)
class GameRecord:
    winner: Optional[int]
    rolls: int
    finished: List[int] = field(default_factory=lambda: [0, 0])
    captures: List[int] = field(default_factory=lambda: [0, 0])

    @property
    def is_draw(self) -> bool:
        return self.winner is None
