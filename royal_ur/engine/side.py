from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .config import config


def positions_of(mask: int) -> list[int]:
    """Positions whose bit is set in ``mask``, in path order."""
    return [pos for pos in range(config.PATH_LENGTH) if mask >> pos & 1]


@dataclass(slots=True)
class Side:
    """One player's half of the game state.

    ``occupied`` is a 16-bit occupancy mask along the player's own path.
    Bit 15 is never set (finished pieces leave no trace) and bit 0 mirrors
    ``remaining > 0``; rule logic reads the pile from ``remaining``.
    """

    remaining: int = config.TILES
    occupied: int = 1

    @classmethod
    def start(cls) -> "Side":
        return cls(remaining=config.TILES, occupied=1)

    @classmethod
    def complete(cls) -> "Side":
        return cls(remaining=0, occupied=0)

    @classmethod
    def from_positions(cls, remaining: int, positions) -> "Side":
        """Build a side from a pile count and the path cells (1..14) it holds."""
        occupied = 1 if remaining > 0 else 0
        for pos in positions:
            occupied |= 1 << pos
        return cls(remaining=remaining, occupied=occupied & config.START_MASK)

    def copy(self) -> "Side":
        return Side(remaining=self.remaining, occupied=self.occupied)

    def has(self, position: int) -> bool:
        if position == config.START_POSITION:
            return self.remaining > 0
        return bool(self.occupied >> position & 1)

    def on_path(self) -> list[int]:
        return positions_of(self.occupied & config.PATH_MASK)

    @property
    def path_count(self) -> int:
        return (self.occupied & config.PATH_MASK).bit_count()

    @property
    def finished(self) -> int:
        return config.TILES - self.remaining - self.path_count

    def is_complete(self) -> bool:
        return self.remaining == 0 and self.occupied == 0

    def is_valid(self) -> bool:
        if not 0 <= self.remaining <= config.TILES:
            return False
        if self.occupied >> config.FINISH_POSITION:
            return False
        if bool(self.occupied & 1) != (self.remaining > 0):
            return False
        return 0 <= self.finished <= config.TILES

    def to_array(self) -> np.ndarray:
        """Occupancy of the path cells 1..14 as a float vector of length 16."""
        arr = np.zeros(config.PATH_LENGTH, dtype=np.float32)
        for pos in self.on_path():
            arr[pos] = 1.0
        return arr

    def __str__(self) -> str:
        return (
            f"Side(remaining={self.remaining}, path={self.on_path()}, "
            f"finished={self.finished})"
        )
