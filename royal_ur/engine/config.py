import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


@dataclass(slots=True)
class Config:
    # --- Constants ---
    TILES: int = 7
    PATH_LENGTH: int = 16  # 0=pile, 1-14=path, 15=finished
    START_POSITION: int = 0
    FINISH_POSITION: int = 15
    MAX_STEPS: int = 4  # four two-sided sticks

    ROSETTES: tuple[int, ...] = field(default_factory=lambda: (4, 8, 14))
    CENTRAL_ROSETTE: int = 8
    SHARED_LANE_START: int = 5
    SHARED_LANE_END: int = 12

    # Bit masks over the 16-bit occupancy
    PATH_MASK: int = 0x7FFE  # positions 1..14
    START_MASK: int = 0x7FFF  # bit 15 never starts a move
    CENTRAL_ROSETTE_MASK: int = 0x0100
    SHARED_LANE_MASK: int = 0x1FE0

    # Symbol returned by a strategy with nothing to choose
    INVALID: int = 15

    # --- Runtime ---
    MAX_ROLLS: int = int(os.getenv("MAX_ROLLS", 10_000))
    NUM_GAMES: int = int(os.getenv("NUM_GAMES", 10_000))
    DEBUG_CHECKS: bool = bool(int(os.getenv("DEBUG_CHECKS", 0)))

    def __post_init__(self):
        if self.MAX_ROLLS <= 0:
            raise ValueError("MAX_ROLLS must be positive")
        if self.NUM_GAMES <= 0:
            raise ValueError("NUM_GAMES must be positive")

    def is_rosette(self, position: int) -> bool:
        return position in self.ROSETTES

    def in_shared_lane(self, position: int) -> bool:
        return self.SHARED_LANE_START <= position <= self.SHARED_LANE_END


config = Config()
