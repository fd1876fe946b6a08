from __future__ import annotations

import random

from royal_ur.engine.config import config
from royal_ur.engine.side import Side

PRIVATE_CELLS = (1, 2, 3, 4, 13, 14)


def random_sides(rng: random.Random) -> tuple[Side, Side]:
    """Two sides that respect every board invariant."""
    taken: set[int] = set()
    sides = []
    for _ in range(2):
        candidates = list(PRIVATE_CELLS) + [
            c
            for c in range(config.SHARED_LANE_START, config.SHARED_LANE_END + 1)
            if c not in taken
        ]
        cells = rng.sample(candidates, rng.randint(0, config.TILES))
        taken.update(c for c in cells if config.in_shared_lane(c))
        remaining = rng.randint(0, config.TILES - len(cells))
        sides.append(Side.from_positions(remaining, cells))
    return sides[0], sides[1]


def naive_legal(me: Side, other: Side, steps: int) -> set[int]:
    """Cell-by-cell reading of the legality rules."""
    out = set()
    for start in range(config.FINISH_POSITION):
        if not me.has(start):
            continue
        end = start + steps
        if end > config.FINISH_POSITION:
            continue
        if end < config.FINISH_POSITION and me.has(end):
            continue
        if end == config.CENTRAL_ROSETTE and other.has(end):
            continue
        out.add(start)
    return out
