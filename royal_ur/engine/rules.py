"""Rules of the Royal Game of Ur over a pair of sides.

``self`` is always the side about to move and ``other`` its opponent. Moves
are identified by their start position; the number of steps is fixed by the
roll.
"""

from __future__ import annotations

from .config import config
from .side import Side, positions_of


def _pieces(side: Side) -> int:
    # Pile availability comes from the count, not from the cached bit 0.
    mask = side.occupied & config.PATH_MASK
    if side.remaining > 0:
        mask |= 1
    return mask


def legal_mask(self: Side, other: Side, steps: int) -> int:
    """Bitmask of the start positions that may legally move ``steps`` cells."""
    pieces = _pieces(self)
    # 1. You have a piece at that position.
    options = config.START_MASK & pieces
    # 2. You don't land on your own piece.
    options &= ~(pieces >> steps)
    # 3. You don't land on the central rosette while the opponent holds it.
    options &= ~((config.CENTRAL_ROSETTE_MASK & other.occupied) >> steps)
    # 4. You don't overshoot the finish.
    options &= 0xFFFF >> steps
    return options


def legal_moves(self: Side, other: Side, steps: int) -> set[int]:
    """Start positions from which a move of ``steps`` cells is legal.

    An empty set means the roll is forfeited.
    """
    return set(positions_of(legal_mask(self, other, steps)))


def apply_move(self: Side, other: Side, start: int, steps: int) -> bool:
    """Move the piece at ``start`` and return whether the mover goes again.

    Both sides are updated in place. ``start`` must be one of
    ``legal_moves(self, other, steps)``; nothing is checked here.
    """
    end = start + steps

    if start == config.START_POSITION:
        self.remaining -= 1
        if self.remaining == 0:
            self.occupied &= ~1
    else:
        self.occupied &= ~(1 << start)
    if end < config.FINISH_POSITION:
        self.occupied |= 1 << end

    # Landing on the central rosette while it is held is already illegal.
    if config.in_shared_lane(end) and other.occupied >> end & 1:
        other.occupied &= ~(1 << end)
        other.remaining += 1
        other.occupied |= 1

    return config.is_rosette(end)


def is_consistent(self: Side, other: Side) -> bool:
    """Whether no shared-lane cell is held by both sides."""
    return (self.occupied & other.occupied & config.SHARED_LANE_MASK) == 0


def captures(self: Side, other: Side, start: int, steps: int) -> bool:
    """Whether moving from ``start`` would send an opponent piece home."""
    end = start + steps
    return config.in_shared_lane(end) and bool(other.occupied >> end & 1)
