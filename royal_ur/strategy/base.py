from __future__ import annotations

from typing import ClassVar, Iterable, Optional

from ..engine.board import build_tensor
from ..engine.config import config
from ..engine.side import Side
from .features import build_move_options
from .types import MoveOption, StrategyContext


class BaseStrategy:
    """Base class for move-choice strategies.

    A strategy picks one start position among the legal ones, or returns
    ``config.INVALID`` when it has nothing to offer. The caller checks the
    answer against the legal set before applying it.
    """

    name: ClassVar[str] = "base"

    def decide(
        self, self_side: Side, other_side: Side, steps: int, options: Iterable[int]
    ) -> int:
        options = set(options)
        if not options:
            return config.INVALID
        board = build_tensor(self_side, other_side)
        ctx = build_move_options(board, steps, options)
        move = self.select_move(ctx)
        return config.INVALID if move is None else move.start

    def select_move(
        self, ctx: StrategyContext
    ) -> Optional[MoveOption]:  # pragma: no cover - abstract
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
