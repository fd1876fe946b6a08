from __future__ import annotations

import sys
from typing import Callable, ClassVar, Iterable, Optional, TextIO

from loguru import logger

from ..engine.board import render
from ..engine.config import config
from ..engine.side import Side
from .base import BaseStrategy
from .types import MoveOption, StrategyContext


class HumanStrategy(BaseStrategy):
    """Asks a person at the terminal to choose among the legal starts."""

    name: ClassVar[str] = "human"

    def __init__(
        self,
        player_name: str = "Player",
        input_fn: Callable[[str], str] = input,
        output: TextIO | None = None,
    ) -> None:
        self.player_name = player_name
        self.input_fn = input_fn
        self.output = output

    def _say(self, text: str) -> None:
        print(text, file=self.output or sys.stdout)

    def decide(
        self, self_side: Side, other_side: Side, steps: int, options: Iterable[int]
    ) -> int:
        options = sorted(options)
        self._say(f"Hello, {self.player_name}!")
        self._say("The current state (you are shown on top) is:")
        self._say(render(self_side, other_side))
        self._say(f"You rolled a {steps}.")
        self._say("Your options are:")
        for pos in options:
            self._say(f"> {pos}")

        prompt = "What do you choose? "
        while True:
            try:
                line = self.input_fn(prompt)
            except EOFError:
                logger.warning("Unexpected end of input.")
                return config.INVALID
            try:
                move = int(line.strip())
            except ValueError:
                logger.warning(f"Illegal format: {line!r}")
                prompt = "Please try again: "
                continue
            if move not in options:
                logger.warning(f"Invalid option: {move}")
                prompt = "Please try again: "
                continue
            return move

    def select_move(self, ctx: StrategyContext) -> Optional[MoveOption]:
        # Decisions come from the terminal, never from the scored context.
        return None
