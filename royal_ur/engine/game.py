from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np
from loguru import logger

from . import rules
from .board import render
from .config import config
from .player import Player
from .side import Side
from .types import GameRecord, Move, MoveEvents, MoveResult, RollRecord


@dataclass(slots=True)
class Game:
    """Two players racing their pieces along the board.

    The game owns both sides (through its players) and its own dice
    generator; nothing here is shared with other games.
    """

    players: List[Player]
    seed: int | None = None
    debug_checks: bool = config.DEBUG_CHECKS
    rng: np.random.Generator = field(init=False, repr=False)
    current: int = field(default=0, init=False)
    rolls: int = field(default=0, init=False)
    captures: List[int] = field(default_factory=lambda: [0, 0], init=False)
    last_roll: Optional[RollRecord] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if len(self.players) != 2:
            raise ValueError("The Royal Game of Ur is played by exactly two players")
        self.rng = np.random.default_rng(self.seed)

    def reset(self) -> None:
        for player in self.players:
            player.reset()
        self.current = 0
        self.rolls = 0
        self.captures = [0, 0]
        self.last_roll = None

    # --- Dice ---
    def roll_dice(self) -> int:
        """Throw four two-sided sticks: Binomial(4, 0.5)."""
        return int(self.rng.binomial(config.MAX_STEPS, 0.5))

    # --- State access ---
    def sides(self, player_index: int) -> tuple[Side, Side]:
        """(self, other) from the perspective of ``player_index``."""
        return (
            self.players[player_index].side,
            self.players[1 - player_index].side,
        )

    def display(self) -> str:
        return render(self.players[0].side, self.players[1].side)

    def is_over(self) -> bool:
        return any(p.has_won() for p in self.players)

    def winner(self) -> Optional[int]:
        for idx, player in enumerate(self.players):
            if player.has_won():
                return idx
        return None

    # --- Rules ---
    def legal_moves(self, player_index: int, steps: int) -> set[int]:
        me, other = self.sides(player_index)
        return rules.legal_moves(me, other, steps)

    def apply_move(self, move: Move) -> MoveResult:
        """Apply a move already checked against ``legal_moves``."""
        me, other = self.sides(move.player_index)
        events = MoveEvents(
            entered=move.start == config.START_POSITION,
            finished=move.end == config.FINISH_POSITION,
            captured=rules.captures(me, other, move.start, move.steps),
        )
        extra = rules.apply_move(me, other, move.start, move.steps)
        events.rosette = extra
        if events.captured:
            self.captures[move.player_index] += 1

        if self.debug_checks:
            self._check_state()

        return MoveResult(
            start=move.start,
            end=move.end,
            events=events,
            extra_turn=extra,
        )

    def _check_state(self) -> None:
        first, second = self.players[0].side, self.players[1].side
        assert rules.is_consistent(
            first, second
        ), f"Shared cell collision: {first} / {second}"
        assert first.is_valid(), f"Invalid side: {first}"
        assert second.is_valid(), f"Invalid side: {second}"

    # --- Play ---
    def play_roll(self, player_index: int, steps: int | None = None) -> bool:
        """Play out one roll and return whether the same player goes again."""
        player = self.players[player_index]
        if steps is None:
            steps = self.roll_dice()
        logger.debug(f"{player.name} rolls a {steps}.")

        record = RollRecord(player_index=player_index, steps=steps, options=[])
        self.last_roll = record

        # A zero roll never has a legal move.
        if steps == 0:
            return False

        options = self.legal_moves(player_index, steps)
        record.options = sorted(options)
        if not options:
            logger.debug("No legal moves.")
            return False

        other = self.players[1 - player_index].side
        start = player.choose(other, steps, options)
        record.choice = start
        logger.debug(f"{player.name} chooses {start}.")

        # Submitting an invalid move passes the roll.
        if start not in options:
            logger.warning(
                f"{player.name} proposed an invalid move ({start}) "
                "and forfeits the roll."
            )
            return False

        result = self.apply_move(
            Move(player_index=player_index, start=start, steps=steps)
        )
        record.result = result
        return result.extra_turn

    def play(self, max_rolls: int | None = None) -> GameRecord:
        """Play until one side has borne off every piece or the roll cap hits."""
        if max_rolls is None:
            max_rolls = config.MAX_ROLLS
        while not self.is_over() and self.rolls < max_rolls:
            logger.opt(lazy=True).debug("Board:\n{board}", board=self.display)
            again = self.play_roll(self.current)
            self.rolls += 1
            if not again:
                self.current = 1 - self.current

        winner = self.winner()
        if winner is None:
            logger.info(f"Game stopped without a winner after {self.rolls} rolls.")
        else:
            logger.debug(f"{self.players[winner].name} wins after {self.rolls} rolls.")
        return GameRecord(
            winner=winner,
            rolls=self.rolls,
            finished=[p.side.finished for p in self.players],
            captures=list(self.captures),
        )
