from __future__ import annotations

import random
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List, Sequence

from loguru import logger

from .config import config
from .game import Game
from .player import Player
from .types import GameRecord


@dataclass
class MatchupSummary:
    participants: tuple[str, str]
    records: List[GameRecord] = field(default_factory=list)

    @property
    def games(self) -> int:
        return len(self.records)

    @property
    def wins(self) -> tuple[int, int]:
        first = sum(1 for r in self.records if r.winner == 0)
        second = sum(1 for r in self.records if r.winner == 1)
        return first, second

    @property
    def draws(self) -> int:
        return sum(1 for r in self.records if r.is_draw)

    @property
    def average_rolls(self) -> float:
        if not self.records:
            return 0.0
        return sum(r.rolls for r in self.records) / len(self.records)


def play_game(
    participants: Sequence[str], seed: int, max_rolls: int | None = None
) -> GameRecord:
    """Play one game between two named strategies with a private generator."""
    players = [
        Player(name=f"{name}#{seat}", strategy_name=name)
        for seat, name in enumerate(participants, start=1)
    ]
    game = Game(players=players, seed=seed)
    return game.play(max_rolls=max_rolls)


def run_matchup(
    first: str,
    second: str,
    games: int = config.NUM_GAMES,
    seed: int | None = None,
    workers: int = 1,
    max_rolls: int | None = None,
) -> MatchupSummary:
    """Play ``games`` independent games, ``first`` always moving first."""
    rng = random.Random(seed)
    seeds = [rng.randint(0, 2**32 - 1) for _ in range(games)]
    participants = (first, second)
    summary = MatchupSummary(participants=participants)

    if workers <= 1:
        summary.records = [play_game(participants, s, max_rolls) for s in seeds]
    else:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            summary.records = list(
                executor.map(lambda s: play_game(participants, s, max_rolls), seeds)
            )

    log_summary(summary)
    return summary


def log_summary(summary: MatchupSummary) -> None:
    first, second = summary.participants
    first_wins, second_wins = summary.wins
    logger.info(f"Matchup: {first} (first) vs {second} over {summary.games} games")
    logger.info(f"  {first:10s} {first_wins:6d} wins")
    logger.info(f"  {second:10s} {second_wins:6d} wins")
    if summary.draws:
        logger.info(f"  draws      {summary.draws:6d}")
    logger.info(f"  average rolls per game: {summary.average_rolls:.1f}")
