from __future__ import annotations

import unittest

from loguru import logger

from royal_ur.engine import rules
from royal_ur.engine.config import config
from royal_ur.engine.game import Game
from royal_ur.engine.player import Player
from royal_ur.engine.side import Side
from royal_ur.engine.types import Move
from royal_ur.strategy import BaseStrategy, FarthestStrategy, RandomStrategy


class FixedChoice(BaseStrategy):
    name = "fixed"

    def __init__(self, answer: int) -> None:
        self.answer = answer

    def decide(self, self_side, other_side, steps, options) -> int:
        return self.answer


def setUpModule() -> None:
    logger.disable("royal_ur")


def tearDownModule() -> None:
    logger.enable("royal_ur")


def make_game(first: str = "farthest", second: str = "closest", seed: int = 0) -> Game:
    return Game(
        players=[
            Player(name="A", strategy_name=first),
            Player(name="B", strategy_name=second),
        ],
        seed=seed,
        debug_checks=True,
    )


class GameSetupTests(unittest.TestCase):
    def test_requires_two_players(self) -> None:
        with self.assertRaises(ValueError):
            Game(players=[Player(name="solo")])

    def test_initial_sides(self) -> None:
        game = make_game()
        for player in game.players:
            self.assertEqual(player.side, Side.start())
        self.assertFalse(game.is_over())
        self.assertIsNone(game.winner())

    def test_roll_distribution(self) -> None:
        game = make_game(seed=1234)
        rolls = [game.roll_dice() for _ in range(8000)]
        self.assertTrue(all(0 <= r <= config.MAX_STEPS for r in rolls))
        mean = sum(rolls) / len(rolls)
        self.assertAlmostEqual(mean, 2.0, delta=0.1)
        self.assertAlmostEqual(rolls.count(2) / len(rolls), 0.375, delta=0.03)
        self.assertAlmostEqual(rolls.count(0) / len(rolls), 0.0625, delta=0.02)

    def test_same_seed_same_rolls(self) -> None:
        a, b = make_game(seed=9), make_game(seed=9)
        self.assertEqual(
            [a.roll_dice() for _ in range(50)], [b.roll_dice() for _ in range(50)]
        )


class PlayRollTests(unittest.TestCase):
    def test_zero_roll_passes(self) -> None:
        game = make_game()
        self.assertFalse(game.play_roll(0, steps=0))
        self.assertTrue(game.last_roll.forfeited)
        self.assertEqual(game.players[0].side, Side.start())

    def test_entering_on_rosette_goes_again(self) -> None:
        game = make_game()
        self.assertTrue(game.play_roll(0, steps=4))
        expected = Side(remaining=6, occupied=(1 << 0) | (1 << 4))
        self.assertEqual(game.players[0].side, expected)
        self.assertEqual(game.last_roll.options, [0])
        self.assertEqual(game.last_roll.choice, 0)

    def test_no_legal_moves_passes(self) -> None:
        game = make_game()
        game.players[0].side = Side.from_positions(0, [12, 13, 14])
        game.players[1].side = Side.from_positions(7, [])
        self.assertFalse(game.play_roll(0, steps=4))
        self.assertEqual(game.last_roll.options, [])
        self.assertIsNone(game.last_roll.choice)

    def test_invalid_choice_forfeits(self) -> None:
        for answer in (config.INVALID, 9):
            game = Game(
                players=[
                    Player(name="A", strategy=FixedChoice(answer)),
                    Player(name="B"),
                ],
                seed=0,
            )
            self.assertFalse(game.play_roll(0, steps=2))
            self.assertTrue(game.last_roll.forfeited)
            self.assertEqual(game.last_roll.choice, answer)
            self.assertEqual(game.players[0].side, Side.start())

    def test_capture_is_counted(self) -> None:
        game = make_game(first="killer")
        game.players[0].side = Side.from_positions(6, [5])
        game.players[1].side = Side.from_positions(6, [9])
        self.assertFalse(game.play_roll(0, steps=4))
        result = game.last_roll.result
        self.assertEqual((result.start, result.end), (5, 9))
        self.assertTrue(result.events.captured)
        self.assertEqual(game.captures, [1, 0])
        self.assertEqual(game.players[1].side, Side.from_positions(7, []))

    def test_apply_move_reports_events(self) -> None:
        game = make_game()
        game.players[0].side = Side.from_positions(0, [12])
        result = game.apply_move(Move(player_index=0, start=12, steps=3))
        self.assertTrue(result.events.finished)
        self.assertFalse(result.events.entered)
        self.assertFalse(result.extra_turn)
        self.assertTrue(game.players[0].has_won())
        self.assertEqual(game.winner(), 0)


class PlayerTests(unittest.TestCase):
    def test_unknown_strategy_falls_back(self) -> None:
        player = Player(name="A", strategy_name="does-not-exist")
        choice = player.choose(Side.start(), 1, {0})
        self.assertEqual(choice, 0)
        self.assertEqual(player.strategy_name, "farthest")
        self.assertIsInstance(player.strategy, FarthestStrategy)

    def test_empty_options(self) -> None:
        choice = Player(name="A").choose(Side.start(), 3, set())
        self.assertEqual(choice, config.INVALID)


class FullGameTests(unittest.TestCase):
    def test_games_finish_with_a_winner(self) -> None:
        for seed in range(10):
            game = make_game(seed=seed)
            record = game.play()
            self.assertIsNotNone(record.winner, msg=f"seed={seed}")
            winner = game.players[record.winner]
            loser = game.players[1 - record.winner]
            self.assertTrue(winner.side.is_complete())
            self.assertEqual(record.finished[record.winner], config.TILES)
            self.assertLess(loser.side.finished, config.TILES)
            # The game ends on the winner's move bearing off its last piece.
            self.assertEqual(game.last_roll.player_index, record.winner)
            self.assertEqual(game.last_roll.result.end, config.FINISH_POSITION)

    def test_random_play_keeps_invariants(self) -> None:
        for seed in range(20):
            game = Game(
                players=[
                    Player(name="A", strategy=RandomStrategy(rng_seed=seed)),
                    Player(name="B", strategy=RandomStrategy(rng_seed=seed + 100)),
                ],
                seed=seed,
            )
            while not game.is_over() and game.rolls < config.MAX_ROLLS:
                again = game.play_roll(game.current)
                game.rolls += 1
                if not again:
                    game.current = 1 - game.current
                a, b = game.players[0].side, game.players[1].side
                self.assertTrue(rules.is_consistent(a, b))
                self.assertTrue(a.is_valid() and b.is_valid())
            self.assertTrue(game.is_over())

    def test_roll_cap_ends_in_draw(self) -> None:
        record = make_game().play(max_rolls=3)
        self.assertTrue(record.is_draw)
        self.assertEqual(record.rolls, 3)

    def test_zero_roll_cap_plays_nothing(self) -> None:
        game = make_game()
        record = game.play(max_rolls=0)
        self.assertTrue(record.is_draw)
        self.assertEqual(record.rolls, 0)
        self.assertIsNone(game.last_roll)
        self.assertTrue(all(p.side == Side.start() for p in game.players))

    def test_reset(self) -> None:
        game = make_game()
        game.play()
        game.reset()
        self.assertEqual(game.rolls, 0)
        self.assertEqual(game.captures, [0, 0])
        self.assertTrue(all(p.side == Side.start() for p in game.players))


if __name__ == "__main__":
    unittest.main()
