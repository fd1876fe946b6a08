import argparse
import sys

from loguru import logger

from royal_ur.engine import Game, Player
from royal_ur.strategy import HumanStrategy, available


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play the Royal Game of Ur against a strategy"
    )
    parser.add_argument("--name", type=str, default="Player", help="Your name")
    parser.add_argument(
        "--opponent",
        type=str,
        default="closest",
        choices=sorted(available()),
        help="Strategy of the computer opponent",
    )
    parser.add_argument(
        "--second", action="store_true", help="Let the opponent move first"
    )
    parser.add_argument("--seed", type=int, default=None, help="Optional RNG seed")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logger.remove()
    logger.add(sys.stderr, level="DEBUG", format="{message}")

    print("Hello, world! Welcome to the Royal Game of Ur.")
    human = Player(
        name=args.name,
        strategy_name=HumanStrategy.name,
        strategy=HumanStrategy(args.name),
    )
    computer = Player(name=args.opponent.capitalize(), strategy_name=args.opponent)
    players = [computer, human] if args.second else [human, computer]

    game = Game(players=players, seed=args.seed)
    record = game.play()

    print(game.display())
    if record.winner is None:
        print(f"No winner after {record.rolls} rolls.")
    else:
        print(f"{players[record.winner].name} won after {record.rolls} rolls.")


if __name__ == "__main__":
    main()
