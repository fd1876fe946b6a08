import argparse
import os
import sys

from dotenv import load_dotenv
from loguru import logger

from royal_ur.engine import config, run_matchup
from royal_ur.strategy import available

load_dotenv()


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Simulate many Royal Game of Ur games between two strategies",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--first",
        type=str,
        default=os.getenv("FIRST_STRATEGY", "farthest"),
        help="Strategy of the player moving first",
    )
    parser.add_argument(
        "--second",
        type=str,
        default=os.getenv("SECOND_STRATEGY", "closest"),
        help="Strategy of the player moving second",
    )
    parser.add_argument(
        "--games",
        type=int,
        default=config.NUM_GAMES,
        help="Number of games to play",
    )
    parser.add_argument("--seed", type=int, default=None, help="Optional RNG seed")
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Threads used to play games concurrently",
    )
    parser.add_argument(
        "--max-rolls",
        type=int,
        default=config.MAX_ROLLS,
        help="Rolls after which a game is stopped as a draw",
    )
    parser.add_argument("--verbose", action="store_true", help="Narrate every roll")
    return parser.parse_args()


def check_strategy(name: str) -> str:
    name = name.strip().lower()
    choices = available()
    if name not in choices:
        raise KeyError(
            f"Unknown strategy '{name}'. Available: {', '.join(sorted(choices))}"
        )
    return name


def main() -> None:
    args = parse_args()
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "INFO")

    try:
        first = check_strategy(args.first)
        second = check_strategy(args.second)
    except KeyError as exc:
        raise SystemExit(str(exc.args[0]))
    if args.games <= 0:
        raise SystemExit("--games must be positive")
    if args.max_rolls <= 0:
        raise SystemExit("--max-rolls must be positive")

    summary = run_matchup(
        first,
        second,
        games=args.games,
        seed=args.seed,
        workers=args.workers,
        max_rolls=args.max_rolls,
    )
    first_wins, _ = summary.wins
    print(f"First player won {first_wins} / {summary.games}")


if __name__ == "__main__":
    main()
