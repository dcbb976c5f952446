import argparse
import logging
import sys

from . import game_config
from . import ttt_board
from . import ttt_game
from . import ttt_simulate


def _non_negative_float(text: str) -> float:
    value = float(text)
    if not value >= 0:
        raise argparse.ArgumentTypeError(f"must be >= 0: {text}")
    return value


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0: {text}")
    return value


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play tic-tac-toe against a minimax computer opponent."
    )
    parser.add_argument(
        "--think-delay",
        help="Seconds to pause before each computer move.",
        type=_non_negative_float,
        default=1.0,
    )
    parser.add_argument(
        "--computer-first", help="Let the computer open.", action="store_true"
    )
    parser.add_argument(
        "--seed", help="Seed for the computer's random opening.", type=int
    )
    parser.add_argument(
        "--simulate",
        help="Play this many computer vs random games instead of an interactive one.",
        type=_non_negative_int,
        default=0,
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.simulate > 0:
        logging.getLogger().setLevel(logging.DEBUG if args.verbose else logging.INFO)
        summary = ttt_simulate.simulate_games(
            args.simulate, seed=args.seed, computer_first=args.computer_first
        )
        print(summary.model_dump_json())
        return 0

    config = game_config.GameConfig(
        think_delay_secs=args.think_delay,
        first_player=(
            ttt_board.Player.COMPUTER if args.computer_first else ttt_board.Player.HUMAN
        ),
        seed=args.seed,
    )
    try:
        ttt_game.Game(config).play()
    except EOFError:
        logging.error("Input ended before the game finished.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
