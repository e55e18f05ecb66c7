import argparse

from flipfish.board import Side
from flipfish.config import Config
from flipfish.helper import Algorithm
from flipfish.log import setup_logging
from flipfish.mode import protocol, selfplay

MODES = {
    "protocol": protocol.main,
    "selfplay": selfplay.main,
}


def _non_negative(value: str) -> int:
    depth = int(value)
    if depth < 0:
        raise argparse.ArgumentTypeError("depth must be >= 0")
    return depth


def parse_args(argv: list[str] | None = None) -> Config:
    """Build a Config from command line arguments."""
    algorithms = [algorithm.value for algorithm in Algorithm]
    parser = argparse.ArgumentParser(
        prog="flipfish", description="Minimax engine for 8x8 disc-flipping games."
    )
    parser.add_argument("--mode", choices=sorted(MODES), default="protocol")
    parser.add_argument("--algorithm", choices=algorithms, default="alpha_beta")
    parser.add_argument(
        "--depth",
        type=_non_negative,
        default=2,
        help="Plies searched below each candidate move (0 = evaluate directly).",
    )
    parser.add_argument(
        "--side",
        choices=[side.name.lower() for side in Side],
        default="white",
        help="Side played in self-play (the protocol assigns sides itself).",
    )
    parser.add_argument(
        "--opponent-algorithm", choices=algorithms, default="random"
    )
    parser.add_argument("--opponent-depth", type=_non_negative, default=2)
    parser.add_argument("--seed", type=int, default=None, help="Random engine seed.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
    )
    args = parser.parse_args(argv)

    return Config(
        mode=args.mode,
        algorithm=args.algorithm,
        search_depth=args.depth,
        side=Side[args.side.upper()],
        opponent_algorithm=args.opponent_algorithm,
        opponent_depth=args.opponent_depth,
        seed=args.seed,
        log_level=args.log_level,
    )


def main(argv: list[str] | None = None):
    config = parse_args(argv)
    setup_logging(config.log_level)
    MODES[config.mode](config)


if __name__ == "__main__":
    main()
