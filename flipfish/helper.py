import logging
import time
from enum import Enum

from flipfish.board import Board, Move
from flipfish.config import Config
from flipfish.engines.alpha_beta import AlphaBeta
from flipfish.engines.base_engine import Engine
from flipfish.engines.minimax import Minimax
from flipfish.engines.random import RandomEngine

logger = logging.getLogger(__name__)


class Algorithm(Enum):
    """Enumeration of all possible algorithms."""

    alpha_beta = "alpha_beta"
    minimax = "minimax"
    random = "random"


def get_engine(config: Config) -> Engine:
    """
    Returns the engine

    Arguments:
        - config: run configuration, `config.algorithm` names the algorithm
            and `config.side` / `config.search_depth` parameterize it.

    Returns:
        - engine: the engine we want to use.
    """
    try:
        algorithm = Algorithm(config.algorithm)
    except ValueError:
        raise ValueError(f"algorithm not supported: {config.algorithm}") from None

    if algorithm is Algorithm.alpha_beta:
        return AlphaBeta(config)
    elif algorithm is Algorithm.minimax:
        return Minimax(config)
    return RandomEngine(config)


def find_best_move(board: Board, engine: Engine) -> Move:
    """
    Finds the best move for the given board using the given engine.

    Arguments:
        - board: the board state, not modified.
        - engine: the engine to use for finding the best move.

    Returns:
        - best_move: the best move found by the engine, NULL_MOVE if the
            engine's side cannot move.
    """
    start = time.perf_counter()
    best_move = engine.search_move(board)
    logger.debug(
        "%s chose %s in %.3fs",
        type(engine).__name__,
        tuple(best_move),
        time.perf_counter() - start,
    )
    return best_move
