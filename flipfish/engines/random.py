import random

from flipfish.board import NULL_MOVE, Board, Move
from flipfish.config import Config


class RandomEngine:
    """
    Plays a uniformly random legal move. Useful as a self-play sparring
    partner.
    """

    def __init__(self, config: Config):
        self.config = config
        self.side = config.side
        self.nodes: int = 0
        self._rng = random.Random(config.seed)

    def search_move(self, board: Board) -> Move:
        moves = board.legal_moves(self.side)
        if not moves:
            return NULL_MOVE
        return self._rng.choice(moves)
