from typing import Protocol

from flipfish.board import Board, Move, Side
from flipfish.config import Config


class Engine(Protocol):
    """Anything that picks a move for a fixed side."""

    config: Config
    side: Side
    nodes: int

    def search_move(self, board: Board) -> Move: ...
