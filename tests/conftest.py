import random

import pytest

from flipfish.board import Board, Side

EMPTY_ROWS = "........\n" * 7

# BLACK owns the corner, WHITE sits next to it: BLACK can play (0, 2),
# WHITE has no legal move anywhere
CORNER_POSITION = "XO......\n" + EMPTY_ROWS


def random_position(seed: int, plies: int) -> Board:
    """Plays `plies` random legal moves from the start, skipping passes."""
    rng = random.Random(seed)
    board = Board()
    side = Side.WHITE
    for _ in range(plies):
        if board.is_game_over():
            break
        moves = board.legal_moves(side)
        if moves:
            board.apply(side, rng.choice(moves))
        side = side.opponent
    return board


@pytest.fixture
def start_board():
    return Board()


@pytest.fixture
def corner_board():
    return Board.parse(CORNER_POSITION)


@pytest.fixture
def midgame_boards():
    return [random_position(seed, plies) for seed, plies in ((1, 10), (2, 16), (3, 24))]


@pytest.fixture
def full_board():
    return Board.parse("\n".join(["XOXOXOXO", "OXOXOXOX"] * 4))
