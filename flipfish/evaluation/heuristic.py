"""
Heuristic evaluator for disc-flipping positions.

The score is the sum of four independent terms: corner ownership, a
penalty for discs next to corners we don't hold, the disc difference and
a frontier term counting discs that border empty cells.
"""

import numpy as np

from flipfish.board import BOARD_SIZE, EMPTY, Board, Side

CORNER_VALUE = 10
CORNER_ADJACENCY_VALUE = -10

# corner -> the cells touching it
CORNER_NEIGHBOURS: dict[tuple[int, int], tuple[tuple[int, int], ...]] = {
    (0, 0): ((0, 1), (1, 0), (1, 1)),
    (0, 7): ((0, 6), (1, 7), (1, 6)),
    (7, 0): ((7, 1), (6, 0), (6, 1)),
    (7, 7): ((7, 6), (6, 7), (6, 6)),
}


def corner_score(board: Board, side: Side) -> int:
    score = 0
    for corner in CORNER_NEIGHBOURS:
        if board.grid[corner] == side:
            score += CORNER_VALUE
        elif board.grid[corner] == side.opponent:
            score -= CORNER_VALUE
    return score


def corner_adjacency_penalty(board: Board, side: Side) -> int:
    """
    Penalises each corner we don't hold when one of its neighbours is
    ours, since that disc tends to hand the corner to the opponent.
    Penalties stack across corners.
    """
    penalty = 0
    for corner, neighbours in CORNER_NEIGHBOURS.items():
        if board.grid[corner] == side:
            continue
        if any(board.grid[cell] == side for cell in neighbours):
            penalty += CORNER_ADJACENCY_VALUE
    return penalty


def disc_difference(board: Board, side: Side) -> int:
    return board.count(side) - board.count(side.opponent)


def frontier_score(board: Board, side: Side) -> int:
    """
    For every empty cell, -1 per neighbouring disc of `side` and +1 per
    neighbouring opponent disc.

    Arguments:
        - board: board state
        - side: perspective of the score

    Returns:
        - score: positive when the opponent has more discs bordering
            open space than we do.
    """
    grid = board.grid
    values = (grid == side.opponent).astype(np.int32) - (grid == side).astype(
        np.int32
    )
    padded = np.pad(values, 1)

    # the centre cell is included but is empty wherever we sum
    neighbourhood = sum(
        padded[1 + dr : 1 + dr + BOARD_SIZE, 1 + dc : 1 + dc + BOARD_SIZE]
        for dr in (-1, 0, 1)
        for dc in (-1, 0, 1)
    )
    return int(neighbourhood[grid == EMPTY].sum())


def evaluate(board: Board, side: Side) -> int:
    """
    This function evaluates the board from the point of view of `side`
    and returns a score for it. It only depends on the discs on the
    board, so the same position always gets the same score.

    Arguments:
        - board: board state
        - side: the side we are scoring for

    Returns:
        - score: the score for the current board, higher is better for side
    """
    return (
        corner_score(board, side)
        + corner_adjacency_penalty(board, side)
        + disc_difference(board, side)
        + frontier_score(board, side)
    )


class HeuristicEvaluator:
    """
    Default evaluator: corners, corner adjacency, discs and frontier.
    """

    def evaluate(self, board: Board, side: Side) -> int:
        return evaluate(board, side)

    def reset(self) -> None:
        """Stateless, nothing to clear."""
