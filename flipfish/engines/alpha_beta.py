import logging

from flipfish.board import NULL_MOVE, Board, Move
from flipfish.config import Config
from flipfish.evaluation import Evaluator, HeuristicEvaluator

logger = logging.getLogger(__name__)

# 32-bit signed bounds, used as window limits and as the running best
# of a level that has not seen a move yet
SCORE_MIN = -(2**31)
SCORE_MAX = 2**31 - 1


class AlphaBeta:
    """
    A class that implements minimax search with alpha-beta pruning.
    """

    def __init__(self, config: Config, evaluator: Evaluator | None = None):
        self.config = config
        self.side = config.side
        self.depth = config.search_depth
        self.evaluator = evaluator or HeuristicEvaluator()
        self.nodes: int = 0

    def eval_board(self, board: Board) -> int:
        """
        This function evaluates the board from the point of view of the
        side this engine plays for.

        Arguments:
            - board: board state

        Returns:
            - score: the score for the current board
        """
        return self.evaluator.evaluate(board, self.side)

    def minimax(
        self,
        board: Board,
        depth: int,
        alpha: int,
        beta: int,
        maximizing: bool,
    ) -> int:
        """
        This function receives a board and a depth and returns the score of
        the board looking `depth` plies ahead. On maximizing levels our side
        is to move, on minimizing levels the opponent is. Alpha and beta are
        used to prune the search tree.

        The search stops at depth 0, and also as soon as *our* side has no
        legal move left, whoever is to move at this level.

        Arguments:
            - board: board state
            - depth: how many plies we still want to look ahead
            - alpha: best score for the maximizing player (best choice
                (highest value) we've found along the path for max)
            - beta: best score for the minimizing player (best choice
                (lowest value) we've found along the path for min).
                When alpha is higher than or equal to beta, we can prune
                the search tree; because it means that the other player
                won't let the game reach this branch.
            - maximizing: whether our side is to move

        Returns:
            - best_score: the score of the best line found. A level whose
                side to move has no legal move returns its initial
                SCORE_MIN / SCORE_MAX unchanged.
        """
        self.nodes += 1

        # recursion base case
        if depth == 0 or not board.has_any_legal_move(self.side):
            return self.eval_board(board)

        if maximizing:
            best_score = SCORE_MIN
            for move in board.legal_moves(self.side):
                child = board.copy()
                child.apply(self.side, move)
                score = self.minimax(child, depth - 1, alpha, beta, False)
                best_score = max(best_score, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break
            return best_score

        opponent = self.side.opponent
        best_score = SCORE_MAX
        for move in board.legal_moves(opponent):
            child = board.copy()
            child.apply(opponent, move)
            score = self.minimax(child, depth - 1, alpha, beta, True)
            best_score = min(best_score, score)
            beta = min(beta, score)
            if beta <= alpha:
                break
        return best_score

    def search_move(self, board: Board) -> Move:
        """
        Scores every legal move of our side with a minimizing search one
        ply down and returns the best one. Ties keep the earliest move in
        row-major order.

        Arguments:
            - board: board state, left untouched

        Returns:
            - best_move: the chosen move, or NULL_MOVE when we cannot move.
        """
        self.nodes = 0
        self.evaluator.reset()

        best_score = SCORE_MIN
        best_move = NULL_MOVE
        for move in board.legal_moves(self.side):
            child = board.copy()
            child.apply(self.side, move)
            score = self.minimax(child, self.depth, SCORE_MIN, SCORE_MAX, False)
            if score > best_score:
                best_score = score
                best_move = move

        logger.debug(
            "%s depth %d: move %s score %d (%d nodes)",
            self.side.name,
            self.depth,
            tuple(best_move),
            best_score,
            self.nodes,
        )
        return best_move
