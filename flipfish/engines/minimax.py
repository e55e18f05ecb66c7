from flipfish.board import Board
from flipfish.engines.alpha_beta import SCORE_MAX, SCORE_MIN, AlphaBeta


class Minimax(AlphaBeta):
    """
    Plain minimax: same tree, same terminal rules and same sentinels as
    AlphaBeta, but every branch is expanded. Alpha and beta are accepted
    and ignored.
    """

    def minimax(
        self,
        board: Board,
        depth: int,
        alpha: int,
        beta: int,
        maximizing: bool,
    ) -> int:
        self.nodes += 1

        if depth == 0 or not board.has_any_legal_move(self.side):
            return self.eval_board(board)

        if maximizing:
            best_score = SCORE_MIN
            for move in board.legal_moves(self.side):
                child = board.copy()
                child.apply(self.side, move)
                best_score = max(
                    best_score, self.minimax(child, depth - 1, alpha, beta, False)
                )
            return best_score

        opponent = self.side.opponent
        best_score = SCORE_MAX
        for move in board.legal_moves(opponent):
            child = board.copy()
            child.apply(opponent, move)
            best_score = min(
                best_score, self.minimax(child, depth - 1, alpha, beta, True)
            )
        return best_score
