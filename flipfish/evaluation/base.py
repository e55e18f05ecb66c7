"""
Base evaluator protocol.

Any static evaluation (hand-written heuristic, learned weights) should
implement this protocol to be usable with the minimax search engines.
"""

from typing import Protocol, runtime_checkable

from flipfish.board import Board, Side


@runtime_checkable
class Evaluator(Protocol):
    """
    Protocol for board evaluation functions.

    The engine calls `evaluate()` at the leaves of the search tree and
    wherever the side it plays for has run out of moves.

    The returned score is from the perspective of `side`:
    - Positive = good for `side`
    - Negative = bad for `side`
    """

    def evaluate(self, board: Board, side: Side) -> int:
        """
        Evaluate the given board position.

        Args:
            board: The position to evaluate.
            side: The side the score is computed for.

        Returns:
            Integer score, higher is better for `side`.
        """
        ...

    def reset(self) -> None:
        """
        Reset any internal state (e.g., caches).

        Called at the start of each new search. Implementations that
        don't maintain state can make this a no-op.
        """
        ...
