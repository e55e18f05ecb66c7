"""Turn-loop state: the authoritative board and the engine playing on it."""

import logging
from dataclasses import replace

from flipfish.board import NULL_MOVE, Board, Move, Side
from flipfish.config import Config
from flipfish.helper import find_best_move, get_engine

logger = logging.getLogger(__name__)


class Agent:
    """
    Owns the game in progress for one player.

    The board is only changed through `Board.apply`, and both the board
    and the engine are replaced, never reset in place, when a new game
    starts.
    """

    def __init__(self, config: Config):
        self.config = config
        self.game_config = config
        self.board = Board()
        self.engine = get_engine(config)

    @property
    def side(self) -> Side:
        return self.game_config.side

    def new_game(self, side: Side, search_depth: int | None = None) -> None:
        """
        Starts a fresh game from the standard position.

        Arguments:
            - side: the side the agent plays this game
            - search_depth: overrides the configured depth for this game
        """
        if search_depth is None:
            search_depth = self.config.search_depth
        self.game_config = replace(self.config, side=side, search_depth=search_depth)
        self.board = Board()
        self.engine = get_engine(self.game_config)
        logger.debug("new game: playing %s at depth %d", side.name, search_depth)

    def opponent_moved(self, move: Move) -> None:
        """Applies the opponent's move; illegal moves are ignored."""
        opponent = self.side.opponent
        # a legal move always flips, so an empty result means it was ignored
        if self.board.apply(opponent, move):
            return
        if move == NULL_MOVE:
            logger.debug("%s passed", opponent.name)
            return
        logger.warning(
            "ignoring %s move %s: %s",
            opponent.name,
            tuple(move),
            self.board.check_move(opponent, move).value,
        )

    def request_move(
        self, move_time: float | None = None, total_time: float | None = None
    ) -> Move:
        """
        Picks a move for our side, plays it on the board and returns it.

        Arguments:
            - move_time: time budget for this move, accepted but not used
            - total_time: remaining game time, accepted but not used

        Returns:
            - move: the move played, or NULL_MOVE if we had none.
        """
        if move_time is not None or total_time is not None:
            logger.debug(
                "time budget ignored (move_time=%s, total_time=%s)",
                move_time,
                total_time,
            )
        move = find_best_move(self.board, self.engine)
        self.board.apply(self.side, move)
        return move
