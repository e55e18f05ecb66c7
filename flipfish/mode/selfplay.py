"""Engine against engine on a single board."""

import logging
from dataclasses import dataclass, field, replace

from rich.console import Console
from rich.table import Table

from flipfish.board import BOARD_SIZE, Board, Move, Side
from flipfish.config import Config
from flipfish.engines.base_engine import Engine
from flipfish.helper import find_best_move, get_engine

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """
    Outcome of a finished game.

    Attributes:
        board: final position
        moves: (side, move) pairs in the order they were played; passes
            are not recorded
    """

    board: Board
    moves: list[tuple[Side, Move]] = field(default_factory=list)

    @property
    def black_discs(self) -> int:
        return self.board.count(Side.BLACK)

    @property
    def white_discs(self) -> int:
        return self.board.count(Side.WHITE)

    @property
    def winner(self) -> Side | None:
        if self.black_discs == self.white_discs:
            return None
        return Side.BLACK if self.black_discs > self.white_discs else Side.WHITE


def play_game(
    white: Engine, black: Engine, board: Board | None = None
) -> GameResult:
    """
    Plays until neither side can move. WHITE moves first and a side
    without a legal move is skipped.

    Arguments:
        - white: engine configured to play WHITE
        - black: engine configured to play BLACK
        - board: starting position (copied), the standard start by default

    Returns:
        - result: final board and move list
    """
    if white.side != Side.WHITE or black.side != Side.BLACK:
        raise ValueError("engines must be configured for the side they play")

    board = Board() if board is None else board.copy()
    engines = {Side.WHITE: white, Side.BLACK: black}
    result = GameResult(board=board)

    side = Side.WHITE
    while not board.is_game_over():
        if board.has_any_legal_move(side):
            move = find_best_move(board, engines[side])
            board.apply(side, move)
            result.moves.append((side, move))
            logger.debug("%s plays %s", side.name, tuple(move))
        side = side.opponent

    return result


def _board_table(board: Board) -> Table:
    table = Table(show_header=True, show_lines=False)
    table.add_column("")
    for col in range(BOARD_SIZE):
        table.add_column(str(col), justify="center")
    for row, line in enumerate(str(board).splitlines()):
        table.add_row(str(row), *line)
    return table


def main(config: Config):
    """
    Plays one game between the configured engine, on `config.side`, and
    the opponent engine on the other side, then prints the final position.
    """
    ours = get_engine(config)
    theirs = get_engine(
        replace(
            config,
            side=config.side.opponent,
            algorithm=config.opponent_algorithm,
            search_depth=config.opponent_depth,
        )
    )
    engines = {ours.side: ours, theirs.side: theirs}
    names = {ours.side: config.algorithm, theirs.side: config.opponent_algorithm}
    result = play_game(engines[Side.WHITE], engines[Side.BLACK])

    console = Console()
    console.print(_board_table(result.board))
    console.print(
        f"[bold]WHITE[/bold] ({names[Side.WHITE]}) {result.white_discs} - "
        f"{result.black_discs} [bold]BLACK[/bold] ({names[Side.BLACK]})"
    )
    winner = result.winner.name if result.winner is not None else "draw"
    console.print(f"winner: [green]{winner}[/green] after {len(result.moves)} moves")
