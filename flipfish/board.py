from enum import Enum, IntEnum
from typing import NamedTuple

import numpy as np

BOARD_SIZE = 8
EMPTY = 0

# padding wide enough for a shifted view of any ray length
_PAD = BOARD_SIZE - 1


class Side(IntEnum):
    """The two competing identities. Their values double as cell states."""

    BLACK = 1
    WHITE = 2

    @property
    def opponent(self) -> "Side":
        return _OPPONENT[self]


_OPPONENT = {Side.BLACK: Side.WHITE, Side.WHITE: Side.BLACK}

_SYMBOLS = {EMPTY: ".", Side.BLACK: "X", Side.WHITE: "O"}
_CELLS = {symbol: cell for cell, symbol in _SYMBOLS.items()}


class Move(NamedTuple):
    row: int
    col: int

    def __str__(self) -> str:
        return f"{self.row} {self.col}"


# returned when the side to move has nothing to play
NULL_MOVE = Move(-1, -1)

DIRECTIONS: tuple[tuple[int, int], ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


class Legality(Enum):
    """Why a placement is (not) playable."""

    LEGAL = "legal"
    OUT_OF_RANGE = "out_of_range"
    OCCUPIED = "occupied"
    NO_FLIPS = "no_flips"


class Board:
    """
    8x8 disc-flipping board.

    The grid is a numpy int8 array holding EMPTY, Side.BLACK or Side.WHITE.
    Boards have value semantics: search works on `copy()` snapshots and
    never touches the position it was given.
    """

    def __init__(self):
        self.grid = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        self.grid[3, 3] = self.grid[4, 4] = Side.BLACK
        self.grid[3, 4] = self.grid[4, 3] = Side.WHITE

    @classmethod
    def parse(cls, text: str) -> "Board":
        """
        Builds a board from its text diagram, as produced by `str(board)`.
        Only meant for diagnostics and test fixtures: positions reached in
        play always come from `apply`.

        Arguments:
            - text: 8 rows of 8 symbols ('.' empty, 'X' black, 'O' white),
                whitespace inside a row is ignored.

        Returns:
            - board: the parsed position.
        """
        rows = ["".join(line.split()) for line in text.strip().splitlines()]
        rows = [row for row in rows if row]
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise ValueError(f"expected {BOARD_SIZE} rows of {BOARD_SIZE} cells")

        board = cls()
        for i, row in enumerate(rows):
            for j, symbol in enumerate(row):
                if symbol not in _CELLS:
                    raise ValueError(f"unknown cell symbol {symbol!r}")
                board.grid[i, j] = _CELLS[symbol]
        return board

    def copy(self) -> "Board":
        board = Board.__new__(Board)
        board.grid = self.grid.copy()
        return board

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    def __str__(self) -> str:
        return "\n".join(
            "".join(_SYMBOLS[int(cell)] for cell in row) for row in self.grid
        )

    def __repr__(self) -> str:
        return f"Board({str(self)!r})"

    @staticmethod
    def in_bounds(row: int, col: int) -> bool:
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

    def check_move(self, side: Side, move: Move) -> Legality:
        """
        Classifies a placement for `side`. Only Legality.LEGAL moves
        change the board when applied.

        Arguments:
            - side: the side placing the disc
            - move: target coordinates

        Returns:
            - legality: LEGAL, or the first reason the move is rejected.
        """
        row, col = move
        if not self.in_bounds(row, col):
            return Legality.OUT_OF_RANGE
        if self.grid[row, col] != EMPTY:
            return Legality.OCCUPIED
        for direction in DIRECTIONS:
            if self.can_flip(side, move, direction):
                return Legality.LEGAL
        return Legality.NO_FLIPS

    def is_legal(self, side: Side, move: Move) -> bool:
        return self.check_move(side, move) is Legality.LEGAL

    def can_flip(self, side: Side, move: Move, direction: tuple[int, int]) -> bool:
        """
        Flip condition: the neighbour of `move` in `direction` holds the
        opponent, and the first non-opponent cell further along the ray
        holds `side`. Reaching an empty cell or the edge first fails.
        """
        dr, dc = direction
        row, col = move[0] + dr, move[1] + dc
        opponent = side.opponent
        if not self.in_bounds(row, col) or self.grid[row, col] != opponent:
            return False

        while True:
            row += dr
            col += dc
            if not self.in_bounds(row, col) or self.grid[row, col] == EMPTY:
                return False
            if self.grid[row, col] == side:
                return True

    def apply(self, side: Side, move: Move) -> list[Move]:
        """
        Places a disc for `side` and flips every bracketed opponent run.
        Illegal moves are silently ignored and leave the board untouched.

        Arguments:
            - side: the side placing the disc
            - move: target coordinates

        Returns:
            - flipped: coordinates of the discs that changed side (empty
                when the move was ignored).
        """
        if not self.is_legal(side, move):
            return []

        directions = [d for d in DIRECTIONS if self.can_flip(side, move, d)]
        opponent = side.opponent
        row, col = move
        self.grid[row, col] = side

        flipped = []
        for dr, dc in directions:
            r, c = row + dr, col + dc
            while self.grid[r, c] == opponent:
                self.grid[r, c] = side
                flipped.append(Move(r, c))
                r += dr
                c += dc
        return flipped

    def legal_moves_mask(self, side: Side) -> np.ndarray:
        """
        Boolean 8x8 array, True where `side` has a legal placement.

        Evaluates the flip condition for all cells at once: for each
        direction, `run` keeps the cells whose first k neighbours are all
        opponent discs, and a cell qualifies once the next neighbour along
        the ray is one of our own.
        """
        own = np.pad(self.grid == side, _PAD)
        opp = np.pad(self.grid == side.opponent, _PAD)

        mask = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=bool)
        for dr, dc in DIRECTIONS:
            run = np.ones((BOARD_SIZE, BOARD_SIZE), dtype=bool)
            for k in range(1, BOARD_SIZE):
                r0 = _PAD + dr * k
                c0 = _PAD + dc * k
                if k > 1:
                    mask |= run & own[r0 : r0 + BOARD_SIZE, c0 : c0 + BOARD_SIZE]
                run &= opp[r0 : r0 + BOARD_SIZE, c0 : c0 + BOARD_SIZE]
                if not run.any():
                    break

        return mask & (self.grid == EMPTY)

    def legal_moves(self, side: Side) -> list[Move]:
        """Legal moves for `side` in row-major order."""
        return [
            Move(int(row), int(col))
            for row, col in np.argwhere(self.legal_moves_mask(side))
        ]

    def has_any_legal_move(self, side: Side) -> bool:
        return bool(self.legal_moves_mask(side).any())

    def count(self, side: Side) -> int:
        return int(np.count_nonzero(self.grid == side))

    def is_game_over(self) -> bool:
        return not (
            self.has_any_legal_move(Side.BLACK) or self.has_any_legal_move(Side.WHITE)
        )
