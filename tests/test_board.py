"""Tests for the board state machine."""

import numpy as np
import pytest

from flipfish.board import (
    BOARD_SIZE,
    DIRECTIONS,
    EMPTY,
    NULL_MOVE,
    Board,
    Legality,
    Move,
    Side,
)

ALL_CELLS = [Move(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)]
OUT_OF_RANGE = [Move(-1, 0), Move(0, -1), Move(8, 0), Move(0, 8), NULL_MOVE]


def test_opponent_mapping_is_a_bijection():
    """Test that each side maps to the other and back."""
    assert Side.BLACK.opponent is Side.WHITE
    assert Side.WHITE.opponent is Side.BLACK
    for side in Side:
        assert side.opponent is not side
        assert side.opponent.opponent is side


def test_start_position(start_board):
    """Test that a new board holds the four starting discs."""
    occupied = {
        (int(row), int(col)): int(start_board.grid[row, col])
        for row, col in np.argwhere(start_board.grid != EMPTY)
    }
    assert occupied == {
        (3, 3): Side.BLACK,
        (4, 4): Side.BLACK,
        (3, 4): Side.WHITE,
        (4, 3): Side.WHITE,
    }


def test_opening_moves(start_board):
    """Test the four opening moves of each side in row-major order."""
    assert start_board.legal_moves(Side.WHITE) == [
        Move(2, 3),
        Move(3, 2),
        Move(4, 5),
        Move(5, 4),
    ]
    assert start_board.legal_moves(Side.BLACK) == [
        Move(2, 4),
        Move(3, 5),
        Move(4, 2),
        Move(5, 3),
    ]


def test_check_move_reasons(start_board):
    """Test that check_move names the reason a move is rejected."""
    assert start_board.check_move(Side.WHITE, Move(2, 3)) is Legality.LEGAL
    assert start_board.check_move(Side.WHITE, Move(3, 3)) is Legality.OCCUPIED
    assert start_board.check_move(Side.WHITE, Move(0, 0)) is Legality.NO_FLIPS
    for move in OUT_OF_RANGE:
        assert start_board.check_move(Side.WHITE, move) is Legality.OUT_OF_RANGE
        assert not start_board.is_legal(Side.WHITE, move)


def test_illegal_apply_leaves_board_unchanged(start_board, midgame_boards, full_board):
    """Test that applying an illegal move is a no-op."""
    for board in [start_board, full_board, *midgame_boards]:
        for side in Side:
            for move in ALL_CELLS + OUT_OF_RANGE:
                if board.is_legal(side, move):
                    continue
                before = board.grid.copy()
                assert board.apply(side, move) == []
                assert np.array_equal(board.grid, before)


def test_legal_moves_flip_at_least_one_disc(start_board, midgame_boards):
    """Test that every legal move flips discs and places one."""
    for board in [start_board, *midgame_boards]:
        for side in Side:
            for move in board.legal_moves(side):
                child = board.copy()
                flipped = child.apply(side, move)
                assert flipped
                assert child.grid[move] == side
                assert all(child.grid[cell] == side for cell in flipped)
                assert child.count(side) == board.count(side) + len(flipped) + 1
                assert (
                    child.count(side.opponent)
                    == board.count(side.opponent) - len(flipped)
                )


def test_flip_stops_at_first_own_disc():
    """Test that flipping stops at the nearest disc of the mover."""
    board = Board.parse(".OOXOX..\n" + "........\n" * 7)

    flipped = board.apply(Side.BLACK, Move(0, 0))

    assert flipped == [Move(0, 1), Move(0, 2)]
    assert str(board).splitlines()[0] == "XXXXOX.."


def test_flip_in_several_directions():
    """Test that a move flips every bracketed direction and no other."""
    board = Board.parse(
        """
        X.......
        .O......
        XO.O....
        ........
        ........
        ........
        ........
        ........
        """
    )

    flipped = board.apply(Side.BLACK, Move(2, 2))

    assert sorted(flipped) == [Move(1, 1), Move(2, 1)]
    # run to the right is not bracketed
    assert board.grid[2, 3] == Side.WHITE


def test_run_reaching_the_edge_is_not_bracketed():
    """Test that a run ending at the edge flips nothing."""
    board = Board.parse(".OOOOOOO\n" + "........\n" * 7)

    assert not board.can_flip(Side.BLACK, Move(0, 0), (0, 1))
    assert board.check_move(Side.BLACK, Move(0, 0)) is Legality.NO_FLIPS


def test_can_flip_needs_adjacent_opponent(start_board):
    """Test which directions satisfy the flip condition for an opening."""
    # (2, 3) for WHITE: only the downward ray is bracketed
    satisfied = [
        d for d in DIRECTIONS if start_board.can_flip(Side.WHITE, Move(2, 3), d)
    ]
    assert satisfied == [(1, 0)]


def test_has_any_legal_move(start_board, full_board):
    """Test has_any_legal_move and is_game_over on open and full boards."""
    assert start_board.has_any_legal_move(Side.BLACK)
    assert start_board.has_any_legal_move(Side.WHITE)
    assert not full_board.has_any_legal_move(Side.BLACK)
    assert not full_board.has_any_legal_move(Side.WHITE)
    assert full_board.is_game_over()
    assert not start_board.is_game_over()


def test_side_without_moves(corner_board):
    """Test a position where only one side can move."""
    assert corner_board.legal_moves(Side.BLACK) == [Move(0, 2)]
    assert not corner_board.has_any_legal_move(Side.WHITE)
    assert not corner_board.is_game_over()


def test_mask_matches_is_legal(start_board, midgame_boards, corner_board):
    """Test that the vectorised mask agrees with is_legal on every cell."""
    for board in [start_board, corner_board, *midgame_boards]:
        for side in Side:
            mask = board.legal_moves_mask(side)
            for move in ALL_CELLS:
                assert bool(mask[move]) == board.is_legal(side, move)


def test_copy_is_independent(start_board):
    """Test that a copied board does not share its grid."""
    snapshot = start_board.copy()
    snapshot.apply(Side.WHITE, Move(2, 3))

    assert snapshot != start_board
    assert start_board == Board()


def test_parse_and_str():
    """Test that the text notation round-trips."""
    text = "\n".join(["XO......", "........"] + ["........"] * 5 + ["......OX"])
    board = Board.parse(text)

    assert str(board) == text
    assert board.count(Side.BLACK) == 2
    assert board.count(Side.WHITE) == 2


@pytest.mark.parametrize(
    "text",
    [
        "........\n" * 7,
        "........\n" * 7 + ".......",
        "........\n" * 7 + "......Z.",
    ],
)
def test_parse_rejects_malformed_text(text):
    """Test that parse raises on bad shapes and symbols."""
    with pytest.raises(ValueError):
        Board.parse(text)
