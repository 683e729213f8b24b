"""Legality, side-to-move, and cascade (overflow) behavior."""

import pytest

from Jump61_AI.Board import Board
from Jump61_AI.engine import jump_rules
from Jump61_AI.engine.referee import IllegalMoveError, check_move
from Jump61_AI.engine.squares import Side, Square


def grid(board):
    return [
        [str(board.get(r, c)) for c in range(1, board.size + 1)]
        for r in range(1, board.size + 1)
    ]


def seed_full_threshold(board, side):
    """Give every square exactly as many spots as it has neighbors."""
    for r in range(1, board.size + 1):
        for c in range(1, board.size + 1):
            board.set(r, c, board.neighbors(r, c), side)


def test_adjacent_order_and_geometry():
    b = Board(size=3)
    assert jump_rules.adjacent(b, 0) == [1, 3]
    assert jump_rules.adjacent(b, 4) == [1, 3, 5, 7]
    assert jump_rules.adjacent(b, 5) == [2, 4, 8]
    assert jump_rules.adjacent(b, 8) == [5, 7]
    assert jump_rules.adjacent(Board(size=1), 0) == []


def test_legality_rules():
    b = Board(size=3)
    b.set(1, 1, 1, Side.BLUE)
    assert b.is_legal(Side.RED, 2, 2)
    assert b.is_legal(Side.BLUE, 1, 1)
    assert not b.is_legal(Side.RED, 1, 1)
    assert not b.is_legal(Side.RED, 4, 1)
    assert not b.is_legal(Side.WHITE, 2, 2)
    with pytest.raises(IllegalMoveError):
        check_move(b, Side.RED, b.sq_num(1, 1))
    assert check_move(b, Side.BLUE, b.sq_num(1, 1)) is True


def test_illegal_add_spot_raises_and_leaves_board_alone():
    b = Board(size=3)
    b.add_spot(Side.RED, 2, 2)
    before = b.clone()
    with pytest.raises(IllegalMoveError):
        b.add_spot(Side.BLUE, 2, 2)
    with pytest.raises(IllegalMoveError):
        b.add_spot(Side.BLUE, 0, 2)
    assert b == before
    assert b.move_count == 1 and len(b.history) == 1


def test_no_moves_on_won_board():
    b = Board(size=2)
    for n in range(4):
        b.set(b.row(n), b.col(n), 1, Side.RED)
    assert b.get_winner() is Side.RED
    assert not b.can_move(Side.BLUE)
    assert not b.is_legal(Side.RED, 1, 1)
    with pytest.raises(IllegalMoveError, match="already won"):
        b.add_spot(Side.RED, 1, 1)


def test_side_to_move_alternates_from_red():
    b = Board(size=3)
    assert b.whose_move() is Side.RED
    moves = [(1, 1), (3, 3), (1, 1), (3, 3), (2, 2)]
    expected = Side.RED
    for r, c in moves:
        assert b.whose_move() is expected
        b.add_spot(expected, r, c)
        expected = expected.opposite()
    assert b.whose_move() is Side.BLUE


def test_corner_overflow_converts_both_neighbors():
    b = Board(size=3)
    b.set(1, 1, 2, Side.RED)
    b.set(1, 2, 1, Side.BLUE)
    b.add_spot(Side.RED, 1, 1)
    assert b.get(1, 1) == Square(Side.RED, 1)
    assert b.get(1, 2) == Square(Side.RED, 2)
    assert b.get(2, 1) == Square(Side.RED, 1)
    assert b.num_pieces() == 4
    assert b.get(2, 2) == Square.INITIAL


def test_overflow_subtracts_threshold_only():
    b = Board(size=3)
    # Edge square with 6 spots: the first overflow leaves 3, which is stable.
    b.set(1, 2, 6, Side.BLUE)
    b.set(3, 3, 1, Side.RED)
    jump_rules.jump(b, b.sq_num(1, 2))
    assert b.get(1, 2) == Square(Side.BLUE, 3)
    assert b.get(1, 1) == Square(Side.BLUE, 1)
    assert b.get(1, 3) == Square(Side.BLUE, 1)
    assert b.get(2, 2) == Square(Side.BLUE, 1)


def test_still_overfull_square_is_rechecked():
    b = Board(size=3)
    b.set(1, 1, 7, Side.RED)
    b.set(3, 3, 1, Side.BLUE)
    jump_rules.jump(b, 0)
    # 7 -> 5 -> 3 -> 1 at the corner; both neighbors end at their threshold of 3.
    for n in range(9):
        assert b.get_square(n).spots <= b.neighbors_square(n)
    assert grid(b) == [
        ["1r", "3r", "0-"],
        ["3r", "0-", "0-"],
        ["0-", "0-", "1b"],
    ]
    assert b.num_pieces() == 8


def test_chain_reaction_through_the_whole_board():
    b = Board(size=3)
    seed_full_threshold(b, Side.RED)
    b.set(3, 3, 2, Side.BLUE)
    assert b.whose_move() is Side.RED

    b.add_spot(Side.RED, 1, 1)

    assert b.get_winner() is Side.RED
    assert grid(b) == [
        ["3r", "1r", "3r"],
        ["1r", "5r", "2r"],
        ["2r", "5r", "3r"],
    ]
    assert b.num_pieces() == 25


def test_cascade_stops_as_soon_as_the_board_is_won():
    b = Board(size=3)
    seed_full_threshold(b, Side.RED)
    b.set(1, 3, 2, Side.BLUE)

    b.add_spot(Side.RED, 1, 2)

    assert b.get_winner() is Side.RED
    assert grid(b) == [
        ["3r", "1r", "3r"],
        ["3r", "5r", "3r"],
        ["2r", "3r", "2r"],
    ]


def test_cascade_that_misses_the_opponent_leaves_it_alone():
    b = Board(size=4)
    b.set(1, 1, 2, Side.RED)
    b.set(1, 2, 2, Side.RED)
    b.set(4, 4, 1, Side.BLUE)
    b.set(4, 3, 1, Side.BLUE)

    b.add_spot(Side.RED, 1, 1)

    assert b.get_winner() is None
    assert b.get(4, 4) == Square(Side.BLUE, 1)
    assert b.get(4, 3) == Square(Side.BLUE, 1)
    assert b.get(1, 1) == Square(Side.RED, 1)
    assert b.get(1, 2) == Square(Side.RED, 3)
    assert b.get(2, 1) == Square(Side.RED, 1)
    assert b.num_pieces() == 7


def test_single_square_board_is_won_by_first_move():
    b = Board(size=1)
    b.add_spot(Side.RED, 1, 1)
    assert b.get_winner() is Side.RED
    assert b.get(1, 1) == Square(Side.RED, 1)
