"""Static evaluation of Jump61 positions (square ownership material count)."""

from ..engine.squares import Side

# Magnitude returned for a position where one side owns every square.
WINNING_VALUE = 1000


def sense_for(side):
    """Evaluation sign for `side`: RED maximizes, BLUE minimizes."""
    if side is Side.RED:
        return 1
    if side is Side.BLUE:
        return -1
    raise ValueError(f"{side} has no evaluation sense")


def static_eval(board, winning_value=WINNING_VALUE):
    """
    Heuristic value of `board`, positive favoring RED.
    A board owned entirely by one side scores +/- winning_value;
    otherwise the difference in squares owned.
    """
    total = board.size * board.size
    red = board.num_of_side(Side.RED)
    blue = board.num_of_side(Side.BLUE)
    if red == total:
        return winning_value
    if blue == total:
        return -winning_value
    return red - blue


def score_board(board, side, winning_value=WINNING_VALUE):
    """static_eval seen from `side`: positive is good for `side`."""
    return sense_for(side) * static_eval(board, winning_value)
