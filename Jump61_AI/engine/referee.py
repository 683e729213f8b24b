"""Move validation and the error kinds raised on contract violations."""

from .squares import Side


class IllegalMoveError(ValueError):
    """A side tried to add a spot where the rules do not allow it."""


class NoHistoryError(IndexError):
    """Undo was requested with nothing left to undo."""


class ReadOnlyBoardError(TypeError):
    """A mutation was attempted through a read-only board view."""


def check_move(board, player, n):
    """
    Validate that `player` may add a spot to square #n of `board`.
    Raises IllegalMoveError naming the reason; returns True otherwise.
    """
    if player not in (Side.RED, Side.BLUE):
        raise IllegalMoveError(f"{player} cannot move")
    winner = board.get_winner()
    if winner is not None:
        raise IllegalMoveError(f"game already won by {winner}")
    if not board.exists_square(n):
        raise IllegalMoveError(f"square {n} is off the board")
    owner = board.get_square(n).side
    if not player.playable_square(owner):
        raise IllegalMoveError(
            f"square {board.move_string_square(n)} belongs to {owner}"
        )
    return True
