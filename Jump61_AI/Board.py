"""Board state container: legality, spot placement with cascades, undo, and winner checks.

Squares are indexed by row and column (1..size) or by square number in
row-major order (0..size*size - 1).
"""

import logging

from .engine import jump_rules, referee
from .engine.squares import Side, Square, square


LOGGER = logging.getLogger(__name__)


def _nop(board):
    pass


class Board:
    def __init__(self, size=6):
        if size < 1:
            raise ValueError(f"board size must be at least 1, got {size}")
        self.size = size
        self._squares = [Square.INITIAL] * (size * size)
        self._side_counts = {Side.WHITE: size * size, Side.RED: 0, Side.BLUE: 0}
        self._total_spots = 0
        self.move_count = 0
        # One entry per add_spot: [(square number, prior Square), ...]
        self.history = []
        self._record = None
        self._notifier = _nop
        self._readonly = None

    def clone(self):
        """Working copy: same contents, empty undo history, silent notifier."""
        new_board = Board(self.size)
        new_board._load(self)
        return new_board

    def readonly_board(self):
        if self._readonly is None:
            self._readonly = ConstantBoard(self)
        return self._readonly

    def exists(self, r, c):
        return 1 <= r <= self.size and 1 <= c <= self.size

    def exists_square(self, n):
        return 0 <= n < self.size * self.size

    def row(self, n):
        return n // self.size + 1

    def col(self, n):
        return n % self.size + 1

    def sq_num(self, r, c):
        return (r - 1) * self.size + (c - 1)

    def move_string(self, r, c):
        return f"{r} {c}"

    def move_string_square(self, n):
        return self.move_string(self.row(n), self.col(n))

    def neighbors(self, r, c):
        return jump_rules.neighbor_count(self.size, r, c)

    def neighbors_square(self, n):
        return self.neighbors(self.row(n), self.col(n))

    def get(self, r, c):
        if not self.exists(r, c):
            raise IndexError(f"no square at row {r}, column {c}")
        return self._squares[self.sq_num(r, c)]

    def get_square(self, n):
        return self._squares[n]

    def num_pieces(self):
        """Total number of spots on the board."""
        return self._total_spots

    def num_of_side(self, side):
        """Number of squares owned by `side` (WHITE counts empty squares)."""
        return self._side_counts[side]

    def whose_move(self):
        """
        Side to move: RED when the spot total is even, BLUE when odd.
        On a won board this names the loser.
        """
        return Side.RED if self._total_spots % 2 == 0 else Side.BLUE

    def get_winner(self):
        """Return the side owning every square, or None."""
        total = self.size * self.size
        for side in (Side.RED, Side.BLUE):
            if self._side_counts[side] == total:
                return side
        return None

    def can_move(self, player):
        return self.get_winner() is None

    def is_legal(self, player, r, c):
        if not self.exists(r, c):
            return False
        return self.is_legal_square(player, self.sq_num(r, c))

    def is_legal_square(self, player, n):
        try:
            return referee.check_move(self, player, n)
        except referee.IllegalMoveError:
            return False

    def add_spot(self, player, r, c):
        if not self.exists(r, c):
            raise referee.IllegalMoveError(f"no square at row {r}, column {c}")
        self.add_spot_square(player, self.sq_num(r, c))

    def add_spot_square(self, player, n):
        """Add a spot of `player` to square #n and run the cascade; undoable."""
        referee.check_move(self, player, n)
        self._record = []
        try:
            self._put(n, square(player, self._squares[n].spots + 1))
            jump_rules.jump(self, n)
        finally:
            record, self._record = self._record, None
        self.history.append(record)
        self.move_count += 1
        self._announce()

    def set(self, r, c, num, player):
        """
        Set the square at (r, c) to `num` spots of `player` (empty when num is 0),
        bypassing legality. Not recorded in the undo history.
        """
        if not self.exists(r, c):
            raise IndexError(f"no square at row {r}, column {c}")
        if num < 0:
            raise ValueError(f"spot count must be non-negative, got {num}")
        if num > 0 and player not in (Side.RED, Side.BLUE):
            raise ValueError(f"cannot give {num} spots to {player}")
        self._place(self.sq_num(r, c), square(player, num))
        self._announce()

    def clear(self, size):
        """Reinitialize to an empty size x size board with no undo history."""
        if size < 1:
            raise ValueError(f"board size must be at least 1, got {size}")
        self._load(Board(size))
        LOGGER.debug("Board cleared to %dx%d", size, size)
        self._announce()

    def copy(self, board):
        """Copy the contents of `board` into this one, clearing the undo history."""
        self._load(board)
        self._announce()

    def undo(self):
        """Undo the most recent add_spot, including its whole cascade."""
        if not self.history:
            raise referee.NoHistoryError("no move to undo")
        record = self.history.pop()
        for n, previous in reversed(record):
            self._place(n, previous)
        self.move_count -= 1
        LOGGER.debug("Undid move with %d square changes", len(record))
        self._announce()

    def set_notifier(self, notify):
        """Install `notify(board)` to be called after every change (None to remove)."""
        self._notifier = notify if notify is not None else _nop
        self._announce()

    def _load(self, board):
        if board.size != self.size:
            self.size = board.size
            self._squares = [Square.INITIAL] * (board.size * board.size)
            self._side_counts = {Side.WHITE: board.size * board.size, Side.RED: 0, Side.BLUE: 0}
            self._total_spots = 0
        for n in range(self.size * self.size):
            self._place(n, board.get_square(n))
        self.history = []
        self.move_count = 0

    def _put(self, n, value):
        """Write square #n, recording the prior value for undo when a move is open."""
        if self._record is not None:
            self._record.append((n, self._squares[n]))
        self._place(n, value)

    def _place(self, n, value):
        old = self._squares[n]
        self._squares[n] = value
        self._side_counts[old.side] -= 1
        self._side_counts[value.side] += 1
        self._total_spots += value.spots - old.spots

    def _announce(self):
        self._notifier(self)

    def __str__(self):
        lines = ["==="]
        for r in range(1, self.size + 1):
            cells = "".join(f" {self.get(r, c)}" for c in range(1, self.size + 1))
            lines.append("   " + cells)
        lines.append("===")
        return "\n".join(lines)

    def to_display_string(self):
        """Human-oriented rendering with row numbers and a column header line."""
        rows = str(self).strip().splitlines()[1:-1]
        out = [f"{i:2d} {line.strip()}" for i, line in enumerate(rows, start=1)]
        out.append("  " + "".join(f"{c:3d}" for c in range(1, self.size + 1)))
        return "\n".join(out)

    def __eq__(self, other):
        if not isinstance(other, (Board, ConstantBoard)):
            return NotImplemented
        if self.size != other.size:
            return False
        return all(
            self._squares[n] == other.get_square(n) for n in range(self.size * self.size)
        )

    __hash__ = None

    def __repr__(self):
        return f"Board(size={self.size}, pieces={self._total_spots}, moves={self.move_count})"


class ConstantBoard:
    """Read-only view of a live Board; queries delegate, mutators raise."""

    _MUTATORS = frozenset(
        {"add_spot", "add_spot_square", "set", "clear", "copy", "undo", "set_notifier",
         "_put", "_place", "_load"}
    )

    def __init__(self, board):
        self._board = board

    def __getattr__(self, name):
        if name == "_board":
            raise AttributeError(name)
        if name in ConstantBoard._MUTATORS:
            raise referee.ReadOnlyBoardError(f"cannot call {name} on a read-only board")
        return getattr(self._board, name)

    def __str__(self):
        return str(self._board)

    def __eq__(self, other):
        return self._board == other

    __hash__ = None

    def __repr__(self):
        return f"ConstantBoard({self._board!r})"
