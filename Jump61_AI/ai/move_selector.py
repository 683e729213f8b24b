"""Legal move generation in row-major order (row outer, column inner)."""


def legal_moves(board, side):
    """Return every (r, c) where `side` may add a spot; empty once the game is won."""
    if board.get_winner() is not None:
        return []
    size = board.size
    moves = []
    for r in range(1, size + 1):
        for c in range(1, size + 1):
            if side.playable_square(board.get(r, c).side):
                moves.append((r, c))
    return moves
