"""Adjacency, overflow thresholds, and the cascade that spreads overfull squares."""

from collections import deque

from .squares import square


def adjacent(board, n):
    """Return the square numbers orthogonally adjacent to #n (up, left, right, down)."""
    size = board.size
    r, c = board.row(n), board.col(n)
    result = []
    if r > 1:
        result.append(n - size)
    if c > 1:
        result.append(n - 1)
    if c < size:
        result.append(n + 1)
    if r < size:
        result.append(n + size)
    return result


def neighbor_count(size, r, c):
    """Number of orthogonal neighbors of (r, c) on a size x size board."""
    n = 0
    if r > 1:
        n += 1
    if c > 1:
        n += 1
    if r < size:
        n += 1
    if c < size:
        n += 1
    return n


def jump(board, start):
    """
    Spread spots from overfull squares until none remain or the game is won,
    assuming initially only square #start might be overfull.

    Writes go through board._put so the caller's undo record sees every change.
    Returns the number of overflows performed.
    """
    work = deque([start])
    overflows = 0
    while work:
        if board.get_winner() is not None:
            break
        n = work.popleft()
        current = board.get_square(n)
        limit = board.neighbors_square(n)
        if current.spots <= limit:
            continue

        side = current.side
        board._put(n, square(side, current.spots - limit))
        for m in adjacent(board, n):
            board._put(m, square(side, board.get_square(m).spots + 1))
            work.append(m)
        if current.spots - limit > limit:
            work.append(n)
        overflows += 1
    return overflows
