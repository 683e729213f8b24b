"""Abstract player interface and a random-move baseline."""

import random

from .ai import move_selector


class Player:
    def __init__(self, side):
        self.side = side

    def next_move(self, board):
        """Return (r, c) for the next move."""
        raise NotImplementedError


class RandomPlayer(Player):
    """Random legal move baseline; `seed` makes its choices reproducible."""

    def __init__(self, side, seed=None):
        super().__init__(side)
        self.random = random.Random(seed)

    def next_move(self, board):
        legal = move_selector.legal_moves(board, self.side)
        if not legal:
            raise ValueError("No legal moves for random player")
        return self.random.choice(legal)
