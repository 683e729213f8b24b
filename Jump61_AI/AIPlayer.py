"""Automated player backed by minimax search."""

from .Player import Player
from .ai import heuristic, search_minimax


class AI(Player):
    def __init__(self, side, depth=search_minimax.DEFAULT_DEPTH, winning_value=heuristic.WINNING_VALUE):
        super().__init__(side)
        self.depth = depth
        self.winning_value = winning_value
        self.stats = []

    def next_move(self, board):
        if board.whose_move() is not self.side:
            raise ValueError(f"{self.side} asked to move out of turn")
        return search_minimax.choose_move(
            board,
            self.side,
            depth=self.depth,
            winning_value=self.winning_value,
            stats=self.stats,
        )
