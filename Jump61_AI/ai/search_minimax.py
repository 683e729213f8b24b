"""Depth-limited minimax with alpha-beta pruning over a private working board."""

import logging
import time

from . import heuristic
from . import move_selector


LOGGER = logging.getLogger(__name__)

INF = 10 ** 9
DEFAULT_DEPTH = 4


class MinimaxSearcher:
    """Encapsulates the state and logic for a minimax search."""

    def __init__(self, side, depth=DEFAULT_DEPTH, winning_value=heuristic.WINNING_VALUE, stats=None):
        if depth < 1:
            raise ValueError(f"search depth must be at least 1, got {depth}")
        self.side = side
        self.depth = depth
        self.winning_value = winning_value
        self.stats_list = stats

        # Internal state
        self.node_counter = 0
        self.start_time = None
        self.found_move = None
        self.root_value = None

    def choose_move(self, board):
        """
        Return the (r, c) to play for self.side on `board`.
        The search runs on a working copy; `board` itself is never modified.
        """
        if board.get_winner() is not None:
            raise ValueError("game is already over")
        if board.whose_move() is not self.side:
            raise ValueError(f"it is not {self.side}'s move")

        work = board.clone()
        self.node_counter = 0
        self.start_time = time.time()
        self.found_move = None

        self.root_value = self._minimax(
            work,
            self.depth,
            True,
            heuristic.sense_for(self.side),
            -INF,
            INF,
        )

        if work.history or work != board:
            raise RuntimeError("working board was not restored after search")
        if self.found_move is None:
            raise ValueError("No legal moves available for search")

        LOGGER.debug(
            "%s chose %s (value %d, root score %d, %d nodes)",
            self.side,
            work.move_string(*self.found_move),
            self.root_value,
            heuristic.score_board(board, self.side, self.winning_value),
            self.node_counter,
        )
        if self.stats_list is not None:
            self._record_stats()
        return self.found_move

    def _minimax(self, board, depth, save_move, sense, alpha, beta):
        """
        Return the value of `board` searched `depth` plies deep. Maximizes when
        sense == 1 and minimizes when sense == -1; the best move is stored in
        self.found_move only when save_move is set (the root call).
        """
        self.node_counter += 1
        if depth == 0 or board.get_winner() is not None:
            return heuristic.static_eval(board, self.winning_value)

        player = board.whose_move()
        moves = move_selector.legal_moves(board, player)
        if not moves:
            raise ValueError(f"no legal moves for {player} in an unfinished position")

        maximizing = sense == 1
        best_value = -INF if maximizing else INF
        for r, c in moves:
            board.add_spot(player, r, c)
            try:
                value = self._minimax(board, depth - 1, False, -sense, alpha, beta)
            finally:
                board.undo()

            if maximizing:
                if value > best_value:
                    best_value = value
                    alpha = max(alpha, value)
                    if save_move:
                        self.found_move = (r, c)
            else:
                if value < best_value:
                    best_value = value
                    beta = min(beta, value)
                    if save_move:
                        self.found_move = (r, c)

            if beta <= alpha:
                break

        return best_value

    def _record_stats(self):
        total_time = max(time.time() - self.start_time, 1e-9)
        self.stats_list.append({
            "side": self.side,
            "depth": self.depth,
            "nodes": self.node_counter,
            "time": total_time,
            "nps": self.node_counter / total_time,
            "value": self.root_value,
        })


def choose_move(board, side, depth=DEFAULT_DEPTH, winning_value=heuristic.WINNING_VALUE, stats=None):
    """
    Public function to start a search. Instantiates and uses MinimaxSearcher.
    """
    searcher = MinimaxSearcher(
        side=side,
        depth=depth,
        winning_value=winning_value,
        stats=stats,
    )
    return searcher.choose_move(board)
