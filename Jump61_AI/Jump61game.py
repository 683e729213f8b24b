"""Game loop and turn management for computer-vs-computer Jump61 matches."""

from .Board import Board
from .engine.referee import IllegalMoveError
from .engine.squares import Side


class Jump61game:
    def __init__(self, board_size, red_player, blue_player, logger=print, renderer=None, max_moves=None):
        self.board = Board(size=board_size)
        self.players = {Side.RED: red_player, Side.BLUE: blue_player}
        self.logger = logger
        self.renderer = renderer
        self.max_moves = max_moves

    def play(self):
        """Run a single game. Returns the winning Side, or None if the move limit is hit."""
        if self.renderer:
            self.board.set_notifier(self.renderer)
        try:
            while True:
                winner = self.board.get_winner()
                if winner is not None:
                    self.logger(f"Winner: {winner}")
                    return winner
                if self.max_moves is not None and self.board.move_count >= self.max_moves:
                    self.logger(f"Result: no winner after {self.board.move_count} moves")
                    return None

                side = self.board.whose_move()
                player = self.players[side]
                try:
                    move = player.next_move(self.board.readonly_board())
                    self.board.add_spot(side, *move)
                except (IllegalMoveError, ValueError) as exc:
                    self.logger(f"Disqualification: {side} - {exc}")
                    return side.opposite()

                self.logger(
                    f"Move {self.board.move_count}: {side.letter.upper()} {self.board.move_string(*move)}"
                )
        finally:
            if self.renderer:
                self.board.set_notifier(None)
