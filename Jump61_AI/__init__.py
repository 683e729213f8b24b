"""Jump61_AI package exports."""

from .Board import Board, ConstantBoard
from .Jump61game import Jump61game
from .Player import Player, RandomPlayer
from .AIPlayer import AI
from .engine.referee import IllegalMoveError, NoHistoryError, ReadOnlyBoardError
from .engine.squares import Side, Square

# Subpackages for rule engine, AI search, and helpers
from . import ai, engine, utils

__all__ = [
    "Board",
    "ConstantBoard",
    "Jump61game",
    "Player",
    "RandomPlayer",
    "AI",
    "IllegalMoveError",
    "NoHistoryError",
    "ReadOnlyBoardError",
    "Side",
    "Square",
    "ai",
    "engine",
    "utils",
]
