"""Sides and immutable square values (spot count + owning side)."""

from dataclasses import dataclass
from enum import Enum


class Side(Enum):
    # WHITE marks an empty square; RED always moves first.
    WHITE = "white"
    RED = "red"
    BLUE = "blue"

    def __str__(self):
        return self.value

    def opposite(self):
        if self is Side.RED:
            return Side.BLUE
        if self is Side.BLUE:
            return Side.RED
        return Side.WHITE

    def playable_square(self, side):
        """True iff a player of this side may add a spot to a square owned by `side`."""
        return side is Side.WHITE or side is self

    @property
    def letter(self):
        return "-" if self is Side.WHITE else self.value[0]


@dataclass(frozen=True)
class Square:
    side: Side
    spots: int

    def __post_init__(self):
        if self.spots < 0:
            raise ValueError(f"spot count must be non-negative, got {self.spots}")
        if (self.spots == 0) != (self.side is Side.WHITE):
            raise ValueError(f"invalid square: {self.spots} spots of {self.side}")

    def __str__(self):
        return f"{self.spots}{self.side.letter}"


Square.INITIAL = Square(Side.WHITE, 0)


def square(side, spots):
    """Return the square holding `spots` of `side`; zero spots is always empty."""
    if spots == 0:
        return Square.INITIAL
    return Square(side, spots)
