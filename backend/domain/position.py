"""
Position entity - a cell on the game field.
"""

from dataclasses import dataclass


@dataclass
class Position:
    """
    A mutable x, y cell coordinate compared by value.

    The snake recycles its tail Position as the new head on every move.
    """
    x: int
    y: int

    def copy(self) -> "Position":
        return Position(self.x, self.y)

    def as_tuple(self):
        return (self.x, self.y)


# Marks something that is not currently placed on the field.
# Only ever assigned, never mutated.
OUT_OF_FIELD = Position(-1, -1)


def is_placed(position: Position) -> bool:
    return position != OUT_OF_FIELD
