"""
Snake entity for the game engine.
"""

import math
from collections import deque
from typing import Callable, Iterable, Optional

from .constants import DELTAS
from .position import Position


class Snake:
    """
    Represents the snake body on the field.

    Attributes:
        positions: deque of Position from head at index 0 to tail at the end

    A growing snake is one whose tail duplicates the position right before
    it: the extra segments unfold one per move because move() recycles the
    tail as the new head.
    """

    def __init__(self, positions: Iterable[Position]):
        self.positions = deque(positions)

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Position:
        return self.positions[-1]

    def __len__(self) -> int:
        return len(self.positions)

    def move(self, direction: str, width: int, height: int) -> Position:
        """
        Move one block towards direction, wrapping around the field edges.

        The tail Position object is reused as the new head. Returns it.
        """
        head = self.positions[0]
        tail = self.positions.pop()
        tail.x = head.x
        tail.y = head.y
        self.positions.appendleft(tail)

        dx, dy = DELTAS[direction]
        tail.x = (tail.x + dx) % width
        tail.y = (tail.y + dy) % height
        return tail

    def resize(self, new_length: float, before_pop: Optional[Callable[[], None]] = None) -> int:
        """
        Grow or shrink the body to new_length blocks (floored, at least 1).

        New blocks are copies of the current tail. before_pop is called
        before each block is removed from the tail, so the caller can erase
        it. Returns the resulting length.
        """
        new_length = max(1, math.floor(new_length))

        if len(self.positions) < new_length:
            tail = self.positions[-1]
            while len(self.positions) < new_length:
                self.positions.append(tail.copy())
        else:
            while len(self.positions) > new_length:
                if before_pop is not None:
                    before_pop()
                self.positions.pop()
        return len(self.positions)

    def is_growing(self) -> bool:
        """True if the tail sits on the same cell as the block before it."""
        return len(self.positions) > 1 and self.positions[-1] == self.positions[-2]

    def collides_with(self, position: Position, ignore_head: bool = False) -> bool:
        for i, block in enumerate(self.positions):
            if i == 0 and ignore_head:
                continue
            if block == position:
                return True
        return False

    def __repr__(self):
        return f"<Snake length={len(self.positions)} head={self.head.as_tuple()}>"
