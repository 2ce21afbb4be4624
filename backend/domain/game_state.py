"""
GameState entity - everything that changes while a game is played.
"""

from collections import deque
from typing import Any, Deque, Dict, List, Optional

from .constants import DOWN, MIN_SPEED
from .food import Food
from .position import Position
from .snake import Snake


class GameState:
    """
    The mutable state of a single game.

    Attributes:
        width, height: field dimensions in blocks
        playing: whether a game is running
        elapsed_time: whole seconds since start
        direction: current direction of the snake
        next_directions: queue of directions typed but not applied yet
        speed: 1 to 20, drives the tick interval
        score: non-negative score
        snake: the body, owned by this state
        foods: every food of the game, owned by this state
        message: status text shown to the player

    Subsystems receive the state by reference; the engine is the only writer.
    """

    def __init__(self, width: int, height: int, foods: Optional[List[Food]] = None):
        if width < 1 or height < 1:
            raise ValueError(f"Field must be at least 1x1, got {width}x{height}.")
        self.width = width
        self.height = height
        self.playing = False
        self.elapsed_time = 0
        self.direction = DOWN
        self.next_directions: Deque[str] = deque()
        self.speed = MIN_SPEED
        self.score = 0
        self.snake = Snake([])
        self.foods: List[Food] = list(foods or [])
        self.message = ""

    def get_food_in(self, position: Position) -> Optional[Food]:
        """Return the food at position or None."""
        for food in self.foods:
            if food.position == position:
                return food
        return None

    def collides_with_foods(self, position: Position) -> bool:
        return self.get_food_in(position) is not None

    def occupied_cells(self) -> int:
        """Number of distinct cells taken by the body or a placed food."""
        cells = {p.as_tuple() for p in self.snake.positions}
        cells.update(f.position.as_tuple() for f in self.foods if f.placed)
        return len(cells)

    def elapsed_time_hms(self) -> str:
        return format_hms(self.elapsed_time)

    def summary(self) -> Dict[str, Any]:
        return {
            "playing": self.playing,
            "score": self.score,
            "length": len(self.snake),
            "speed": self.speed,
            "elapsed_time": self.elapsed_time_hms(),
            "message": self.message,
        }

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        H = snake head
        T = snake body/tail
        first letter of the food kind for placed foods
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        for food in self.foods:
            if food.placed:
                board[food.position.y][food.position.x] = food.kind.name[0].upper()

        for block in self.snake.positions:
            board[block.y][block.x] = 'T'
        if len(self.snake):
            board[self.snake.head.y][self.snake.head.x] = 'H'

        return "\n".join(' '.join(row) for row in board)

    def __repr__(self):
        return (
            f"<GameState playing={self.playing}, score={self.score}, "
            f"length={len(self.snake)}, speed={self.speed}, elapsed={self.elapsed_time}>"
        )


def format_hms(seconds: int) -> str:
    """Format whole seconds as zero padded HH:MM:SS."""
    seconds = int(seconds)
    h = seconds // 3600
    m = seconds // 60 % 60
    s = seconds % 60
    return f"{h:02d}:{m:02d}:{s:02d}"
