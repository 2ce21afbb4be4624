"""
Random player implementation - picks random safe moves.
"""

from typing import List

from domain.constants import AXIS, DELTAS, VALID_MOVES
from domain.food import FoodEffect
from domain.game_state import GameState
from domain.position import Position
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that steers towards adjacent food and away from its own body
    and from trap food.
    """

    name = "random"

    def get_move(self, game_state: GameState) -> str:
        head = game_state.snake.head
        body = list(game_state.snake.positions)
        current = game_state.next_directions[-1] if game_state.next_directions else game_state.direction

        # Keep going, or turn onto the other axis; reversing is never allowed
        candidates = [current] + sorted(m for m in VALID_MOVES if AXIS[m] != AXIS[current])

        safe_moves: List[str] = []
        food_moves: List[str] = []
        for move in candidates:
            dx, dy = DELTAS[move]
            target = Position((head.x + dx) % game_state.width, (head.y + dy) % game_state.height)

            # The tail moves away this tick unless the snake is growing
            if target in body[1:-1] or (len(body) > 1 and target == body[-1] and game_state.snake.is_growing()):
                continue
            food = game_state.get_food_in(target)
            if food is not None and food.effect is FoodEffect.TRAP:
                continue

            safe_moves.append(move)
            if food is not None:
                food_moves.append(move)

        if food_moves:
            return self.rng.choice(food_moves)
        # If no safe moves, just keep going (we'll die anyway)
        if not safe_moves:
            return current
        return self.rng.choice(safe_moves)
