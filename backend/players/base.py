"""
Base player interface for headless games.
"""

import random
from typing import Optional

from domain.game_state import GameState


class Player:
    """
    Base class/interface for autopilot logic.

    A player looks at the current game state and returns the direction it
    wants the snake to take next. The simulation pushes it through
    SnakeGame.push_direction(), so moves that reverse the snake are dropped
    exactly like a human's keystrokes would be.
    """

    name = "player"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> str:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT"
        """
        raise NotImplementedError
