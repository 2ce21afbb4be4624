"""
Player that never turns.
"""

from domain.game_state import GameState
from .base import Player


class StraightPlayer(Player):
    name = "straight"

    def get_move(self, game_state: GameState) -> str:
        return game_state.direction
