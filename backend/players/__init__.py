"""
Autopilot players for headless games.

This module contains the player abstractions and implementations that
steer the snake when nobody is at the keyboard.
"""

from .base import Player
from .random_player import RandomPlayer
from .straight_player import StraightPlayer

AVAILABLE_PLAYERS = {
    RandomPlayer.name: RandomPlayer,
    StraightPlayer.name: StraightPlayer,
}

__all__ = [
    'Player',
    'RandomPlayer',
    'StraightPlayer',
    'AVAILABLE_PLAYERS',
]
