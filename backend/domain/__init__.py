"""
Domain entities for the timed-food snake game.

This module contains the core game entities that are independent of
infrastructure concerns (timers, rendering, input).
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, MIN_SPEED, MAX_SPEED
from .position import Position, OUT_OF_FIELD
from .snake import Snake
from .food import Food, FoodKind, FoodEffect, FOOD_KINDS, create_foods
from .game_state import GameState, format_hms
from .exceptions import FieldFullError

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'MIN_SPEED', 'MAX_SPEED',
    'Position', 'OUT_OF_FIELD',
    'Snake',
    'Food', 'FoodKind', 'FoodEffect', 'FOOD_KINDS', 'create_foods',
    'GameState', 'format_hms',
    'FieldFullError',
]
