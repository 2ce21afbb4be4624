"""
Tests for the autopilot players.
"""

import os
import random
import sys

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import DOWN, LEFT, RIGHT, UP, VALID_MOVES, Food, FOOD_KINDS, FoodEffect, GameState, Position, Snake
from players import AVAILABLE_PLAYERS, RandomPlayer, StraightPlayer

TRAP = next(k for k in FOOD_KINDS if k.effect is FoodEffect.TRAP)
GROW = next(k for k in FOOD_KINDS if k.effect is FoodEffect.GROW)


def hooked_state(food_kind=None, food_at=None):
    """
    Head at (5,5) coming down from (5,4); the body blocks LEFT at (4,5).
    """
    foods = []
    if food_kind is not None:
        food = Food(food_kind)
        food.position = food_at
        foods.append(food)
    state = GameState(10, 10, foods)
    state.snake = Snake([Position(5, 5), Position(5, 4), Position(4, 4), Position(4, 5), Position(4, 6)])
    state.direction = DOWN
    return state


class TestRandomPlayer:

    def test_returns_valid_move(self):
        state = GameState(10, 10)
        state.snake = Snake([Position(5, 5)])
        player = RandomPlayer(random.Random(0))

        assert player.get_move(state) in VALID_MOVES

    def test_never_reverses(self):
        state = GameState(10, 10)
        state.snake = Snake([Position(5, 5)])
        state.direction = LEFT

        for seed in range(30):
            assert RandomPlayer(random.Random(seed)).get_move(state) != RIGHT

    def test_avoids_body_and_traps(self):
        state = hooked_state(TRAP, Position(6, 5))

        for seed in range(30):
            assert RandomPlayer(random.Random(seed)).get_move(state) == DOWN

    def test_goes_for_adjacent_food(self):
        state = hooked_state(GROW, Position(6, 5))

        for seed in range(30):
            assert RandomPlayer(random.Random(seed)).get_move(state) == RIGHT

    def test_uses_last_queued_direction(self):
        state = GameState(10, 10)
        state.snake = Snake([Position(5, 5)])
        state.direction = DOWN
        state.next_directions.append(LEFT)

        for seed in range(30):
            assert RandomPlayer(random.Random(seed)).get_move(state) in {LEFT, UP, DOWN}


class TestStraightPlayer:

    def test_keeps_direction(self):
        state = GameState(10, 10)
        state.snake = Snake([Position(5, 5)])
        state.direction = UP
        assert StraightPlayer().get_move(state) == UP


def test_registry():
    assert AVAILABLE_PLAYERS == {"random": RandomPlayer, "straight": StraightPlayer}
