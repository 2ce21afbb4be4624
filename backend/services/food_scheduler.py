"""
Spawn / remove cycle of the foods.

Each food goes through

    unspawned -> spawn scheduled -> placed -> removal scheduled -> unspawned ...

until delete() stops it for good. Delays are drawn uniformly from
[0, spawn_in) and [0, remove_in) seconds of the food kind.
"""

import logging
import random
from typing import Callable

from domain.exceptions import FieldFullError
from domain.food import Food
from domain.game_state import GameState
from domain.position import OUT_OF_FIELD, Position

from .renderer import Renderer
from .scheduler import EventScheduler

logger = logging.getLogger(__name__)


class FoodScheduler:
    """
    Drives the timers of the foods in a GameState.

    place is the function used to pick a free cell; the engine passes its
    own get_random_free_position so foods never land on the body or on
    each other.
    """

    def __init__(
        self,
        state: GameState,
        scheduler: EventScheduler,
        renderer: Renderer,
        place: Callable[[], Position],
        block_size: int,
        rng: random.Random,
    ):
        self.state = state
        self.scheduler = scheduler
        self.renderer = renderer
        self.place = place
        self.block_size = block_size
        self.rng = rng

    def schedule_spawn(self, food: Food) -> None:
        """
        Take food off the field and schedule it to appear again.

        Cancels a pending removal, so it is safe to call on a food that has
        just been eaten.
        """
        self.scheduler.cancel(food.remove_timer)
        self.scheduler.cancel(food.spawn_timer)
        food.remove_timer = None
        food.position = OUT_OF_FIELD

        delay = self.rng.random() * food.kind.spawn_in
        food.spawn_timer = self.scheduler.call_later(
            delay, lambda: self._spawn(food), name=f"spawn-{food.kind.name}"
        )

    def _spawn(self, food: Food) -> None:
        food.spawn_timer = None
        try:
            food.position = self.place()
        except FieldFullError:
            logger.warning("No room for %s food, trying again later", food.kind.name)
            self.schedule_spawn(food)
            return

        self.renderer.draw_block(food.position, self.block_size, food.color)
        logger.debug("Spawned %s", food)
        self.schedule_remove(food)

    def schedule_remove(self, food: Food) -> None:
        """Schedule food to leave the field, then to spawn again."""
        self.scheduler.cancel(food.remove_timer)
        delay = self.rng.random() * food.kind.remove_in
        food.remove_timer = self.scheduler.call_later(
            delay, lambda: self._remove(food), name=f"remove-{food.kind.name}"
        )

    def _remove(self, food: Food) -> None:
        food.remove_timer = None
        logger.debug("Removing %s", food)
        self.renderer.clear_block(food.position, self.block_size)
        food.position = OUT_OF_FIELD
        self.schedule_spawn(food)

    def delete(self, food: Food) -> None:
        """
        Stop the cycle of food: cancel both timers and clear it from the field.

        Meant for game over. Calling it again is harmless.
        """
        self.scheduler.cancel(food.spawn_timer)
        self.scheduler.cancel(food.remove_timer)
        food.spawn_timer = None
        food.remove_timer = None
        if food.placed:
            self.renderer.clear_block(food.position, self.block_size)
        food.position = OUT_OF_FIELD

    def start_all(self) -> None:
        for food in self.state.foods:
            self.schedule_spawn(food)

    def delete_all(self) -> None:
        for food in self.state.foods:
            self.delete(food)
