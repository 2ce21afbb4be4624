"""
Game engine: the main loop and lifecycle of a single-player snake game.

SnakeGame owns the GameState and is the only thing that mutates it. All of
its work happens in callbacks fired one at a time by an EventScheduler:

  - the main loop, every tick_interval_ms(speed) milliseconds
  - the elapsed-time ticker, every second
  - the spawn/remove timers of each food (see FoodScheduler)

Input goes through push_direction() and start() (or handle_key()).
"""

import logging
import math
import random
from typing import List, Optional

from domain.constants import (
    AXIS,
    DOWN,
    DOUBLE_LENGTH_FACTOR,
    ELAPSED_TIME_STEP_SECONDS,
    GAME_OVER_MESSAGE,
    GROW_BLOCKS,
    GROW_SCORE_INCREMENT,
    HALVE_LENGTH_FACTOR,
    HEAD_COLOR,
    KEY_BINDINGS,
    LENGTH_SCORE_MULTIPLIER,
    MAX_MAINLOOP_INTERVAL_MS,
    MAX_SPEED,
    MIN_SPEED,
    SPEED_STEP_MS,
    START,
    START_MESSAGE,
    VALID_MOVES,
)
from domain.exceptions import FieldFullError
from domain.food import Food, FoodEffect, FoodKind, create_foods
from domain.game_state import GameState
from domain.position import Position

from .food_scheduler import FoodScheduler
from .renderer import Renderer
from .scheduler import EventScheduler, Timer

logger = logging.getLogger(__name__)


def clamp_speed(speed: float) -> int:
    if speed < MIN_SPEED:
        return MIN_SPEED
    if speed > MAX_SPEED:
        return MAX_SPEED
    return math.floor(speed)


def tick_interval_ms(speed: int) -> int:
    """Main loop interval for a speed: 115ms at speed 1 down to 20ms at 20."""
    return math.floor(MAX_MAINLOOP_INTERVAL_MS - SPEED_STEP_MS * clamp_speed(speed))


class SnakeGame:
    """
    Manages:
      - Field (width, height)
      - Snake body and direction queue
      - Foods and their timers
      - Score, speed and elapsed time
      - Start / game over transitions
    """

    def __init__(
        self,
        width: int,
        height: int,
        renderer: Renderer,
        scheduler: Optional[EventScheduler] = None,
        block_size: int = 35,
        rng: Optional[random.Random] = None,
        food_kinds: Optional[List[FoodKind]] = None
    ):
        self.state = GameState(width, height, create_foods(food_kinds))
        self.renderer = renderer
        self.scheduler = scheduler or EventScheduler()
        self.block_size = block_size
        self.rng = rng or random.Random()

        self.food_scheduler = FoodScheduler(
            self.state,
            self.scheduler,
            self.renderer,
            place=self.get_random_free_position,
            block_size=self.block_size,
            rng=self.rng,
        )

        self.main_loop_timer: Optional[Timer] = None
        self.elapsed_time_timer: Optional[Timer] = None
        self.tick_interval_ms = tick_interval_ms(self.state.speed)
        self.games_played = 0

        self.update_message(START_MESSAGE)

    # ------------------------------------------------------------------
    # Shortcuts
    # ------------------------------------------------------------------

    @property
    def body(self):
        return self.state.snake.positions

    @property
    def playing(self) -> bool:
        return self.state.playing

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> bool:
        """
        Reset the state and start a new game.

        Does nothing while a game is running. Returns whether a game started.
        """
        if self.state.playing:
            return False

        self.renderer.clear()
        state = self.state
        state.playing = True
        state.elapsed_time = 0
        state.direction = DOWN
        state.next_directions.clear()
        state.score = 0
        state.snake.positions.clear()
        self.adjust_speed(MIN_SPEED)

        self.food_scheduler.start_all()

        state.snake.positions.append(self.get_random_free_position())
        self.draw_head()

        self.update_infos()
        self.update_elapsed_time(0)
        self.update_message("")
        self.scheduler.cancel(self.elapsed_time_timer)
        self.elapsed_time_timer = self.scheduler.call_every(
            ELAPSED_TIME_STEP_SECONDS,
            lambda: self.update_elapsed_time(ELAPSED_TIME_STEP_SECONDS),
            name="elapsed-time",
        )

        self.games_played += 1
        logger.info(
            "Game %s started on a %sx%s field at %s",
            self.games_played, state.width, state.height, self.state.snake.head.as_tuple()
        )
        return True

    def game_over(self) -> None:
        """Stop every timer of the game and show the game over message. Idempotent."""
        was_playing = self.state.playing

        self.scheduler.cancel(self.main_loop_timer)
        self.scheduler.cancel(self.elapsed_time_timer)
        self.main_loop_timer = None
        self.elapsed_time_timer = None
        self.food_scheduler.delete_all()

        self.state.playing = False
        self.update_message(GAME_OVER_MESSAGE)

        if was_playing:
            logger.info(
                "Game over: score=%s length=%s speed=%s time=%s",
                self.state.score, len(self.state.snake), self.state.speed,
                self.state.elapsed_time_hms()
            )
            logger.debug("Final board:\n%s", self.state.print_board())

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def handle_key(self, key: str) -> None:
        """Dispatch a key name (as in KEY_BINDINGS). Unknown keys are ignored."""
        command = KEY_BINDINGS.get(key.lower())
        if command is None:
            return
        if command == START:
            self.start()
        else:
            self.push_direction(command)

    def push_direction(self, direction: str) -> bool:
        """
        Queue direction unless it is on the same axis as the last queued
        direction (or the current one when the queue is empty).
        """
        if direction not in VALID_MOVES:
            return False
        queue = self.state.next_directions
        last = queue[-1] if queue else self.state.direction
        if AXIS[direction] == AXIS[last]:
            return False
        queue.append(direction)
        return True

    # ------------------------------------------------------------------
    # Body
    # ------------------------------------------------------------------

    def move(self) -> Position:
        """Apply the next queued direction, if any, then move one block."""
        if self.state.next_directions:
            self.state.direction = self.state.next_directions.popleft()
        return self.state.snake.move(self.state.direction, self.state.width, self.state.height)

    def resize_body(self, new_length: float) -> int:
        return self.state.snake.resize(new_length, before_pop=self.clear_tail)

    def is_growing(self) -> bool:
        return self.state.snake.is_growing()

    def draw_head(self) -> None:
        self.renderer.draw_block(self.state.snake.head, self.block_size, HEAD_COLOR)

    def clear_tail(self) -> None:
        # A growing tail shares its cell with the block before it
        if not self.is_growing():
            self.renderer.clear_block(self.state.snake.tail, self.block_size)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def collide_with_body(self, position: Position, ignore_head: bool = False) -> bool:
        return self.state.snake.collides_with(position, ignore_head)

    def get_food_in(self, position: Position) -> Optional[Food]:
        return self.state.get_food_in(position)

    def collide_with_foods(self, position: Position) -> bool:
        return self.state.collides_with_foods(position)

    def get_random_free_position(self) -> Position:
        """
        Return a random position not taken by the body or a food.

        Raises FieldFullError if there is none.
        """
        width, height = self.state.width, self.state.height
        if self.state.occupied_cells() >= width * height:
            raise FieldFullError(width, height)

        pos = Position(0, 0)
        while True:
            pos.x = self.rng.randrange(width)
            pos.y = self.rng.randrange(height)
            if not self.collide_with_body(pos) and not self.collide_with_foods(pos):
                return pos

    # ------------------------------------------------------------------
    # Score and speed
    # ------------------------------------------------------------------

    def adjust_speed(self, speed: float) -> None:
        """
        Set the speed (clamped to MIN_SPEED..MAX_SPEED) and reschedule the
        main loop with the matching interval.
        """
        self.state.speed = clamp_speed(speed)
        self.tick_interval_ms = tick_interval_ms(self.state.speed)

        self.scheduler.cancel(self.main_loop_timer)
        self.main_loop_timer = None
        if self.state.playing:
            self.main_loop_timer = self.scheduler.call_every(
                self.tick_interval_ms / 1000, self.main_loop, name="main-loop"
            )
        logger.debug("Speed %s, tick every %sms", self.state.speed, self.tick_interval_ms)

    def increase_score(self, increment: float) -> None:
        self.state.score += math.floor(self.state.speed * increment + len(self.state.snake))

    def apply_effect(self, effect: FoodEffect) -> None:
        """Apply what eating a food of the given effect does to the game."""
        length = len(self.state.snake)

        if effect is FoodEffect.GROW:
            self.increase_score(GROW_SCORE_INCREMENT)
            self.resize_body(length + GROW_BLOCKS)
            self.adjust_speed(self.state.speed + 1)
        elif effect is FoodEffect.DOUBLE:
            self.increase_score(length * LENGTH_SCORE_MULTIPLIER)
            self.resize_body(length * DOUBLE_LENGTH_FACTOR)
            self.adjust_speed(self.state.speed + 1)
        elif effect is FoodEffect.HALVE:
            self.increase_score(length * LENGTH_SCORE_MULTIPLIER)
            self.resize_body(length / HALVE_LENGTH_FACTOR)
        elif effect is FoodEffect.RESET:
            self.increase_score(self.state.score)
            self.resize_body(1)
            self.adjust_speed(MIN_SPEED)
        elif effect is FoodEffect.TRAP:
            self.game_over()
        else:
            raise ValueError(f"Unknown food effect {effect!r}")

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def main_loop(self) -> None:
        """One tick: move, check for a crash, eat what is under the head."""
        if not self.state.playing:
            return

        self.clear_tail()
        self.move()
        self.draw_head()

        head = self.state.snake.head
        if self.collide_with_body(head, ignore_head=True):
            self.game_over()
            return

        food = self.get_food_in(head)
        if food is not None:
            self.eat(food)

    def eat(self, food: Food) -> None:
        logger.debug("Ate %s", food)
        # Respawn first: the effect may end the game and delete every food
        self.food_scheduler.schedule_spawn(food)
        self.apply_effect(food.effect)
        self.update_infos()

    # ------------------------------------------------------------------
    # HUD
    # ------------------------------------------------------------------

    def update_elapsed_time(self, secs: int) -> None:
        self.state.elapsed_time += secs
        self.renderer.update_elapsed_time(self.state.elapsed_time_hms())

    def update_infos(self) -> None:
        self.renderer.update_infos(len(self.state.snake), self.state.speed, self.state.score)

    def update_message(self, text: str) -> None:
        self.state.message = text
        self.renderer.update_message(text)
