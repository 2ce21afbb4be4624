"""
Food entities for the game engine.

A food is a block that can be eaten by the snake. It appears at a random
free position after a random delay, stays on the field for another random
delay and then disappears, over and over until the game ends. What happens
when it is eaten is described by its FoodEffect, applied by the engine.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .constants import GROW_FOOD, DOUBLE_FOOD, HALVE_FOOD, RESET_FOOD, TRAP_FOOD
from .position import Position, OUT_OF_FIELD, is_placed


class FoodEffect(Enum):
    GROW = "grow"      # score, length + GROW_BLOCKS, speed + 1
    DOUBLE = "double"  # score, length doubled, speed + 1
    HALVE = "halve"    # score, length halved
    RESET = "reset"    # score doubled, length 1, speed 1
    TRAP = "trap"      # game over


@dataclass(frozen=True)
class FoodKind:
    """
    Static description of a kind of food.

    Attributes:
        name: identifier, also used in logs
        color: fill color understood by the renderer
        spawn_in: max seconds before the food appears
        remove_in: max seconds the food stays on the field if not eaten
        effect: what eating it does to the game
    """
    name: str
    color: str
    spawn_in: float
    remove_in: float
    effect: FoodEffect


def _kind(params, effect: FoodEffect) -> FoodKind:
    name, color, spawn_in, remove_in = params
    return FoodKind(name=name, color=color, spawn_in=spawn_in, remove_in=remove_in, effect=effect)


FOOD_KINDS: List[FoodKind] = [
    _kind(GROW_FOOD, FoodEffect.GROW),
    _kind(DOUBLE_FOOD, FoodEffect.DOUBLE),
    _kind(HALVE_FOOD, FoodEffect.HALVE),
    _kind(RESET_FOOD, FoodEffect.RESET),
    _kind(TRAP_FOOD, FoodEffect.TRAP),
]


class Food:
    """
    A food on the field together with its pending timers.

    The timers are owned by the food: only the FoodScheduler sets them and
    every new schedule cancels the one it supersedes.
    """

    def __init__(self, kind: FoodKind):
        self.kind = kind
        self.position: Position = OUT_OF_FIELD
        self.spawn_timer = None
        self.remove_timer = None

    @property
    def color(self) -> str:
        return self.kind.color

    @property
    def effect(self) -> FoodEffect:
        return self.kind.effect

    @property
    def placed(self) -> bool:
        return is_placed(self.position)

    def __repr__(self):
        where = self.position.as_tuple() if self.placed else None
        return f"<Food {self.kind.name} at {where}>"


def create_foods(kinds: Optional[List[FoodKind]] = None) -> List[Food]:
    """Return one fresh Food per kind (all kinds by default)."""
    return [Food(kind) for kind in (kinds if kinds is not None else FOOD_KINDS)]
