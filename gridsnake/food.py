import random
from dataclasses import dataclass
from typing import Optional

from .config import *

EFFECT_NONE = "none"
EFFECT_GROW = "grow"
EFFECT_SPEED = "speed"
EFFECT_DOUBLE = "double"
EFFECT_SHRINK = "shrink"


@dataclass(frozen=True)
class FoodType:
    """Static properties of one kind of food."""
    name: str
    chance: float
    score: int
    color: tuple
    duration: int = 0
    effect: str = EFFECT_NONE

    @property
    def timed(self):
        return self.duration > 0


def _hex(value):
    value = value.lstrip("#")
    return tuple(int(value[i:i + 2], 16) for i in (0, 2, 4))


# Order matters: type selection walks this table accumulating chances.
FOOD_TYPES = {
    ft.name: ft for ft in (
        FoodType("normal", 0.40, 1, _hex("#ff0000")),
        FoodType("star", 0.20, 3, _hex("#FFD700"), 10, EFFECT_GROW),
        FoodType("speed", 0.15, 2, _hex("#00ffff"), 5, EFFECT_SPEED),
        FoodType("rainbow", 0.15, 1, _hex("#ff00ff"), 8, EFFECT_DOUBLE),
        FoodType("small", 0.10, 2, _hex("#32CD32"), 0, EFFECT_SHRINK),
        FoodType("bomb", 0.05, -5, _hex("#000000"), 0, EFFECT_NONE),
    )
}
BASE_FOOD = "normal"


@dataclass
class Food:
    position: tuple
    kind: str = BASE_FOOD
    time_left: int = 0

    @property
    def food_type(self):
        return FOOD_TYPES[self.kind]

    def tick_countdown(self):
        """Count one second off a timed food. Returns True once it expired."""
        if not self.food_type.timed:
            return False
        self.time_left = max(0, self.time_left - 1)
        return self.time_left == 0


def choose_food_type(draw: float) -> str:
    """Pick a food type by cumulative-chance containment of draw in [0, 1).

    Chances are normalised by their total so the table always partitions
    [0, 1) and every type, bomb included, can be drawn.
    """
    total = sum(ft.chance for ft in FOOD_TYPES.values())
    accumulated = 0.0
    for name, food_type in FOOD_TYPES.items():
        accumulated += food_type.chance / total
        if draw < accumulated:
            return name
    return BASE_FOOD


def spawn_food(snake_body, rng=random, kind: Optional[str] = None,
               width=GRID_WIDTH, height=GRID_HEIGHT) -> Food:
    """Spawn food at a random free cell, choosing its type unless forced."""
    if kind is None:
        kind = choose_food_type(rng.random())
    elif kind not in FOOD_TYPES:
        raise KeyError(kind)

    occupied = set(snake_body)
    if len(occupied) >= width * height:
        raise ValueError("no free cell left for food")
    while True:
        position = (rng.randrange(width), rng.randrange(height))
        if position not in occupied:
            break
    return Food(position, kind, FOOD_TYPES[kind].duration)
