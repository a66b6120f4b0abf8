"""Achievements as data: a predicate kind plus a threshold."""

from dataclasses import dataclass

from .food import FOOD_TYPES

KIND_LEVEL = "level"
KIND_SCORE = "score"
KIND_ALL_FOODS = "all_foods"


@dataclass(frozen=True)
class Achievement:
    id: str
    name: str
    description: str
    kind: str
    threshold: int = 0

    def is_met(self, snapshot):
        if self.kind == KIND_LEVEL:
            return snapshot.level >= self.threshold
        if self.kind == KIND_SCORE:
            return snapshot.score >= self.threshold
        if self.kind == KIND_ALL_FOODS:
            return set(FOOD_TYPES) <= set(snapshot.eaten_types)
        raise ValueError(f"unknown achievement kind {self.kind!r}")


@dataclass(frozen=True)
class Snapshot:
    level: int
    score: int
    eaten_types: frozenset


ACHIEVEMENTS = (
    Achievement("ach-beginner", "Beginner", "Reach level 3", KIND_LEVEL, 3),
    Achievement("ach-intermediate", "Intermediate", "Reach level 5", KIND_LEVEL, 5),
    Achievement("ach-expert", "Expert", "Reach level 10", KIND_LEVEL, 10),
    Achievement("ach-scorer", "Scorer", "Score 50 points", KIND_SCORE, 50),
    Achievement("ach-collector", "Collector", "Eat every kind of food", KIND_ALL_FOODS),
)
ACHIEVEMENTS_BY_ID = {a.id: a for a in ACHIEVEMENTS}


def evaluate(snapshot, unlocked):
    """Return achievements newly met by snapshot, in table order.

    ``unlocked`` is the set of ids already unlocked; it is not modified.
    """
    return [a for a in ACHIEVEMENTS if a.id not in unlocked and a.is_met(snapshot)]
