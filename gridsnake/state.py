"""Game state data models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .config import *
from .food import Food
from .snake import Snake


class Session(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass
class Effects:
    speed: bool = False
    double: bool = False
    speed_until: Optional[float] = None
    double_until: Optional[float] = None

    def clear(self):
        self.speed = self.double = False
        self.speed_until = self.double_until = None


@dataclass
class GameState:
    snake: Snake = field(default_factory=Snake)
    food: Optional[Food] = None
    score: int = 0
    level: int = 1
    high_score: int = 0
    difficulty: str = DEFAULT_DIFFICULTY
    interval: float = DIFFICULTY_LEVELS[DEFAULT_DIFFICULTY]
    effects: Effects = field(default_factory=Effects)
    session: Session = Session.IDLE
    eaten_types: set = field(default_factory=set)
    unlocked: set = field(default_factory=set)
    sound_enabled: bool = True
    pulse_frame: int = 0
    level_banner: bool = False
    # set only when this session raised the high score
    new_record: bool = False
    toasts: list = field(default_factory=list)
    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT

    @property
    def base_interval(self):
        return DIFFICULTY_LEVELS[self.difficulty]

    @property
    def endless(self):
        return self.base_interval == 0

    @property
    def tick_interval(self):
        """Interval the tick timer should run at, 0 meaning no auto tick."""
        if self.effects.speed:
            return self.interval * SPEED_BOOST_FACTOR
        return self.interval

    @property
    def running(self):
        return self.session is Session.RUNNING
