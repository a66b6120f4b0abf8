"""Per-tick update step and the session controller that drives it."""

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from .achievements import Snapshot, evaluate
from .config import *
from .food import (
    BASE_FOOD, EFFECT_DOUBLE, EFFECT_GROW, EFFECT_NONE, EFFECT_SHRINK, EFFECT_SPEED,
    FOOD_TYPES, spawn_food,
)
from .scheduler import Scheduler
from .state import GameState, Session

logger = logging.getLogger(__name__)


@dataclass
class StepResult:
    """What happened during one tick."""
    moved: bool = False
    ate: Optional[str] = None
    gained: int = 0
    effect: Optional[str] = None
    leveled_up: bool = False
    new_high_score: bool = False
    unlocked: list = field(default_factory=list)
    game_over: bool = False


def level_for_score(score):
    return min(score // POINTS_PER_LEVEL + 1, MAX_LEVEL)


def level_interval(base, level):
    """Tick interval for a level; the endless sentinel 0 is never scaled."""
    if base == 0:
        return 0.0
    return base * SPEED_INCREASE_RATE ** (level - 1)


def apply_score(state: GameState, value: int, result: StepResult):
    """Add a food's value to the score and recompute level and high score."""
    gained = value * 2 if state.effects.double and value > 0 else value
    state.score += gained
    result.gained = gained

    if state.score > state.high_score:
        state.high_score = state.score
        state.new_record = True
        result.new_high_score = True

    new_level = level_for_score(state.score)
    if new_level > state.level:
        state.level = new_level
        state.interval = level_interval(state.base_interval, new_level)
        result.leveled_up = True


def apply_effect(state: GameState, effect: str):
    """Apply the immediate part of a food effect.

    Grow and shrink act on the body right away; speed and double only raise
    their flag here, their expiry belongs to whoever owns the timers.
    """
    if effect == EFFECT_GROW:
        state.snake.grow()
    elif effect == EFFECT_SHRINK:
        state.snake.shrink()
    elif effect == EFFECT_SPEED:
        state.effects.speed = True
    elif effect == EFFECT_DOUBLE:
        state.effects.double = True


def update_step(state: GameState, rng=random) -> StepResult:
    """Advance the game by one tick."""
    result = StepResult()
    if state.session is not Session.RUNNING:
        return result

    snake = state.snake
    food = state.food
    ate = food is not None and snake.next_head() == food.position
    snake.advance(keep_tail=ate)
    result.moved = True

    if ate:
        food_type = food.food_type
        result.ate = food_type.name
        apply_score(state, food_type.score, result)
        if food_type.effect != EFFECT_NONE:
            apply_effect(state, food_type.effect)
            result.effect = food_type.effect
        state.eaten_types.add(food_type.name)

        try:
            state.food = spawn_food(snake.body, rng, width=state.width, height=state.height)
        except ValueError:
            logger.info("Board is full, ending game")
            state.food = None
            state.session = Session.GAME_OVER
            result.game_over = True
            return result

        snapshot = Snapshot(state.level, state.score, frozenset(state.eaten_types))
        for achievement in evaluate(snapshot, state.unlocked):
            state.unlocked.add(achievement.id)
            result.unlocked.append(achievement)

    if snake.check_wall_collision(state.width, state.height) or snake.check_self_collision():
        state.session = Session.GAME_OVER
        result.game_over = True
    return result


class Game:
    """Owns one GameState and every timer that mutates it."""

    def __init__(self, scheduler=None, storage=None, rng=None, play_sound=None):
        self.scheduler = scheduler or Scheduler()
        self.storage = storage
        self.rng = rng or random.Random()
        self._play_sound = play_sound
        self.state = GameState()
        if storage is not None:
            self.state.high_score = storage.load_high_score()
            self.state.unlocked = storage.load_achievements()
        self.state.food = spawn_food(self.state.snake.body, self.rng, kind=BASE_FOOD)

        self._tick_timer = None
        self._countdown_timer = None
        self._banner_timer = None
        self._effect_timers = {}
        self._toast_timers = []
        self._pulse_timer = self.scheduler.call_every(PULSE_INTERVAL, self._on_pulse, "pulse")

    # -- commands -------------------------------------------------------

    def new_game(self):
        """Reset the session and start running."""
        self._cancel_session_timers()
        state = self.state
        state.snake.reset()
        state.score = 0
        state.level = 1
        state.interval = state.base_interval
        state.effects.clear()
        state.eaten_types.clear()
        state.level_banner = False
        state.new_record = False
        state.session = Session.RUNNING
        state.food = spawn_food(state.snake.body, self.rng, width=state.width, height=state.height)
        logger.info("New game (difficulty=%s)", state.difficulty)
        self._reschedule_tick()
        self._restart_countdown()
        self.sound("start")

    def toggle_pause(self):
        state = self.state
        if state.session is Session.RUNNING:
            state.session = Session.PAUSED
            self._cancel(self._tick_timer)
            self._cancel(self._countdown_timer)
            self._tick_timer = self._countdown_timer = None
            logger.info("Paused")
        elif state.session is Session.PAUSED:
            state.session = Session.RUNNING
            self._reschedule_tick()
            self._restart_countdown()
            logger.info("Resumed")

    def turn(self, heading):
        if self.state.session is not Session.RUNNING:
            return False
        return self.state.snake.turn(heading)

    def set_difficulty(self, name):
        if name not in DIFFICULTY_LEVELS:
            raise ValueError(f"unknown difficulty {name!r}")
        state = self.state
        state.difficulty = name
        state.interval = level_interval(state.base_interval, state.level)
        logger.info("Difficulty set to %s (interval=%.3fs)", name, state.interval)
        self._reschedule_tick()

    def toggle_sound(self):
        self.state.sound_enabled = not self.state.sound_enabled
        return self.state.sound_enabled

    def step(self) -> StepResult:
        """Run one tick; also the manual advance used in endless mode."""
        result = update_step(self.state, self.rng)
        if not result.moved:
            return result
        self.sound("move")
        if result.new_high_score and self.storage is not None:
            self.storage.save_high_score(self.state.high_score)

        if result.game_over:
            self._end_session()
            return result

        if result.ate:
            self.sound("eat" if result.gained >= 0 else "bomb")
            self._restart_countdown()
            if result.effect in (EFFECT_SPEED, EFFECT_DOUBLE):
                self._start_effect(result.effect, FOOD_TYPES[result.ate].duration)
        if result.leveled_up:
            logger.info("Level up: %d", self.state.level)
            self._show_level_banner()
            self._reschedule_tick()
            self.sound("levelup")
        if result.unlocked:
            self._announce(result.unlocked)
        return result

    def close(self):
        """Cancel every timer; the game must not be used afterwards."""
        self._cancel_session_timers()
        self._cancel(self._pulse_timer)
        self._pulse_timer = None
        for timer in self._toast_timers:
            self._cancel(timer)
        self._toast_timers = []
        self.state.toasts.clear()

    def sound(self, name):
        if self.state.sound_enabled and self._play_sound is not None:
            self._play_sound(name)

    # -- timers ---------------------------------------------------------

    def _cancel(self, timer):
        if timer is not None:
            timer.cancel()

    def _cancel_session_timers(self):
        for timer in (self._tick_timer, self._countdown_timer, self._banner_timer):
            self._cancel(timer)
        for timer in self._effect_timers.values():
            self._cancel(timer)
        self._tick_timer = self._countdown_timer = self._banner_timer = None
        self._effect_timers = {}

    def _end_session(self):
        self._cancel_session_timers()
        state = self.state
        # the cancelled expiry and banner timers can no longer clear these
        state.effects.clear()
        state.level_banner = False
        logger.info("Game over: score=%d level=%d", state.score, state.level)
        self.sound("die")

    def _reschedule_tick(self):
        self._cancel(self._tick_timer)
        self._tick_timer = None
        interval = self.state.tick_interval
        if self.state.session is Session.RUNNING and interval > 0:
            self._tick_timer = self.scheduler.call_every(interval, self._on_tick, "tick")

    def _restart_countdown(self):
        self._cancel(self._countdown_timer)
        self._countdown_timer = None
        food = self.state.food
        if self.state.session is Session.RUNNING and food is not None and food.food_type.timed:
            self._countdown_timer = self.scheduler.call_every(
                COUNTDOWN_INTERVAL, self._on_countdown, "countdown")

    def _start_effect(self, effect, duration):
        effects = self.state.effects
        self._cancel(self._effect_timers.get(effect))
        deadline = self.scheduler.now() + duration
        if effect == EFFECT_SPEED:
            effects.speed_until = deadline
            self._reschedule_tick()
        else:
            effects.double_until = deadline
        self._effect_timers[effect] = self.scheduler.call_later(
            duration, lambda: self._expire_effect(effect), f"{effect}-expiry")

    def _expire_effect(self, effect):
        effects = self.state.effects
        self._effect_timers.pop(effect, None)
        if effect == EFFECT_SPEED:
            effects.speed = False
            effects.speed_until = None
            self._reschedule_tick()
        else:
            effects.double = False
            effects.double_until = None
        logger.debug("Effect %s expired", effect)

    def _show_level_banner(self):
        self._cancel(self._banner_timer)
        self.state.level_banner = True

        def hide():
            self.state.level_banner = False
            self._banner_timer = None

        self._banner_timer = self.scheduler.call_later(LEVEL_UP_BANNER_TIME, hide, "level-banner")

    def _announce(self, achievements):
        for achievement in achievements:
            logger.info("Achievement unlocked: %s", achievement.name)
            self.state.toasts.append(achievement)
            self._toast_timers.append(self.scheduler.call_later(
                ACHIEVEMENT_TOAST_TIME,
                lambda a=achievement: self._dismiss_toast(a),
                "achievement-toast"))
        self.sound("achievement")
        if self.storage is not None:
            self.storage.save_achievements(self.state.unlocked)

    def _dismiss_toast(self, achievement):
        self._toast_timers = [t for t in self._toast_timers if not t.cancelled]
        if achievement in self.state.toasts:
            self.state.toasts.remove(achievement)

    # -- timer callbacks ------------------------------------------------

    def _on_tick(self):
        self.step()

    def _on_countdown(self):
        state = self.state
        if state.session is not Session.RUNNING or state.food is None:
            return
        if state.food.tick_countdown():
            logger.debug("%s food expired, replacing", state.food.kind)
            state.food = spawn_food(state.snake.body, self.rng, kind=BASE_FOOD,
                                    width=state.width, height=state.height)
            self._restart_countdown()

    def _on_pulse(self):
        self.state.pulse_frame = (self.state.pulse_frame + 1) % PULSE_FRAMES
