import pygame
import pytest

from gridsnake.config import BOARD_COLOR, CELL_SIZE, GAME_HEIGHT, GAME_WIDTH, GOLD, INFO_PANEL_WIDTH
from gridsnake.food import FOOD_TYPES, Food
from gridsnake.render import Fonts, body_color, cell_center, render
from gridsnake.state import GameState, Session


@pytest.fixture(scope="module")
def fonts():
    pygame.font.init()
    yield Fonts()
    pygame.font.quit()


@pytest.fixture
def surface():
    return pygame.Surface((GAME_WIDTH + INFO_PANEL_WIDTH, GAME_HEIGHT))


def pixel(surface, cell):
    x, y = cell_center(cell)
    return tuple(surface.get_at((int(x), int(y))))[:3]


@pytest.mark.parametrize("session", list(Session))
def test_render_every_session(surface, fonts, session):
    state = GameState(session=session)
    state.food = Food((3, 3), "normal")
    render(surface, state, fonts)


@pytest.mark.parametrize("kind", list(FOOD_TYPES))
def test_render_every_food_shape(surface, fonts, kind):
    state = GameState(session=Session.RUNNING)
    state.food = Food((5, 5), kind, FOOD_TYPES[kind].duration)
    render(surface, state, fonts)
    assert pixel(surface, (5, 5)) != BOARD_COLOR


def test_head_drawn_gold(surface, fonts):
    state = GameState(session=Session.RUNNING)
    state.food = Food((0, 0), "normal")
    render(surface, state, fonts)
    # the eyes sit off-centre, the middle of the head is plain gold
    assert pixel(surface, state.snake.head) == GOLD
    x, y = state.snake.body[1]
    assert tuple(surface.get_at((x * CELL_SIZE + 2, y * CELL_SIZE + 2)))[:3] == tuple(body_color(1))[:3]


def test_render_does_not_mutate_state(surface, fonts):
    state = GameState(session=Session.GAME_OVER, score=12, high_score=12, new_record=True)
    state.food = Food((4, 4), "star", 7)
    state.effects.speed = True
    state.effects.speed_until = 3.0
    state.level_banner = True
    body = list(state.snake.body)
    render(surface, state, fonts, now=1.0)
    assert state.snake.body == body
    assert state.food.time_left == 7
    assert state.new_record


def test_game_over_head_outside_grid(surface, fonts):
    state = GameState(session=Session.GAME_OVER)
    state.snake.body = [(-1, 10), (0, 10), (1, 10)]
    state.snake.heading = "left"
    render(surface, state, fonts)
