import pygame
import pytest

from gridsnake.app import SnakeGame
from gridsnake.state import Session
from gridsnake.storage import Storage


@pytest.fixture
def app(tmp_path):
    game = SnakeGame(storage=Storage(data_dir=str(tmp_path)))
    yield game
    game.cleanup()


def test_keys_drive_the_session(app):
    state = app.game.state
    app.handle_key(pygame.K_RETURN)
    assert state.session is Session.RUNNING

    app.handle_key(pygame.K_UP)
    assert state.snake.heading == "up"
    app.handle_key(pygame.K_DOWN)
    assert state.snake.heading == "up"

    app.handle_key(pygame.K_SPACE)
    assert state.session is Session.PAUSED
    app.handle_key(pygame.K_p)
    assert state.session is Session.RUNNING


def test_difficulty_and_sound_keys(app):
    app.handle_key(pygame.K_3)
    assert app.game.state.difficulty == "hard"
    app.handle_key(pygame.K_5)
    assert app.game.state.difficulty == "endless"
    app.handle_key(pygame.K_m)
    assert app.game.state.sound_enabled is False


def test_manual_step_key(app):
    app.handle_key(pygame.K_5)
    app.handle_key(pygame.K_RETURN)
    head = app.game.state.snake.head
    app.handle_key(pygame.K_n)
    assert app.game.state.snake.head == (head[0] + 1, head[1])


def test_quit_key_stops_loop(app):
    app.handle_key(pygame.K_ESCAPE)
    assert app.running is False
    # loop exits straight away and cleans up
    app.run()
