import pygame
import pytest

from gridsnake import audio
from gridsnake.audio import SoundBoard


@pytest.fixture
def no_mixer(monkeypatch):
    def fail():
        raise pygame.error("no audio device")

    monkeypatch.setattr(pygame.mixer, "get_init", lambda: None)
    monkeypatch.setattr(pygame.mixer, "init", fail)


class BrokenSound:
    def __init__(self):
        self.stopped = False

    def stop(self):
        self.stopped = True

    def play(self):
        raise pygame.error("channel lost")


def test_mixer_failure_leaves_board_silent(no_mixer):
    board = SoundBoard()
    assert board.sounds == {}
    assert board.play("eat") is None


def test_sound_factory_failure_leaves_board_silent(monkeypatch):
    def fail():
        raise ValueError("bad sample format")

    monkeypatch.setattr(pygame.mixer, "get_init", lambda: (44100, -16, 2))
    monkeypatch.setattr(audio, "SOUND_SPECS", {"eat": fail})
    assert SoundBoard().sounds == {}


def test_play_swallows_playback_errors(no_mixer):
    board = SoundBoard()
    sound = BrokenSound()
    board.sounds = {"eat": sound}
    board.play("eat")
    assert sound.stopped


def test_unknown_sound_is_ignored(no_mixer):
    board = SoundBoard()
    board.sounds = {"eat": BrokenSound()}
    board.play("missing")
