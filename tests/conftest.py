import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from gridsnake.engine import Game  # noqa: E402
from gridsnake.scheduler import Scheduler  # noqa: E402
from gridsnake.storage import Storage  # noqa: E402


class FakeClock:
    def __init__(self, start=0.0):
        self.t = start

    def __call__(self):
        return self.t

    def advance(self, seconds):
        self.t += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    return Scheduler(clock=clock)


@pytest.fixture
def storage(tmp_path):
    return Storage(data_dir=str(tmp_path))


@pytest.fixture
def sounds():
    return []


@pytest.fixture
def game(scheduler, storage, sounds):
    g = Game(scheduler=scheduler, storage=storage, rng=random.Random(1234),
             play_sound=sounds.append)
    yield g
    g.close()
