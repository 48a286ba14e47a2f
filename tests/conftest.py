import os
import random

import pytest

# Rendering tests need pygame without a real display.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from snake_game.highscore import HighScoreStore
from snake_game.session import Session


@pytest.fixture
def store(tmp_path):
    return HighScoreStore(tmp_path / "highscore.txt")


@pytest.fixture
def session(store):
    return Session(store, rng=random.Random(1234))
