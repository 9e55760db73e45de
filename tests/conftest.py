import os

# pygame sem janela/som de verdade durante os testes
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from brickbreaker.app import State
from brickbreaker.canvas import Canvas
from brickbreaker.game_state import GameState
from brickbreaker.vec2 import Vec2


@pytest.fixture
def state():
    return GameState(Vec2.xy(80, 30))


@pytest.fixture
def canvas():
    return Canvas(Vec2.xy(110, 30))


@pytest.fixture
def app_state():
    return State()
