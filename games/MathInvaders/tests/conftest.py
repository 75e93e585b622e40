"""Pytest fixtures for Math Invaders tests."""
import random
from typing import Any, List, Tuple

import pytest

from mathdef.games.canvas import Canvas
from mathdef.scheduling import FrameScheduler
from models import QuestionConfig
from games.MathInvaders.game_mode import MathInvadersMode


class RecordingCanvas(Canvas):
    """Canvas that records every draw call as (method, args) tuples."""

    def __init__(self, width: int = 800, height: int = 600):
        self._size = (width, height)
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []

    @property
    def size(self):
        return self._size

    def clear(self, color):
        self.calls.append(('clear', (color,)))

    def stroke_lines(self, points, color, width=1):
        self.calls.append(('stroke_lines', (tuple(points), color, width)))

    def stroke_arc(self, center, radius, start_angle, stop_angle, color, width=1):
        self.calls.append(('stroke_arc', (center, radius, start_angle, stop_angle, color, width)))

    def draw_text(self, text, position, color=(255, 255, 255), size=12, align='left'):
        self.calls.append(('draw_text', (text, position, color, size, align)))

    def texts(self) -> List[str]:
        return [args[0] for name, args in self.calls if name == 'draw_text']

    def reset(self) -> None:
        self.calls.clear()


@pytest.fixture
def canvas():
    return RecordingCanvas()


@pytest.fixture
def scheduler():
    return FrameScheduler()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def addition_config():
    return QuestionConfig(max_operand=10, operators=('+',))


@pytest.fixture
def game(scheduler, rng, addition_config):
    """An 800x600 game with 3 lives, 10 ships and addition questions."""
    return MathInvadersMode(
        scheduler=scheduler,
        rng=rng,
        question_config=addition_config,
        width=800,
        height=600,
        lives=3,
        pool_size=10,
        spawn_interval=5000,
    )
