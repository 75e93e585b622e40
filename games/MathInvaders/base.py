"""
MathInvaders - Base class

The defended base at the bottom centre of the field.
"""
import math

from mathdef.games.canvas import Canvas
from models import Vector2D
from games.MathInvaders import config

BASE_RADIUS = 40
SHIELD_RADIUS = 45
SHIELD_SPACING = 8


class Base:
    """Stationary base with a shield counter.

    Each landed ship knocks off one shield; the counter never goes
    below zero.
    """

    def __init__(self, position: Vector2D, shields: int = config.DEFAULT_SHIELDS):
        self.position = position
        self.shields = shields

    def add_shield(self, shields: int = 1) -> None:
        self.shields += shields

    def remove_shield(self, shields: int = 1) -> None:
        self.shields = max(0, self.shields - shields)

    def draw(self, canvas: Canvas) -> None:
        """Draw the dome and one concentric arc per shield."""
        canvas.stroke_arc(self.position, BASE_RADIUS, 0, math.pi, config.BASE_COLOR)

        for shield_id in range(self.shields):
            canvas.stroke_arc(
                self.position,
                SHIELD_RADIUS + (shield_id + 1) * SHIELD_SPACING,
                0.1 * math.pi,
                0.9 * math.pi,
                config.SHIELD_COLOR,
            )
