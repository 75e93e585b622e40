"""
MathInvaders - Beam class

The shot fired from the base when an answer is submitted. Purely
visual: it lasts a fixed number of frames and then disappears.
"""
from mathdef.games.canvas import Canvas
from models import Vector2D
from games.MathInvaders import config


class Beam:
    """A line from the base to its target with a frame countdown."""

    def __init__(self, start: Vector2D, end: Vector2D, life: int = config.BEAM_LIFE):
        self.start = start
        self.end = end
        self.durability = life
        self.active = True

    def update(self) -> None:
        """Count down one frame; deactivate when the countdown runs out."""
        self.durability -= 1

        if self.durability <= 0:
            self.active = False

    def draw(self, canvas: Canvas) -> None:
        if not self.active:
            return
        canvas.stroke_lines([self.start, self.end], config.BEAM_COLOR, width=config.BEAM_WIDTH)

    def __repr__(self) -> str:
        return f"Beam({self.start} -> {self.end}, life={self.durability})"
