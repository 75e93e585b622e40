"""
MathInvaders - Typed answer buffer
"""
from mathdef.games.canvas import Canvas
from models import Vector2D
from games.MathInvaders import config


class UserInput:
    """Accumulates typed characters until the answer is submitted."""

    def __init__(self, position: Vector2D):
        self.position = position
        self._text = ""

    @property
    def text(self) -> str:
        return self._text

    def add(self, text: str) -> None:
        self._text += text

    def clear(self, all_text: bool = False) -> None:
        """Remove the last character, or everything when all_text=True."""
        if all_text:
            self._text = ""
        else:
            self._text = self._text[:-1]

    def draw(self, canvas: Canvas) -> None:
        canvas.draw_text(
            self._text, self.position,
            color=config.HUD_COLOR, size=config.HUD_TEXT_SIZE, align='center',
        )
