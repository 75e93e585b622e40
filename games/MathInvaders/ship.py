"""
MathInvaders - Ship class

A falling ship carrying one arithmetic question. Ships live in a fixed
pool and are recycled: killed ships wait, invisible, until respawned.
"""
from typing import Optional

from mathdef.games.canvas import Canvas
from models import Question, Vector2D
from games.MathInvaders import config


class Ship:
    """A ship that falls straight down while alive.

    The position is the ship's nose, the lowest point of its hull.
    Dead ships are neither updated nor rendered and keep their last
    position until the next spawn.
    """

    def __init__(self):
        self.position = Vector2D(x=0.0, y=0.0)
        self.size = config.SHIP_SIZE_FACTOR
        self.speed = 1.0
        self.question: Optional[Question] = None
        self.text_color = config.SHIP_TEXT_COLOR
        self.dead = True

        self._spawn_position = self.position
        self._ticks = 0

    @property
    def alive(self) -> bool:
        return not self.dead

    @property
    def answer_text(self) -> str:
        """Expected answer as typed text, empty if no question."""
        return self.question.answer_text if self.question else ""

    def set_speed(self, speed: float) -> None:
        """Set the speed factor, never below 1.0."""
        self.speed = max(1.0, speed)

    def spawn(self, question: Question, position: Vector2D, speed: float) -> None:
        """Bring the ship to life with a new question.

        Args:
            question: Question shown above the ship
            position: Starting nose position
            speed: Speed factor (clamped to at least 1.0)
        """
        self.question = question
        self.position = position
        self.set_speed(speed)
        self._spawn_position = position
        self._ticks = 0
        self.dead = False

    def kill(self) -> None:
        """Mark the ship dead. Calling it again has no effect."""
        self.dead = True

    def update(self) -> None:
        """Move down one frame's worth. No-op while dead."""
        if self.dead:
            return

        self._ticks += 1
        # Computed from the spawn point so repeated frames never drift
        self.position = Vector2D(
            x=self._spawn_position.x,
            y=self._spawn_position.y + self._ticks * config.SHIP_BASE_SPEED * self.speed,
        )

    def matches_answer(self, text: str) -> bool:
        """Check whether typed text is this ship's answer."""
        if self.dead or self.question is None:
            return False
        return text == self.question.answer_text

    def draw(self, canvas: Canvas) -> None:
        """Draw the hull and the question above it."""
        if self.dead:
            return

        half_width = config.SHIP_SIZE_X / 2 * self.size
        height = config.SHIP_SIZE_Y * self.size
        nose = self.position
        canvas.stroke_lines(
            [
                nose,
                nose.offset(dx=-half_width, dy=-height),
                nose.offset(dx=half_width, dy=-height),
                nose,
            ],
            config.SHIP_COLOR,
            width=2,
        )

        if self.question is not None:
            canvas.draw_text(
                self.question.text,
                nose.offset(dy=-height - 8),
                color=self.text_color,
                size=config.SHIP_TEXT_SIZE,
                align='center',
            )

    def __repr__(self) -> str:
        state = "dead" if self.dead else "alive"
        return f"Ship({state}, {self.question}, y={self.position.y:.1f})"
