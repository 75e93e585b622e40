"""
MathInvaders - Score board

Tracks score and remaining lives and draws them in the corner.
"""
from mathdef.games.canvas import Canvas
from models import Vector2D
from games.MathInvaders import config


class ScoreBoard:
    """Score and lives counter.

    Lives are not clamped: game over is `lives <= 0`, so the counter may
    briefly go negative if several ships land in the same frame.
    """

    def __init__(
        self,
        position: Vector2D = Vector2D(x=0.0, y=0.0),
        lives: int = config.DEFAULT_LIVES,
        starting_score: int = 0,
    ):
        self.position = position
        self.score = starting_score
        self.lives = lives

    def damage(self, lives: int = 1) -> None:
        """Remove lives from the counter."""
        self.lives -= lives

    def add_score(self, score: int = config.DEFAULT_HIT_POINTS) -> None:
        self.score += score

    def draw(self, canvas: Canvas) -> None:
        canvas.draw_text(
            f"Score: {self.score}", self.position,
            color=config.HUD_COLOR, size=config.HUD_TEXT_SIZE,
        )
        canvas.draw_text(
            f"Lives: {self.lives}", self.position.offset(dy=30),
            color=config.HUD_COLOR, size=config.HUD_TEXT_SIZE,
        )
