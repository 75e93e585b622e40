"""
Canvas - the drawing surface games render onto.

Games only need a handful of primitives: clear the field, stroke a
polyline, stroke an arc and draw a line of text. Canvas captures that
contract so game code can be rendered by pygame or recorded in tests.
"""
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Sequence, Tuple

import pygame

from models import Vector2D

RGB = Tuple[int, int, int]

# Text anchors: which point of the rendered text sits on `position`.
# Position is the text baseline, matching how HUD layouts are measured.
_ALIGN_ANCHORS = {
    'left': 'bottomleft',
    'center': 'midbottom',
    'right': 'bottomright',
}


class Canvas(ABC):
    """Abstract 2D drawing surface.

    Coordinates are screen pixels with y growing downward. Arc angles are
    radians, measured counter-clockwise from the positive x axis as seen
    on screen (pygame convention).
    """

    @property
    @abstractmethod
    def size(self) -> Tuple[int, int]:
        """Surface (width, height) in pixels."""
        pass

    @abstractmethod
    def clear(self, color: RGB) -> None:
        """Fill the whole surface with color."""
        pass

    @abstractmethod
    def stroke_lines(self, points: Sequence[Vector2D], color: RGB, width: int = 1) -> None:
        """Stroke an open polyline through points."""
        pass

    @abstractmethod
    def stroke_arc(
        self,
        center: Vector2D,
        radius: float,
        start_angle: float,
        stop_angle: float,
        color: RGB,
        width: int = 1,
    ) -> None:
        """Stroke a circular arc from start_angle to stop_angle."""
        pass

    @abstractmethod
    def draw_text(
        self,
        text: str,
        position: Vector2D,
        color: RGB = (255, 255, 255),
        size: int = 12,
        align: str = 'left',
    ) -> None:
        """Draw a single line of text with its baseline at position."""
        pass


@lru_cache(maxsize=16)
def _load_font(size: int) -> pygame.font.Font:
    return pygame.font.Font(None, size)


def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        # Fonts from an earlier pygame session are unusable
        pygame.font.init()
        _load_font.cache_clear()
    return _load_font(size)


class PygameCanvas(Canvas):
    """Canvas backed by a pygame Surface."""

    def __init__(self, surface: pygame.Surface):
        self._surface = surface

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    @property
    def size(self) -> Tuple[int, int]:
        return self._surface.get_size()

    def clear(self, color: RGB) -> None:
        self._surface.fill(color)

    def stroke_lines(self, points: Sequence[Vector2D], color: RGB, width: int = 1) -> None:
        if len(points) < 2:
            return
        pygame.draw.lines(
            self._surface, color, False,
            [(p.x, p.y) for p in points], width,
        )

    def stroke_arc(
        self,
        center: Vector2D,
        radius: float,
        start_angle: float,
        stop_angle: float,
        color: RGB,
        width: int = 1,
    ) -> None:
        rect = pygame.Rect(
            int(center.x - radius), int(center.y - radius),
            int(radius * 2), int(radius * 2),
        )
        pygame.draw.arc(self._surface, color, rect, start_angle, stop_angle, width)

    def draw_text(
        self,
        text: str,
        position: Vector2D,
        color: RGB = (255, 255, 255),
        size: int = 12,
        align: str = 'left',
    ) -> None:
        if not text:
            return
        # pygame's default font renders smaller than CSS pixel sizes
        rendered = _font(int(size * 1.4)).render(text, True, color)
        anchor = _ALIGN_ANCHORS.get(align, 'bottomleft')
        rect = rendered.get_rect(**{anchor: (int(position.x), int(position.y))})
        self._surface.blit(rendered, rect)
