"""
Shared primitive data types for the games.

Basic geometric types used by the framework and every game.
"""

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Point2D(BaseModel):
    """Immutable 2D point/vector for positions and coordinates.

    Screen coordinates: x grows to the right, y grows downward. Values
    can be negative, e.g. ships waiting above the visible field.

    Moving an entity means replacing its point, never mutating it.

    Attributes:
        x: Pixels from the left edge
        y: Pixels from the top edge

    Examples:
        >>> nose = Point2D(x=100.0, y=200.0)
        >>> nose.offset(dy=-30).y
        170.0
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    def offset(self, dx: float = 0.0, dy: float = 0.0) -> 'Point2D':
        """Return a new point shifted by (dx, dy)."""
        return Point2D(x=self.x + dx, y=self.y + dy)

    def __str__(self) -> str:
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


# Alias used by game code
Vector2D = Point2D


class Resolution(BaseModel):
    """Display resolution.

    Attributes:
        width: Window width in pixels, positive
        height: Window height in pixels, positive

    Examples:
        >>> Resolution.parse("800x600").aspect_ratio
        1.3333333333333333
    """
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def aspect_ratio(self) -> float:
        """Width divided by height."""
        return self.width / self.height

    @classmethod
    def parse(cls, text: str) -> 'Resolution':
        """Parse a WIDTHxHEIGHT string such as '1280x720'.

        Raises:
            ValueError: If the text is malformed or a dimension is not positive
        """
        parts = text.lower().split('x')
        if len(parts) != 2:
            raise ValueError(f"Resolution must be WIDTHxHEIGHT, got {text!r}")
        return cls(width=int(parts[0]), height=int(parts[1]))

    def __str__(self) -> str:
        return f"Resolution({self.width}x{self.height})"
