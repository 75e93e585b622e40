"""
Data models shared across the project.

- Primitives: geometric types (Point2D, Vector2D, Resolution)
- Questions: arithmetic question generation settings and results

Usage:
    >>> from models import Vector2D, Question, QuestionConfig
"""

from .primitives import (
    Point2D,
    Vector2D,  # Alias for Point2D
    Resolution,
)
from .questions import (
    Operator,
    Question,
    QuestionConfig,
    format_answer,
)

__all__ = [
    # Primitives
    "Point2D",
    "Vector2D",
    "Resolution",
    # Questions
    "Operator",
    "Question",
    "QuestionConfig",
    "format_answer",
]
