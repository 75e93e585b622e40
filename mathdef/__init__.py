"""
Math Invaders framework.

Shared plumbing for the games: logging, configuration errors, the frame
scheduler, and the game/canvas/input abstractions under mathdef.games.
"""

from mathdef.errors import ConfigurationError
from mathdef.logging import get_logger

__all__ = ['ConfigurationError', 'get_logger']
