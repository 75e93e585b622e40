"""
Math Invaders game framework.

Provides:
- game_state: Standard GameState enum
- base_game: BaseGame class that games inherit from
- canvas: Drawing surface abstraction and its pygame implementation
- input: Keyboard event handling
"""

from mathdef.games.game_state import GameState
from mathdef.games.base_game import BaseGame
from mathdef.games.canvas import Canvas, PygameCanvas

__all__ = [
    'GameState',
    'BaseGame',
    'Canvas',
    'PygameCanvas',
]
