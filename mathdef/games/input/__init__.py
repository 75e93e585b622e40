"""
Input abstraction layer for Math Invaders games.

Keyboard presses are converted to KeyEvent models so game logic never
touches pygame events directly.
"""

from mathdef.games.input.key_event import KeyEvent, MODIFIER_KEYS
from mathdef.games.input.input_manager import InputManager

__all__ = ['KeyEvent', 'MODIFIER_KEYS', 'InputManager']
