"""
Input source implementations.
"""

from mathdef.games.input.sources.base import InputSource
from mathdef.games.input.sources.keyboard import KeyboardInputSource

__all__ = ['InputSource', 'KeyboardInputSource']
