"""Base class for keyboard-driven games.

A game declares its metadata and launcher options as class attributes,
so main() can build an argument parser and print --help before any
game object (or pygame window) exists.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from mathdef.games.canvas import Canvas
from mathdef.games.game_state import GameState
from mathdef.games.input.key_event import KeyEvent

# argparse option as a dict: name plus any of type, default, help,
# choices, action
ArgumentSpec = Dict[str, Any]


class BaseGame(ABC):
    """A game the launcher can configure, drive and draw.

    Subclasses fill in NAME, DESCRIPTION, VERSION, AUTHOR and their own
    ARGUMENTS, and implement the four abstract members below. Time is
    not part of this interface; games schedule themselves on the
    FrameScheduler they are given.
    """

    NAME: str = "Unnamed Game"
    DESCRIPTION: str = "No description"
    VERSION: str = "1.0.0"
    AUTHOR: str = "Unknown"

    ARGUMENTS: List[ArgumentSpec] = []

    # Launcher options every game gets
    _COMMON_ARGUMENTS: List[ArgumentSpec] = [
        {
            'name': '--resolution',
            'type': str,
            'default': '800x600',
            'help': 'Window resolution as WIDTHxHEIGHT'
        },
        {
            'name': '--log-level',
            'type': str,
            'default': None,
            'choices': ['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'OFF'],
            'help': 'Default log level (overrides MATHDEF_LOG_LEVEL)'
        },
    ]

    @classmethod
    def get_arguments(cls) -> List[ArgumentSpec]:
        """The game's own options followed by the common ones.

        When both define the same option name the game's definition wins.
        """
        merged: Dict[str, ArgumentSpec] = {}
        for spec in cls.ARGUMENTS + cls._COMMON_ARGUMENTS:
            merged.setdefault(spec['name'], spec)
        return list(merged.values())

    @classmethod
    def get_info(cls) -> Dict[str, Any]:
        """Metadata for listings and --help output."""
        return {
            'name': cls.NAME,
            'description': cls.DESCRIPTION,
            'version': cls.VERSION,
            'author': cls.AUTHOR,
            'arguments': cls.get_arguments(),
        }

    @property
    @abstractmethod
    def state(self) -> GameState:
        pass

    @abstractmethod
    def get_score(self) -> int:
        pass

    @abstractmethod
    def handle_input(self, events: List[KeyEvent]) -> None:
        """Apply key presses in the order they arrived."""
        pass

    @abstractmethod
    def render(self, canvas: Canvas) -> None:
        """Draw the current frame onto canvas."""
        pass
