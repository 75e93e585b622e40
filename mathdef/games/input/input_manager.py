"""
Input manager - the one place the host loop asks for key presses.
"""
from typing import List, Optional

from mathdef.games.input.key_event import KeyEvent
from mathdef.games.input.sources.base import InputSource


class InputManager:
    """Owns the active InputSource and hands its key presses to the game.

    The source can be swapped at runtime; games only ever see KeyEvent
    lists.
    """

    def __init__(self, source: Optional[InputSource] = None):
        self._source = source

    @property
    def source(self) -> Optional[InputSource]:
        return self._source

    @source.setter
    def source(self, source: Optional[InputSource]) -> None:
        if self._source is not None:
            self._source.clear()
        self._source = source

    def collect(self, dt: float) -> List[KeyEvent]:
        """Update the source and return the key presses it gathered.

        Args:
            dt: Seconds since the previous collect
        """
        if self._source is None:
            return []
        self._source.update(dt)
        return self._source.poll_events()

    def discard(self) -> None:
        """Throw away anything the source has buffered."""
        if self._source is not None:
            self._source.clear()
