"""
Input source interface.

A source turns some backend's raw events into KeyEvent models. The
keyboard source reads pygame; tests script their own.
"""
from abc import ABC, abstractmethod
from typing import List

from mathdef.games.input.key_event import KeyEvent


class InputSource(ABC):
    """Backend that buffers key presses between polls."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Pull raw events from the backend into the buffer.

        Args:
            dt: Seconds since the previous update
        """
        pass

    @abstractmethod
    def poll_events(self) -> List[KeyEvent]:
        """Return and forget every key press buffered so far, oldest first."""
        pass

    def clear(self) -> None:
        """Drop buffered key presses."""
        self.poll_events()
