"""
Keyboard Input Source - Typed keys from the pygame event queue.
"""
import time
from typing import List, Optional

import pygame

from mathdef.games.input import key_event
from mathdef.games.input.key_event import KeyEvent
from mathdef.games.input.sources.base import InputSource

_NAMED_KEYS = {
    pygame.K_RETURN: key_event.ENTER,
    pygame.K_KP_ENTER: key_event.ENTER,
    pygame.K_BACKSPACE: key_event.BACKSPACE,
    pygame.K_ESCAPE: key_event.ESCAPE,
    pygame.K_LSHIFT: key_event.SHIFT,
    pygame.K_RSHIFT: key_event.SHIFT,
    pygame.K_LCTRL: key_event.CONTROL,
    pygame.K_RCTRL: key_event.CONTROL,
    pygame.K_LALT: key_event.ALT,
    pygame.K_RALT: key_event.ALT,
}


def key_identity(event: pygame.event.Event) -> Optional[str]:
    """Map a KEYDOWN event to a key identity, or None if it has none.

    Named keys win over the character they produce, so Enter is never
    reported as '\\r'.
    """
    if event.key in _NAMED_KEYS:
        return _NAMED_KEYS[event.key]
    char = getattr(event, 'unicode', '')
    if len(char) == 1 and char.isprintable():
        return char
    return None


class KeyboardInputSource(InputSource):
    """Keyboard input source.

    Converts pygame KEYDOWN events into KeyEvent models.
    Other events are re-posted to the pygame event queue for the main loop.
    """

    def __init__(self):
        self._event_queue: List[KeyEvent] = []

    def poll_events(self) -> List[KeyEvent]:
        """Get new key events since last poll."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self, dt: float) -> None:
        """Process pygame events and collect key presses."""
        passthrough = []
        for event in pygame.event.get():
            if event.type == pygame.KEYDOWN:
                key = key_identity(event)
                if key is not None:
                    self._event_queue.append(KeyEvent(key=key, timestamp=time.monotonic()))
            elif event.type not in (pygame.KEYUP, pygame.TEXTINPUT, pygame.MOUSEMOTION):
                passthrough.append(event)
        # Re-post non-keyboard events for the main loop to handle
        for event in passthrough:
            pygame.event.post(event)

    def clear(self) -> None:
        """Drop buffered key presses and any still waiting in pygame's queue."""
        self._event_queue.clear()
        if pygame.display.get_init():
            pygame.event.clear((pygame.KEYDOWN, pygame.KEYUP, pygame.TEXTINPUT))
