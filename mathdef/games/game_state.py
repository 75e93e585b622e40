"""Common GameState enum for Math Invaders games.

Games report one of these values via their `state` property.
"""
from enum import Enum


class GameState(Enum):
    """Standard game states.

    States:
        RUNNING: Frame loop and spawn timer active
        PAUSED: Manually paused; no ticks, no spawns
        OVER: Lives exhausted; terminal
    """
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"
