"""
MathInvaders - Configuration loader.

Loads settings from .env file with sensible defaults.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


def _get_list(key: str, default: str) -> list:
    """Get comma-separated list from environment."""
    return [item.strip() for item in os.getenv(key, default).split(',') if item.strip()]


# Display
SCREEN_WIDTH = _get_int('SCREEN_WIDTH', 800)
SCREEN_HEIGHT = _get_int('SCREEN_HEIGHT', 600)
FPS = _get_int('FPS', 60)

# Ships
SHIP_POOL_SIZE = _get_int('SHIP_POOL_SIZE', 10)  # max simultaneous ships
SHIP_SIZE_X = 20
SHIP_SIZE_Y = 30
SHIP_SIZE_FACTOR = 1.0
SHIP_BASE_SPEED = _get_float('SHIP_BASE_SPEED', 0.5)  # pixels per frame at speed 1.0
SHIP_SPAWN_Y = -30  # ships enter from just above the field
SPAWN_MARGIN = _get_int('SPAWN_MARGIN', 50)  # keep ships away from the side edges

# Spawning and difficulty
SPAWN_INTERVAL_MS = _get_int('SPAWN_INTERVAL_MS', 5000)
# Speed = round(score / SPEEDUP_SCORE) * SPEEDUP_FACTOR, never below 1.0
SPEEDUP_SCORE = _get_int('SPEEDUP_SCORE', 1000)
SPEEDUP_FACTOR = _get_float('SPEEDUP_FACTOR', 1.1)

# Beams
BEAM_LIFE = _get_int('BEAM_LIFE', 20)  # frames a beam stays visible
BEAM_WIDTH = 3
MISS_TARGET_TOP_BAND = 100  # misses never aim at the bottom 100px

# Base and score
DEFAULT_LIVES = _get_int('DEFAULT_LIVES', 3)
DEFAULT_SHIELDS = _get_int('DEFAULT_SHIELDS', 2)
DEFAULT_HIT_POINTS = 100
SCORE_DIVISOR = 4  # points = round((field height - ship y) / SCORE_DIVISOR)

# Questions
DEFAULT_MAX_OPERAND = _get_int('DEFAULT_MAX_OPERAND', 20)
DEFAULT_OPERATORS = _get_list('DEFAULT_OPERATORS', '+,-')
ALLOW_NEGATIVE_RESULTS = _get_bool('ALLOW_NEGATIVE_RESULTS', False)
WHOLE_NUMBERS_ONLY = _get_bool('WHOLE_NUMBERS_ONLY', True)

# Visual
BACKGROUND_COLOR = (0, 0, 0)
SHIP_COLOR = (255, 255, 255)
SHIP_TEXT_COLOR = (255, 255, 255)
BEAM_COLOR = (255, 0, 0)
BASE_COLOR = (255, 255, 255)
SHIELD_COLOR = (0, 0, 255)
HUD_COLOR = (255, 255, 255)
BANNER_COLOR = (255, 100, 100)
SHIP_TEXT_SIZE = 12
HUD_TEXT_SIZE = 15
BANNER_TEXT_SIZE = 40
