"""
MathInvaders - Validated game settings.

Values default to the .env-driven constants in config.py; anything
passed explicitly (CLI, tests) overrides them.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mathdef.errors import ConfigurationError
from models import QuestionConfig
from games.MathInvaders import config


class GameSettings(BaseModel):
    """Field, pool and pacing settings for one game.

    Attributes:
        width: Field width in pixels
        height: Field height in pixels; ships landing here breach the base
        pool_size: Number of ship slots (max simultaneous ships)
        lives: Starting lives
        shields: Starting base shields
        spawn_interval: Milliseconds between spawn attempts
        speedup_score: Score step that raises ship speed
        speedup_factor: Speed added per score step
        beam_life: Frames a beam stays visible
    """
    model_config = ConfigDict(frozen=True, validate_default=True)

    width: int = Field(default=config.SCREEN_WIDTH, gt=0)
    height: int = Field(default=config.SCREEN_HEIGHT, gt=0)
    pool_size: int = Field(default=config.SHIP_POOL_SIZE, ge=1)
    lives: int = Field(default=config.DEFAULT_LIVES, ge=1)
    shields: int = Field(default=config.DEFAULT_SHIELDS, ge=0)
    spawn_interval: float = Field(default=config.SPAWN_INTERVAL_MS, gt=0)
    speedup_score: float = Field(default=config.SPEEDUP_SCORE, gt=0)
    speedup_factor: float = Field(default=config.SPEEDUP_FACTOR, gt=0)
    beam_life: int = Field(default=config.BEAM_LIFE, ge=1)

    @classmethod
    def from_settings(cls, **settings) -> 'GameSettings':
        """Build settings, skipping None values and reporting errors as ConfigurationError.

        Raises:
            ConfigurationError: If any setting is invalid
        """
        values = {key: value for key, value in settings.items() if value is not None}
        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid game settings: {e}") from e


def parse_operators(text: str) -> List[str]:
    """Split an operator string such as "+-*/" or "+, -" into symbols.

    Examples:
        >>> parse_operators("+-*")
        ['+', '-', '*']
        >>> parse_operators("+, /")
        ['+', '/']
    """
    return [char for char in text if not char.isspace() and char != ',']


def question_config_from_args(
    max_number: Optional[int] = None,
    operators: Optional[str] = None,
    allow_negative: Optional[bool] = None,
    fractions: Optional[bool] = None,
) -> QuestionConfig:
    """Build a QuestionConfig from CLI-style options, falling back to config.py.

    Raises:
        ConfigurationError: If the resulting settings are invalid
    """
    symbols = parse_operators(operators) if operators is not None else config.DEFAULT_OPERATORS
    return QuestionConfig.from_settings(
        max_operand=max_number if max_number is not None else config.DEFAULT_MAX_OPERAND,
        operators=symbols,
        allow_negative_results=(
            allow_negative if allow_negative is not None else config.ALLOW_NEGATIVE_RESULTS
        ),
        whole_numbers_only=not fractions if fractions is not None else config.WHOLE_NUMBERS_ONLY,
    )
