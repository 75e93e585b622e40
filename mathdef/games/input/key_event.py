"""
Key Event - Represents a single key press.

Uses Pydantic for validation and immutability.
"""
from pydantic import BaseModel, ConfigDict, field_validator

ENTER = 'Enter'
BACKSPACE = 'Backspace'
ESCAPE = 'Escape'
SHIFT = 'Shift'
CONTROL = 'Control'
ALT = 'Alt'

MODIFIER_KEYS = frozenset({SHIFT, CONTROL, ALT})
NAMED_KEYS = frozenset({ENTER, BACKSPACE, ESCAPE}) | MODIFIER_KEYS


class KeyEvent(BaseModel):
    """Immutable key press from any source.

    Attributes:
        key: Key identity - a printable character, or one of
            Enter, Backspace, Escape, Shift, Control, Alt
        timestamp: Time when the key was pressed (seconds, monotonic clock)
    """
    key: str
    timestamp: float = 0.0

    model_config = ConfigDict(frozen=True)

    @field_validator('key')
    @classmethod
    def validate_key(cls, v: str) -> str:
        """Key must be a named key or a single character."""
        if v not in NAMED_KEYS and len(v) != 1:
            raise ValueError(f'Key must be a named key or a single character, got {v!r}')
        return v

    @field_validator('timestamp')
    @classmethod
    def validate_timestamp(cls, v: float) -> float:
        """Validate timestamp is non-negative."""
        if v < 0:
            raise ValueError(f'Timestamp must be non-negative, got {v}')
        return v

    @property
    def is_modifier(self) -> bool:
        return self.key in MODIFIER_KEYS

    def __str__(self) -> str:
        return f"KeyEvent(key={self.key!r}, t={self.timestamp:.3f})"
