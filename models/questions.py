"""
Arithmetic question models.

Operator applies itself to two operands directly; questions are never
produced by evaluating a string.
"""
import operator as _op
from decimal import Decimal
from enum import Enum
from typing import Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, computed_field, field_validator, model_validator

from mathdef.errors import ConfigurationError

Number = Union[int, float]


class Operator(str, Enum):
    """Arithmetic operators, valued by their infix symbol."""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def symbol(self) -> str:
        return self.value

    def apply(self, first: int, second: int) -> Number:
        """Evaluate `first <op> second`. Division is true division."""
        return _FUNCTIONS[self](first, second)


_FUNCTIONS = {
    Operator.ADD: _op.add,
    Operator.SUBTRACT: _op.sub,
    Operator.MULTIPLY: _op.mul,
    Operator.DIVIDE: _op.truediv,
}


def format_answer(value: Number) -> str:
    """Canonical decimal text for an answer.

    Integral values have no fractional part ("7", not "7.0"). Other
    floats use the shortest digits that round-trip, always written
    positionally so tiny quotients stay typeable ("0.00005", not "5e-05").

    Examples:
        >>> format_answer(4.0)
        '4'
        >>> format_answer(2.5)
        '2.5'
        >>> format_answer(1 / 20000)
        '0.00005'
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, float):
        return format(Decimal(repr(value)), 'f')
    return str(value)


class Question(BaseModel):
    """A generated question and its answer.

    Attributes:
        text: Infix expression shown to the player, e.g. "3+4"
        answer: Exact result of the expression
    """
    text: str
    answer: Number

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def answer_text(self) -> str:
        """The answer as the player is expected to type it."""
        return format_answer(self.answer)

    def __str__(self) -> str:
        return f"Question({self.text} = {self.answer_text})"


class QuestionConfig(BaseModel):
    """Settings for question generation.

    Attributes:
        max_operand: Upper bound (inclusive) for random operands
        operators: Operators to choose from, uniformly
        allow_negative_results: Allow subtraction to go below zero
        whole_numbers_only: Division questions always divide exactly
    """
    model_config = ConfigDict(frozen=True, validate_default=True)

    max_operand: int = Field(default=10, ge=0)
    operators: Tuple[Operator, ...] = Field(default=(Operator.ADD, Operator.SUBTRACT), min_length=1)
    allow_negative_results: bool = False
    whole_numbers_only: bool = True

    @field_validator('operators')
    @classmethod
    def dedupe_operators(cls, v: Tuple[Operator, ...]) -> Tuple[Operator, ...]:
        """Collapse repeated operators, keeping first-seen order."""
        return tuple(dict.fromkeys(v))

    @model_validator(mode='after')
    def validate_division_bounds(self) -> 'QuestionConfig':
        """Division needs a non-zero divisor to draw from."""
        if Operator.DIVIDE in self.operators and self.max_operand < 1:
            raise ValueError("max_operand must be at least 1 when division is enabled")
        return self

    @classmethod
    def from_settings(cls, **settings) -> 'QuestionConfig':
        """Build a config, reporting bad settings as ConfigurationError.

        Raises:
            ConfigurationError: If any setting is invalid
        """
        try:
            return cls(**settings)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid question settings: {e}") from e
