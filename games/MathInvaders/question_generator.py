"""
MathInvaders - Question generator

Produces random arithmetic questions within configured bounds.
"""
import random
from typing import Optional, Tuple

from models import Operator, Question, QuestionConfig


class QuestionGenerator:
    """Generates arithmetic questions from a QuestionConfig.

    Operand rules:
    - Whole-number division draws the divisor first and makes the dividend
      a multiple of it, so the quotient is always exact.
    - Subtraction without negatives draws the subtrahend no larger than
      the minuend.
    - Everything else draws both operands uniformly from [0, max_operand].

    The divisor is drawn from [1, max_operand] so no question divides by
    zero; QuestionConfig rejects division with max_operand 0.
    """

    def __init__(
        self,
        config: Optional[QuestionConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        """Initialize the generator.

        Args:
            config: Question settings (defaults to QuestionConfig())
            rng: Random source, injectable for reproducible questions
        """
        self.config = config if config is not None else QuestionConfig()
        self._rng = rng if rng is not None else random.Random()

    @property
    def max_operand(self) -> int:
        return self.config.max_operand

    def _number(self, low: int = 0, high: Optional[int] = None) -> int:
        return self._rng.randint(low, self.max_operand if high is None else high)

    def _operator(self) -> Operator:
        return self._rng.choice(self.config.operators)

    def _operands(self, operator: Operator) -> Tuple[int, int]:
        if operator == Operator.DIVIDE:
            second = self._number(low=1)
            if self.config.whole_numbers_only:
                return second * self._number(), second
            return self._number(), second

        if operator == Operator.SUBTRACT and not self.config.allow_negative_results:
            first = self._number()
            return first, self._number(high=first)

        return self._number(), self._number()

    def generate(self) -> Question:
        """Generate a new question.

        Returns:
            Question whose answer is the exact value of its text
        """
        operator = self._operator()
        first, second = self._operands(operator)
        return Question(
            text=f"{first}{operator.symbol}{second}",
            answer=operator.apply(first, second),
        )
