"""Tests for shared models."""
import pytest
from pydantic import ValidationError

from models import Operator, Point2D, Question, Resolution, format_answer


class TestPoint2D:

    def test_offset_returns_new_point(self):
        point = Point2D(x=1.0, y=2.0)
        moved = point.offset(dy=-3)
        assert moved == Point2D(x=1.0, y=-1.0)
        assert point == Point2D(x=1.0, y=2.0)

    def test_immutable(self):
        point = Point2D(x=1.0, y=2.0)
        with pytest.raises(ValidationError):
            point.x = 5.0


class TestResolution:

    def test_parse(self):
        resolution = Resolution.parse("1280x720")
        assert (resolution.width, resolution.height) == (1280, 720)

    def test_parse_uppercase_separator(self):
        assert Resolution.parse("800X600") == Resolution(width=800, height=600)

    @pytest.mark.parametrize('text', ["800", "800x", "x600", "axb", "800x600x2", "0x600"])
    def test_parse_rejects_malformed(self, text):
        with pytest.raises(ValueError):
            Resolution.parse(text)

    def test_aspect_ratio(self):
        assert Resolution(width=800, height=400).aspect_ratio == 2.0


class TestOperator:

    @pytest.mark.parametrize('symbol,first,second,expected', [
        ('+', 3, 4, 7),
        ('-', 3, 4, -1),
        ('*', 3, 4, 12),
        ('/', 3, 4, 0.75),
    ])
    def test_apply(self, symbol, first, second, expected):
        assert Operator(symbol).apply(first, second) == expected

    def test_symbol(self):
        assert Operator.DIVIDE.symbol == '/'


class TestFormatAnswer:

    @pytest.mark.parametrize('value,expected', [
        (7, "7"),
        (-3, "-3"),
        (4.0, "4"),
        (0.25, "0.25"),
        (1 / 3, "0.3333333333333333"),
        (1 / 20000, "0.00005"),
        (3 / 99997, "0.00003000090002700081"),
    ])
    def test_format(self, value, expected):
        assert format_answer(value) == expected

    def test_question_answer_text(self):
        assert Question(text="9/3", answer=3.0).answer_text == "3"

    def test_tiny_quotients_never_use_exponent(self):
        """Any fraction a/b with operands up to 100000 is typeable as a decimal."""
        for second in (7, 99, 20000, 99997, 100000):
            text = format_answer(1 / second)
            assert 'e' not in text
            assert float(text) == 1 / second
