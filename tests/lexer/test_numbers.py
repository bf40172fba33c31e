"""Tests for numeric literal scanning (DECIMAL and EXP tokens)."""

import pytest

from calclex.lexer import Lexer
from calclex.tokens import TokenType


def lex(source: str) -> list[tuple[TokenType, str]]:
    return [(t.type, t.value) for t in Lexer(source)]


class TestDecimal:
    """Literals without an exponent marker."""

    @pytest.mark.parametrize("source", ["0", "7", "20", "0042", "1234567890"])
    def test_digits_only(self, source: str) -> None:
        assert lex(source) == [(TokenType.DECIMAL, source)]

    def test_negative_at_start(self) -> None:
        """A leading '-' at stream start is a sign, not an operator."""
        assert lex("-20") == [(TokenType.DECIMAL, "-20")]

    def test_fraction(self) -> None:
        assert lex("20.0") == [(TokenType.DECIMAL, "20.0")]

    def test_negative_fraction(self) -> None:
        assert lex("-3.25") == [(TokenType.DECIMAL, "-3.25")]

    def test_trailing_point(self) -> None:
        """Fraction digits are optional after the point."""
        assert lex("5.") == [(TokenType.DECIMAL, "5.")]

    def test_no_normalization(self) -> None:
        """Lexemes are kept verbatim, leading zeros included."""
        assert lex("007.500") == [(TokenType.DECIMAL, "007.500")]

    def test_second_point_ends_literal(self) -> None:
        tokens = list(Lexer("1.2.3"))
        assert tokens[0].type == TokenType.DECIMAL
        assert tokens[0].value == "1.2"
        # '.' cannot start a token
        assert tokens[1].type == TokenType.ERROR
        assert tokens[1].pos == 3


class TestExp:
    """Literals carrying an e/E marker."""

    @pytest.mark.parametrize("source", ["0.5E10", "5E2", "5e2", "-1.5e3", "10e0"])
    def test_exponent_literal(self, source: str) -> None:
        assert lex(source) == [(TokenType.EXP, source)]

    def test_marker_without_digits(self) -> None:
        assert lex("5e") == [(TokenType.EXP, "5e")]

    def test_exponent_takes_no_sign(self) -> None:
        """After 1e the '-' follows an operand, so it is the minus operator."""
        tokens = list(Lexer("1e-5"))
        assert [(t.type, t.value) for t in tokens] == [
            (TokenType.EXP, "1e"),
            (TokenType.OPERATOR, "-"),
            (TokenType.DECIMAL, "5"),
        ]

    def test_letters_after_exponent_start_identifier(self) -> None:
        assert lex("5e3x") == [(TokenType.EXP, "5e3"), (TokenType.IDENT, "x")]


class TestNumberBoundaries:
    """Where a literal stops."""

    def test_letters_after_digits(self) -> None:
        assert lex("5abc") == [(TokenType.DECIMAL, "5"), (TokenType.IDENT, "abc")]

    def test_paren_after_digits(self) -> None:
        assert lex("12)") == [(TokenType.DECIMAL, "12"), (TokenType.RIGHT_PAREN, ")")]

    def test_non_ascii_digits_not_numbers(self) -> None:
        """Only ASCII digits start a literal."""
        tokens = list(Lexer("٣"))  # ARABIC-INDIC DIGIT THREE
        assert tokens[0].type == TokenType.ERROR


class TestLoneMinus:
    """A '-' with no digits is captured as a degenerate DECIMAL."""

    def test_lone_minus(self) -> None:
        assert lex("-") == [(TokenType.DECIMAL, "-")]

    def test_minus_before_identifier(self) -> None:
        assert lex("-x") == [(TokenType.DECIMAL, "-"), (TokenType.IDENT, "x")]

    def test_minus_before_paren(self) -> None:
        assert lex("-(") == [(TokenType.DECIMAL, "-"), (TokenType.LEFT_PAREN, "(")]

    def test_double_minus(self) -> None:
        """The first '-' is a degenerate literal, so the second is an operator."""
        tokens = list(Lexer("--"))
        assert [(t.type, t.value) for t in tokens] == [
            (TokenType.DECIMAL, "-"),
            (TokenType.OPERATOR, "-"),
        ]
