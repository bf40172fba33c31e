"""Numeric literal scanner mixin."""

from collections.abc import Callable

from calclex.lexer.charsets import DECIMAL_POINT, DIGITS, EXPONENT_MARKERS, MINUS
from calclex.tokens import Token, TokenType


def _is_minus(char: str) -> bool:
    return char == MINUS


def _is_digit(char: str) -> bool:
    return char in DIGITS


def _is_decimal_point(char: str) -> bool:
    return char == DECIMAL_POINT


def _is_exponent_marker(char: str) -> bool:
    return char in EXPONENT_MARKERS


class NumberScannerMixin:
    """Mixin providing the decimal scan.

    Grammar (every part optional, matched greedily, never backtracked)::

        number := '-'? digit* ('.' digit*)? ([eE] digit*)?

    The exponent marker switches the result from DECIMAL to EXP. The
    lexeme is kept verbatim; no numeric value is computed. A lone ``-``
    therefore yields ``DECIMAL('-')``, and ``1e-5`` stops after ``1e``
    because the exponent takes no sign.

    """

    # These will be set by the Lexer class
    _pos: int

    def _accept(self, predicate: Callable[[str], bool]) -> bool:
        """Consume one matching character into the buffer. Implemented by Lexer."""
        raise NotImplementedError

    def _accept_run(self, predicate: Callable[[str], bool]) -> None:
        """Consume a maximal run of matching characters. Implemented by Lexer."""
        raise NotImplementedError

    def _finish_operand(self, token_type: TokenType, start_pos: int) -> Token:
        """Commit the buffer as an operand token. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_number(self) -> Token:
        """Scan a numeric literal starting at the current character.

        Returns:
            DECIMAL or EXP token carrying the exact consumed text.
        """
        start = self._pos
        self._accept(_is_minus)
        self._accept_run(_is_digit)
        if self._accept(_is_decimal_point):
            self._accept_run(_is_digit)

        token_type = TokenType.DECIMAL
        if self._accept(_is_exponent_marker):
            self._accept_run(_is_digit)
            token_type = TokenType.EXP

        return self._finish_operand(token_type, start)
