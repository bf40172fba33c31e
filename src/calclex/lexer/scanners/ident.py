"""Identifier scanner mixin."""

from collections.abc import Callable

from calclex.lexer.charsets import is_ident_char
from calclex.tokens import Token, TokenType


class IdentScannerMixin:
    """Mixin providing the identifier scan.

    Dispatch only calls this on a letter or underscore; the run then
    continues over letters, ASCII digits and underscores.

    """

    # These will be set by the Lexer class
    _pos: int

    def _accept_run(self, predicate: Callable[[str], bool]) -> None:
        """Consume a maximal run of matching characters. Implemented by Lexer."""
        raise NotImplementedError

    def _finish_operand(self, token_type: TokenType, start_pos: int) -> Token:
        """Commit the buffer as an operand token. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_ident(self) -> Token:
        """Scan an identifier starting at the current character.

        Returns:
            IDENT token carrying the identifier text.
        """
        start = self._pos
        self._accept_run(is_ident_char)
        return self._finish_operand(TokenType.IDENT, start)
