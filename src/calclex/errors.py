"""Exception classes and lexical error kinds for calclex.

Lexical errors are ordinary ERROR tokens in the token stream; the lexer
itself never raises. ``LexError`` exists for callers that want an
exception instead (strict draining, see ``LexConfig.strict``).
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from calclex.tokens import Token


class ErrorKind(Enum):
    """Kinds of lexical failure, valued by their reported message."""

    # ':' not followed by '='
    UNKNOWN_SYMBOL = "Unknown symbol"
    # Character that does not begin any token
    UNKNOWN_TOKEN = "Unknown token"

    @property
    def message(self) -> str:
        return self.value


class CalclexError(Exception):
    """Base exception for all calclex errors.

    Subclass this for specific error categories.
    """

    pass


class LexError(CalclexError):
    """Lexical error surfaced as an exception.

    Raised by strict draining when the lexer produces an ERROR token.
    """

    def __init__(
        self,
        message: str,
        pos: int,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize lex error with its position.

        Args:
            message: Error description (e.g. "Unknown token")
            pos: 0-based character offset reported by the lexer
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.pos = pos
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message} at position {pos}")

    @classmethod
    def from_token(cls, token: Token) -> LexError:
        """Build a LexError from an ERROR token.

        Raises:
            ValueError: If the token is not an ERROR token.
        """
        if token.error is None:
            raise ValueError(f"not an error token: {token!r}")
        return cls(
            token.error.message,
            token.pos,
            lineno=token.lineno,
            col_offset=token.col,
            source_file=token.location.source_file,
        )
