"""Token, TokenType and Op definitions for the calclex lexer.

The lexer produces a stream of Token objects. Each Token has a type,
the lexeme it was built from, and its source coordinates.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType and Op are enums (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

from calclex.errors import ErrorKind

if TYPE_CHECKING:
    from calclex.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer.

    The set is closed: consumers match on it exhaustively.

    """

    # Operands
    IDENT = auto()  # foo_1
    DECIMAL = auto()  # -20, 20.0
    EXP = auto()  # 0.5E10

    # Punctuation
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    ASSIGN = auto()  # :=

    # Binary operators (see Token.op)
    OPERATOR = auto()

    # Lexical failure (see Token.error)
    ERROR = auto()


class Op(Enum):
    """Binary operators, valued by their source symbol."""

    PLUS = "+"
    MINUS = "-"
    MULT = "*"
    DIV = "/"

    @property
    def symbol(self) -> str:
        return self.value


# Token types that leave the lexer expecting a binary operator next
OPERAND_TYPES: frozenset[TokenType] = frozenset(
    {TokenType.IDENT, TokenType.DECIMAL, TokenType.EXP, TokenType.RIGHT_PAREN}
)

# Token types whose value is the verbatim lexeme
LEXEME_TYPES: frozenset[TokenType] = frozenset(
    {TokenType.IDENT, TokenType.DECIMAL, TokenType.EXP}
)


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: The raw source text. For ERROR this is the offending
            character (the colon for an incomplete ``:=``).
        _lineno: Start line number (1-indexed)
        _col: Start column offset (1-indexed)
        _start_offset: Absolute start position in source. For ERROR this
            is the reported error position.
        _end_offset: Absolute end position in source (exclusive)
        op: Operator kind, set only for OPERATOR tokens
        error: Error kind, set only for ERROR tokens
        _source_file: Optional source file path

    """

    type: TokenType
    value: str
    _lineno: int
    _col: int
    _start_offset: int
    _end_offset: int
    op: Op | None = None
    error: ErrorKind | None = None
    _source_file: str | None = None
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from calclex.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            end_lineno=self._lineno,
            end_col_offset=self._col + (self._end_offset - self._start_offset),
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.type is TokenType.ERROR and self.error is not None:
            return f"Token(ERROR, {self.error.message!r}, @{self._start_offset})"
        if self.type is TokenType.OPERATOR and self.op is not None:
            return f"Token(OPERATOR, {self.op.name}, {self._lineno}:{self._col})"
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self._lineno}:{self._col})"

    @property
    def pos(self) -> int:
        """Start offset; for ERROR tokens the reported error position."""
        return self._start_offset

    @property
    def end(self) -> int:
        return self._end_offset

    @property
    def message(self) -> str | None:
        """Human-readable error message (ERROR tokens only)."""
        return self.error.message if self.error is not None else None

    @property
    def is_error(self) -> bool:
        return self.type is TokenType.ERROR

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col
