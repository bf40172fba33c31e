"""Single-pass, pull-based lexer for the calclex arithmetic language.

Reads characters with one character of lookahead and never rewinds:
every branch either consumes input or ends the stream, so forward
progress is guaranteed even across lexical errors.

Thread Safety:
Lexer instances are single-use. Create one per source.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from itertools import chain

from calclex.config import LexConfig, get_lex_config
from calclex.errors import ErrorKind, LexError
from calclex.lexer.charsets import COLON, DIGITS, EQUALS, MINUS, is_ident_start, is_whitespace
from calclex.lexer.scanners import IdentScannerMixin, NumberScannerMixin
from calclex.tokens import OPERAND_TYPES, Op, Token, TokenType
from calclex.utils.logger import get_logger

logger = get_logger(__name__)

# Single-character tokens that never depend on lexer state
_PUNCTUATION: dict[str, tuple[TokenType, Op | None]] = {
    "(": (TokenType.LEFT_PAREN, None),
    ")": (TokenType.RIGHT_PAREN, None),
    "+": (TokenType.OPERATOR, Op.PLUS),
    "*": (TokenType.OPERATOR, Op.MULT),
    "/": (TokenType.OPERATOR, Op.DIV),
}


class Lexer(
    NumberScannerMixin,
    IdentScannerMixin,
):
    """Pull-based lexer producing one Token per call.

    ``source`` may be a string or any iterable of strings (a generator of
    characters, a text file object yielding lines). Characters are pulled
    lazily, one at a time.

    Usage:
            >>> lexer = Lexer("x := -2 * (y - 3)")
            >>> for token in lexer:
            ...     print(token)
        Token(IDENT, 'x', 1:1)
        Token(ASSIGN, ':=', 1:3)
        Token(DECIMAL, '-2', 1:6)
        Token(OPERATOR, MULT, 1:9)
        Token(LEFT_PAREN, '(', 1:11)
        Token(IDENT, 'y', 1:12)
        Token(OPERATOR, MINUS, 1:14)
        Token(DECIMAL, '3', 1:16)
        Token(RIGHT_PAREN, ')', 1:17)

    The ``_operator_expected`` flag decides whether ``-`` is the binary
    minus operator or the sign of a numeric literal. It is true exactly
    when the last emitted token was an identifier, a number or ``)``.

    Thread Safety:
        Lexer instances are single-use. Create one per source.

    """

    __slots__ = (
        "_chars",
        "_lookahead",  # None until fetched, "" once the source is exhausted
        "_pos",
        "_width",  # Characters consumed for the operand in flight
        "_lineno",
        "_col",
        "_token_lineno",
        "_token_col",
        "_operator_expected",
        "_buffer",
        "_source_file",
    )

    def __init__(
        self,
        source: Iterable[str],
        source_file: str | None = None,
    ) -> None:
        """Initialize lexer positioned at offset 0.

        Args:
            source: Text, or an iterable of text chunks
            source_file: Optional source file path for locations
        """
        self._chars: Iterator[str] = chain.from_iterable(source)
        self._lookahead: str | None = None
        self._pos = 0
        self._width = 0
        self._lineno = 1
        self._col = 1
        self._token_lineno = 1
        self._token_col = 1
        self._operator_expected = False
        self._buffer: list[str] = []
        self._source_file = source_file

    @property
    def pos(self) -> int:
        """Characters consumed so far."""
        return self._pos

    @property
    def operator_expected(self) -> bool:
        return self._operator_expected

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def tokenize(self) -> Iterator[Token]:
        """Drain the lexer under the active LexConfig.

        The config is read when this method is called, not when
        iteration starts.

        Yields:
            Token objects one at a time

        Raises:
            LexError: On the first ERROR token when ``LexConfig.strict`` is set.
        """
        return self._drain(get_lex_config())

    def _drain(self, config: LexConfig) -> Iterator[Token]:
        for token in self:
            if token.type is TokenType.ERROR:
                if config.strict:
                    raise LexError.from_token(token)
                yield token
                if config.stop_on_error:
                    return
                continue
            yield token

    def next_token(self) -> Token | None:
        """Produce the next token.

        Returns:
            The next Token, or None once the source is exhausted.
        """
        self._buffer.clear()

        char = self._skip_whitespace()
        if not char:
            return None

        self._token_lineno = self._lineno
        self._token_col = self._col

        if char in _PUNCTUATION:
            token_type, op = _PUNCTUATION[char]
            self._advance()
            self._pos += 1
            self._operator_expected = token_type in OPERAND_TYPES
            return self._make_token(token_type, char, self._pos - 1, op=op)

        if char == MINUS and self._operator_expected:
            self._advance()
            self._pos += 1
            self._operator_expected = False
            return self._make_token(TokenType.OPERATOR, char, self._pos - 1, op=Op.MINUS)

        if char == MINUS or char in DIGITS:
            return self._scan_number()

        if char == COLON:
            return self._scan_assign()

        if is_ident_start(char):
            return self._scan_ident()

        # Consume the offending character so a caller that keeps pulling
        # resumes on the next one.
        start = self._pos
        self._advance()
        self._pos += 1
        return self._make_error(ErrorKind.UNKNOWN_TOKEN, char, start)

    # =========================================================================
    # Character navigation
    # =========================================================================

    def _peek(self) -> str:
        """Peek at current character without advancing.

        Returns:
            Current character or empty string at end of input.
        """
        if self._lookahead is None:
            self._lookahead = next(self._chars, "")
        return self._lookahead

    def _advance(self) -> str:
        """Consume the current character.

        Updates line/column tracking only; callers account for ``_pos``.

        Returns:
            The consumed character, or empty string at end of input.
        """
        char = self._peek()
        if not char:
            return ""
        self._lookahead = None

        if char == "\n":
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1

        return char

    def _skip_whitespace(self) -> str:
        """Skip whitespace and return the first other character ('' at end)."""
        char = self._peek()
        while char and is_whitespace(char):
            self._advance()
            self._pos += 1
            char = self._peek()
        return char

    def _accept(self, predicate: Callable[[str], bool]) -> bool:
        """Consume the current character into the buffer if it matches."""
        char = self._peek()
        if not char or not predicate(char):
            return False
        self._buffer.append(self._advance())
        self._width += 1
        return True

    def _accept_run(self, predicate: Callable[[str], bool]) -> None:
        """Consume a maximal run of matching characters into the buffer."""
        while self._accept(predicate):
            pass

    # =========================================================================
    # Token assembly
    # =========================================================================

    def _scan_assign(self) -> Token:
        """Scan ``:=``, reporting an incomplete one as UNKNOWN_SYMBOL."""
        start = self._pos
        self._advance()
        self._pos += 1
        self._operator_expected = False

        if self._peek() == EQUALS:
            self._advance()
            self._pos += 1
            return self._make_token(TokenType.ASSIGN, COLON + EQUALS, start)

        # Reported one past the colon; the lookahead stays unconsumed.
        self._token_col += 1
        return self._make_error(ErrorKind.UNKNOWN_SYMBOL, COLON, start + 1)

    def _finish_operand(self, token_type: TokenType, start_pos: int) -> Token:
        """Fold the in-flight width into pos and emit the buffered lexeme."""
        self._pos += self._width
        self._width = 0
        self._operator_expected = True
        return self._make_token(token_type, "".join(self._buffer), start_pos)

    def _make_error(self, kind: ErrorKind, value: str, error_pos: int) -> Token:
        self._operator_expected = False
        logger.debug("%s %r at position %d", kind.message, value, error_pos)
        return self._make_token(TokenType.ERROR, value, error_pos, error=kind)

    def _make_token(
        self,
        token_type: TokenType,
        value: str,
        start_pos: int,
        *,
        op: Op | None = None,
        error: ErrorKind | None = None,
    ) -> Token:
        """Create a Token with raw coordinates (lazy SourceLocation).

        Uses the line/column saved when the token's first character was seen
        and the current position as the end offset.
        """
        return Token(
            type=token_type,
            value=value,
            _lineno=self._token_lineno,
            _col=self._token_col,
            _start_offset=start_pos,
            _end_offset=max(self._pos, start_pos),
            op=op,
            error=error,
            _source_file=self._source_file,
        )
