"""
calclex: lexer for a small arithmetic/assignment language

Turns text such as ``x := -2 * (y - 0.5E10)`` into a lazy stream of typed
tokens. Lexical errors are tokens too, so a caller decides whether the
first one ends the session.

Quick Start:
    >>> from calclex import tokenize
    >>> for token in tokenize("3 - 4"):
    ...     print(token)
    Token(DECIMAL, '3', 1:1)
    Token(OPERATOR, MINUS, 1:3)
    Token(DECIMAL, '4', 1:5)

    >>> # Pull one token at a time
    >>> from calclex import Lexer
    >>> lexer = Lexer("(-4)")
    >>> lexer.next_token()
    Token(LEFT_PAREN, '(', 1:1)
    >>> lexer.next_token()
    Token(DECIMAL, '-4', 1:2)

Installation:
    pip install calclex
"""

from collections.abc import Iterable, Iterator

from calclex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from calclex.errors import CalclexError, ErrorKind, LexError
from calclex.lexer import Lexer
from calclex.location import SourceLocation
from calclex.serialization import from_dict, from_json, to_dict, to_json
from calclex.tokens import Op, Token, TokenType

__version__ = "0.1.0"


def tokenize(
    source: Iterable[str],
    *,
    source_file: str | None = None,
) -> Iterator[Token]:
    """Lex source into a token stream under the active LexConfig.

    Args:
        source: Text, or an iterable of text chunks
        source_file: Optional source file path for token locations

    Returns:
        Iterator of tokens; ERROR tokens are yielded in place unless
        ``LexConfig.strict`` is set.

    Example:
        >>> [t.value for t in tokenize("a := 1")]
        ['a', ':=', '1']

    """
    return Lexer(source, source_file=source_file).tokenize()


__all__ = [
    "CalclexError",
    "ErrorKind",
    "LexConfig",
    "LexError",
    "Lexer",
    "Op",
    "SourceLocation",
    "Token",
    "TokenType",
    "__version__",
    "from_dict",
    "from_json",
    "get_lex_config",
    "lex_config_context",
    "reset_lex_config",
    "set_lex_config",
    "to_dict",
    "to_json",
    "tokenize",
]
