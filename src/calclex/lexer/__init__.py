"""Pull-based lexer for the calclex arithmetic/assignment language.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (state, navigation, dispatch)
├── charsets.py          # Character classes
└── scanners/            # Operand scanners
    ├── number.py        # DECIMAL / EXP literals
    └── ident.py         # Identifiers

Usage:
    >>> from calclex.lexer import Lexer
    >>> for token in Lexer("a := 0.5E10"):
    ...     print(token)
Token(IDENT, 'a', 1:1)
Token(ASSIGN, ':=', 1:3)
Token(EXP, '0.5E10', 1:6)

"""

from calclex.lexer.core import Lexer

__all__ = ["Lexer"]
