"""Character sets for O(1) classification.

All sets are frozensets: immutable and allocated once at import.
Letters follow the Unicode Alphabetic property and whitespace the
Unicode White_Space property; digits are ASCII only.

Reference: Unicode PropList.txt (White_Space, Other_Alphabetic)
"""

import unicodedata

DIGITS: frozenset[str] = frozenset("0123456789")

EXPONENT_MARKERS: frozenset[str] = frozenset("eE")

DECIMAL_POINT = "."
MINUS = "-"
UNDERSCORE = "_"
COLON = ":"
EQUALS = "="

# Unicode White_Space. Unlike str.isspace, excludes U+001C..U+001F.
WHITESPACE: frozenset[str] = frozenset(
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

# Letters plus letter numbers (Nl) and combining marks (Mn, Mc); most
# Other_Alphabetic code points are marks.
_ALPHABETIC_CATEGORIES: frozenset[str] = frozenset(
    {"Lu", "Ll", "Lt", "Lm", "Lo", "Nl", "Mn", "Mc"}
)

# Other_Alphabetic symbols (So): circled, parenthesized, squared and
# negative squared Latin letters
_ALPHABETIC_SYMBOL_RANGES: tuple[tuple[int, int], ...] = (
    (0x24B6, 0x24E9),
    (0x1F130, 0x1F149),
    (0x1F150, 0x1F169),
    (0x1F170, 0x1F189),
)


def is_alphabetic(char: str) -> bool:
    """Check if character is alphabetic in the Unicode sense."""
    if not char:
        return False
    if char.isascii():
        return char.isalpha()
    if unicodedata.category(char) in _ALPHABETIC_CATEGORIES:
        return True
    code = ord(char)
    return any(low <= code <= high for low, high in _ALPHABETIC_SYMBOL_RANGES)


def is_ident_start(char: str) -> bool:
    """Check if character can start an identifier (letter or underscore)."""
    return char == UNDERSCORE or is_alphabetic(char)


def is_ident_char(char: str) -> bool:
    """Check if character can continue an identifier."""
    return char == UNDERSCORE or char in DIGITS or is_alphabetic(char)


def is_whitespace(char: str) -> bool:
    return char in WHITESPACE
