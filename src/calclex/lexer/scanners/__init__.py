"""Operand scanners for the calclex lexer.

Each scanner is a mixin that assembles one multi-character token kind
in the lexer's scratch buffer.
"""

from __future__ import annotations

from calclex.lexer.scanners.ident import IdentScannerMixin
from calclex.lexer.scanners.number import NumberScannerMixin

__all__ = [
    "IdentScannerMixin",
    "NumberScannerMixin",
]
