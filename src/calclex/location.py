"""Source location tracking for error messages and debugging.

Provides SourceLocation dataclass for tracking positions in source text.
Used by tokens and by LexError to point at the offending input.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and debugging.

    Line and column are 1-indexed; offsets are 0-based character counts
    from the start of the source, matching ``Lexer.pos``.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column offset (1-indexed)
        offset: Absolute start offset in source
        end_offset: Absolute end offset in source (exclusive)
        end_lineno: Ending line number (optional)
        end_col_offset: Ending column offset (optional)
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(lineno=1, col_offset=4, offset=3, end_offset=5)
            >>> str(loc)
            '1:4'

            >>> loc = SourceLocation(2, 1, 10, 12, source_file="prog.calc")
            >>> str(loc)
            'prog.calc:2:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    end_lineno: int | None = None
    end_col_offset: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "prog.calc:1:5" or "1:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @property
    def length(self) -> int:
        """Number of source characters covered."""
        return self.end_offset - self.offset

