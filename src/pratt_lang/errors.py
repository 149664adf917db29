"""
Pratt Lang Error Hierarchy
==========================

This module defines the exception hierarchy for the Pratt Lang toolchain.
All exceptions inherit from PrattError, allowing callers to catch every
toolchain error with a single except clause if desired.

Exception Hierarchy
-------------------
PrattError (base)
└── LexError (lexical analysis)
    └── UnrecognizedTokenError - no pattern rule matches at the cursor

Error Message Format
--------------------
Errors that carry a source location are formatted like this:

    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class PrattError(Exception):
    """
    Base exception for all Pratt Lang errors.

        try:
            tokens = tokenize(source)
        except PrattError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A position in source text, used for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Lexer Exceptions
# =============================================================================

class LexError(PrattError):
    """
    Base exception for lexical analysis errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text of the offending line (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            calc.lang:2:5: error: unrecognised token near '@ 4;'
                1 + @ 4;
                    ^
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class UnrecognizedTokenError(LexError):
    """
    No pattern rule matches the source at the cursor.

    Lexing halts on the first such failure; there is no resynchronization.
    The error keeps enough context to diagnose the problem.

    Attributes:
        remainder: The unmatched source suffix, cut to the configured
            error context length ("..." appended when cut)
        offset: Cursor offset where matching failed
        tokens: Tokens produced before the failure
    """

    def __init__(
        self,
        remainder: str,
        offset: int,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
        tokens: Optional[list] = None,
    ):
        self.remainder = remainder
        self.offset = offset
        self.tokens = list(tokens) if tokens else []

        hint = None
        if remainder and remainder[0].isalpha():
            hint = "identifiers and keywords are not part of the lexicon"
        elif remainder.startswith("["):
            hint = "'[' has no rule; only ']' is recognised"

        super().__init__(
            f"unrecognised token near {remainder!r}",
            location=location,
            hint=hint,
            source_line=source_line,
        )
