"""
Pratt Lang Lexer (Tokenizer)
============================

This module converts source text into the ordered token sequence consumed
by the parser.

Algorithm
---------
While the cursor has not reached the end of the source, every rule of the
fixed table is tried in order, anchored at the cursor. The first rule that
matches runs its handler, which advances the cursor and emits zero or one
token. When no rule matches, lexing stops with UnrecognizedTokenError.
At the end of the source a single EOF token is appended.

There are no lexer modes: no string literal or comment states.

Example Usage
-------------
>>> from pratt_lang.lexer import tokenize
>>> for token in tokenize("1 + 2.5 >= 3;"):
...     print(token.debug())
NUMBER (1)
PLUS ()
NUMBER (2.5)
GREATER_EQUAL ()
NUMBER (3)
SEMI_COLON ()
EOF ()
"""

import logging
from typing import Optional

from pratt_lang.config import LexerConfig
from pratt_lang.errors import LexError, SourceLocation, UnrecognizedTokenError
from pratt_lang.lexer.patterns import DEFAULT_RULES, PatternRule
from pratt_lang.lexer.tokens import EOF_VALUE, Token, TokenKind

logger = logging.getLogger(__name__)


class Lexer:
    """
    Tokenizes Pratt Lang source code.

    A Lexer is bound to one source string and is used for one run. The rule
    table is shared read-only between instances; the cursor and output
    sequence belong to the instance.

    Usage:
        lexer = Lexer(source_text, filename)
        tokens = lexer.tokenize()

    Attributes:
        source: The source code being tokenized
        filename: Name of the source file (for error reporting)
        tokens: Tokens emitted so far
    """

    patterns: tuple[PatternRule, ...] = DEFAULT_RULES

    def __init__(
        self,
        source: str,
        filename: str = "<input>",
        config: Optional[LexerConfig] = None,
    ):
        self.source = source
        self.filename = filename
        self.config = config or LexerConfig()
        self.tokens: list[Token] = []
        self._pos = 0

    @property
    def pos(self) -> int:
        """Current cursor offset into the source."""
        return self._pos

    # =========================================================================
    # Cursor Operations
    # =========================================================================

    def advance_n(self, n: int) -> None:
        """Move the cursor forward by n characters."""
        self._pos += n

    def push(self, token: Token) -> None:
        """Append a token to the output sequence."""
        self.tokens.append(token)

    def at(self) -> str:
        """Return the character under the cursor."""
        return self.source[self._pos]

    def remainder(self) -> str:
        """Return the unconsumed part of the source."""
        return self.source[self._pos:]

    def at_eof(self) -> bool:
        return self._pos >= len(self.source)

    # =========================================================================
    # Scanning
    # =========================================================================

    def tokenize(self) -> list[Token]:
        """
        Produce the full token sequence for the source.

        Every call scans from the start of the source; the returned list
        is a copy of the lexer's output.

        Returns:
            Tokens in source order, ending with exactly one EOF token

        Raises:
            UnrecognizedTokenError: If no rule matches at some offset
        """
        self._pos = 0
        self.tokens = []
        logger.debug("Tokenizing %s (%d characters)", self.filename, len(self.source))

        while not self.at_eof():
            self._step()

        self.push(Token(TokenKind.EOF, EOF_VALUE, self._pos))
        logger.debug("Tokenized %s: %d tokens", self.filename, len(self.tokens))
        return list(self.tokens)

    def _step(self) -> None:
        """Run the handler of the first rule matching at the cursor."""
        start = self._pos

        for rule in self.patterns:
            match = rule.match(self.source, start)
            if match is not None:
                rule.handler(self, match)
                break
        else:
            raise self._unrecognized()

        if self._pos <= start:
            raise LexError(
                f"rule {rule.pattern.pattern!r} did not advance the cursor",
                location=self.location_at(start),
            )

    def _unrecognized(self) -> UnrecognizedTokenError:
        """Build the error for unmatched input at the cursor."""
        location = self.location_at(self._pos)
        logger.debug("Unrecognised input at %s (offset %d)", location, self._pos)
        return UnrecognizedTokenError(
            self.config.clip(self.remainder()),
            self._pos,
            location=location,
            source_line=self._line_text(self._pos),
            tokens=self.tokens,
        )

    # =========================================================================
    # Location Helpers
    # =========================================================================

    def location_at(self, offset: int) -> SourceLocation:
        """Convert a cursor offset to a 1-based line/column location."""
        line = self.source.count("\n", 0, offset) + 1
        column = offset - (self.source.rfind("\n", 0, offset) + 1) + 1
        return SourceLocation(self.filename, line, column)

    def _line_text(self, offset: int) -> str:
        """Return the text of the line containing offset."""
        start = self.source.rfind("\n", 0, offset) + 1
        end = self.source.find("\n", offset)
        if end == -1:
            end = len(self.source)
        return self.source[start:end]


def tokenize(
    source: str,
    filename: str = "<input>",
    config: Optional[LexerConfig] = None,
) -> list[Token]:
    """
    Tokenize source text in one call.

    Args:
        source: The source code to tokenize
        filename: Name used in error locations
        config: Lexer settings (defaults when omitted)

    Returns:
        Tokens in source order, ending with one EOF token
    """
    return Lexer(source, filename, config).tokenize()
