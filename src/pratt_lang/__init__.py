"""
Pratt Lang - Language Toolchain
===============================

This package provides the front end of the Pratt Lang toolchain.

Main Components
---------------
- **lexer**: Tokenizer
    Converts source text into an ordered sequence of classified tokens

- **cli**: Command-line tools (prattlex)
    Reads a source file and prints its tokens

Quick Start
-----------
Tokenize a string:
    >>> from pratt_lang import tokenize
    >>> [t.debug() for t in tokenize("10 % 3")]
    ['NUMBER (10)', 'PERCENT ()', 'NUMBER (3)', 'EOF ()']

Or use the command-line tool:
    $ prattlex examples/00.lang
"""

__version__ = "0.1.0"

# =============================================================================
# Public API Exports
# =============================================================================

from pratt_lang.config import LexerConfig
from pratt_lang.errors import (
    PrattError,
    LexError,
    UnrecognizedTokenError,
    SourceLocation,
)
from pratt_lang.lexer import Lexer, Token, TokenKind, tokenize

__all__ = [
    # Version info
    "__version__",
    # Configuration
    "LexerConfig",
    # Exception hierarchy
    "PrattError",
    "LexError",
    "UnrecognizedTokenError",
    "SourceLocation",
    # Lexer
    "Lexer",
    "Token",
    "TokenKind",
    "tokenize",
]
