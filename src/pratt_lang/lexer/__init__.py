"""
Pratt Lang Lexer
================

Lexical analysis front end: converts source text into an ordered sequence
of classified tokens, terminated by an EOF token.

Pipeline
--------
    Source text → Lexer → [Token, ..., EOF] → Parser

Usage
-----
>>> from pratt_lang.lexer import tokenize, TokenKind
>>> [t.kind for t in tokenize("<=")] == [TokenKind.LESS_EQUAL, TokenKind.EOF]
True

Letters have no rule, so `tokenize("x")` raises UnrecognizedTokenError.
"""

from pratt_lang.lexer.lexer import Lexer, tokenize
from pratt_lang.lexer.patterns import (
    DEFAULT_RULES,
    PatternRule,
    default_handler,
    number_handler,
    skip_handler,
)
from pratt_lang.lexer.tokens import EOF_VALUE, Token, TokenKind, token_kind_string

__all__ = [
    # Lexer
    "Lexer",
    "tokenize",
    # Rule table
    "DEFAULT_RULES",
    "PatternRule",
    "default_handler",
    "number_handler",
    "skip_handler",
    # Tokens
    "EOF_VALUE",
    "Token",
    "TokenKind",
    "token_kind_string",
]
