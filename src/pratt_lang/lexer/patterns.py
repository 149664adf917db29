"""
Pattern Rules
=============

The fixed, ordered rule table that defines the Pratt Lang lexicon.

Each rule pairs a regular expression with a handler. The lexer tries the
rules in table order at the cursor and runs the handler of the first rule
that matches there. Ambiguity is resolved by position in the table only,
never by match length, so every multi-character symbol precedes the
shorter symbol that is its prefix:

    ==  before  =        <=  before  <        ..  before  .
    !=  before  !        >=  before  >        ++  before  +=  before  +

Handlers
--------
Three handler shapes cover the whole table:

- skip_handler: consumes whitespace, emits nothing
- number_handler: emits NUMBER with the matched text
- default_handler(kind, value): emits a fixed symbol token
"""

from dataclasses import dataclass
import re
from typing import TYPE_CHECKING, Callable

from pratt_lang.lexer.tokens import Token, TokenKind

if TYPE_CHECKING:
    from pratt_lang.lexer.lexer import Lexer


Handler = Callable[["Lexer", "re.Match[str]"], None]


@dataclass(frozen=True)
class PatternRule:
    """
    One entry of the rule table.

    Attributes:
        pattern: Compiled expression, matched at the cursor only
        handler: Called with the lexer and the match when the pattern wins
    """
    pattern: "re.Pattern[str]"
    handler: Handler

    def match(self, source: str, pos: int) -> "re.Match[str] | None":
        """Match the pattern at exactly `pos`; later matches do not count."""
        return self.pattern.match(source, pos)


# =============================================================================
# Handlers
# =============================================================================

def skip_handler(lexer: "Lexer", match: "re.Match[str]") -> None:
    """Consume whitespace (or anything ignorable) without emitting a token."""
    lexer.advance_n(len(match.group()))


def number_handler(lexer: "Lexer", match: "re.Match[str]") -> None:
    """Emit a NUMBER token holding the literal text."""
    text = match.group()
    lexer.push(Token(TokenKind.NUMBER, text, lexer.pos))
    lexer.advance_n(len(text))


def default_handler(kind: TokenKind, value: str) -> Handler:
    """
    Build the handler for a fixed symbol.

    The returned handler emits `kind` with `value` and advances past it.
    """

    def handler(lexer: "Lexer", match: "re.Match[str]") -> None:
        lexer.push(Token(kind, value, lexer.pos))
        lexer.advance_n(len(value))

    return handler


def symbol(kind: TokenKind, value: str) -> PatternRule:
    """Rule for a literal symbol, escaped so it matches verbatim."""
    return PatternRule(re.compile(re.escape(value)), default_handler(kind, value))


# =============================================================================
# Rule Table
# =============================================================================

# Whitespace is the ASCII class [\t\n\f\r ] and digits are ASCII [0-9];
# Python's \s and \d would also accept Unicode spaces and digits.
WHITESPACE_PATTERN = re.compile(r"[\t\n\f\r ]+")
NUMBER_PATTERN = re.compile(r"[0-9]+(\.[0-9]+)?")

# Order matters: earlier rules win.
DEFAULT_RULES: tuple[PatternRule, ...] = (
    PatternRule(WHITESPACE_PATTERN, skip_handler),
    PatternRule(NUMBER_PATTERN, number_handler),

    symbol(TokenKind.CLOSE_BRACKET, "]"),
    symbol(TokenKind.OPEN_CURLY, "{"),
    symbol(TokenKind.CLOSE_CURLY, "}"),
    symbol(TokenKind.OPEN_PAREN, "("),
    symbol(TokenKind.CLOSE_PAREN, ")"),
    symbol(TokenKind.EQUALS, "=="),
    symbol(TokenKind.NOT_EQUALS, "!="),
    symbol(TokenKind.ASSIGNMENT, "="),
    symbol(TokenKind.NOT, "!"),
    symbol(TokenKind.LESS_EQUAL, "<="),
    symbol(TokenKind.LESS, "<"),
    symbol(TokenKind.GREATER_EQUAL, ">="),
    symbol(TokenKind.GREATER, ">"),
    symbol(TokenKind.OR, "||"),
    symbol(TokenKind.AND, "&&"),
    symbol(TokenKind.DOT_DOT, ".."),
    symbol(TokenKind.DOT, "."),
    symbol(TokenKind.SEMI_COLON, ";"),
    symbol(TokenKind.COLON, ":"),
    symbol(TokenKind.QUESTION, "?"),
    symbol(TokenKind.COMMA, ","),
    symbol(TokenKind.PLUS_PLUS, "++"),
    symbol(TokenKind.MINUS_MINUS, "--"),
    symbol(TokenKind.PLUS_EQUALS, "+="),
    symbol(TokenKind.MINUS_EQUALS, "-="),
    symbol(TokenKind.PLUS, "+"),
    symbol(TokenKind.DASH, "-"),
    symbol(TokenKind.SLASH, "/"),
    symbol(TokenKind.STAR, "*"),
    symbol(TokenKind.PERCENT, "%"),
)
