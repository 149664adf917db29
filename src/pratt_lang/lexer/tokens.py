"""
Pratt Lang Tokens
=================

Token kinds and the immutable Token value produced by the lexer.

The kind set is closed. Note that there is a CLOSE_BRACKET kind but no
OPEN_BRACKET kind: the lexicon has no rule for '['.
"""

from dataclasses import dataclass
from enum import Enum, auto


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """Lexical categories of Pratt Lang source text."""

    # === Structural ===
    EOF = auto()

    # === Literals ===
    NUMBER = auto()

    # === Grouping ===
    CLOSE_BRACKET = auto()  # ]
    OPEN_CURLY = auto()     # {
    CLOSE_CURLY = auto()    # }
    OPEN_PAREN = auto()     # (
    CLOSE_PAREN = auto()    # )

    # === Equivalence ===
    ASSIGNMENT = auto()     # =
    EQUALS = auto()         # ==
    NOT = auto()            # !
    NOT_EQUALS = auto()     # !=

    # === Conditional ===
    LESS = auto()           # <
    LESS_EQUAL = auto()     # <=
    GREATER = auto()        # >
    GREATER_EQUAL = auto()  # >=

    # === Logical ===
    OR = auto()             # ||
    AND = auto()            # &&

    # === Symbols ===
    DOT = auto()            # .
    DOT_DOT = auto()        # ..
    SEMI_COLON = auto()     # ;
    COLON = auto()          # :
    QUESTION = auto()       # ?
    COMMA = auto()          # ,

    # === Shorthand ===
    PLUS_PLUS = auto()      # ++
    MINUS_MINUS = auto()    # --
    PLUS_EQUALS = auto()    # +=
    MINUS_EQUALS = auto()   # -=

    # === Arithmetic ===
    PLUS = auto()           # +
    DASH = auto()           # -
    SLASH = auto()          # /
    STAR = auto()           # *
    PERCENT = auto()        # %


# Value of the end-of-input token
EOF_VALUE = "EOF"

# Kinds whose value carries information beyond the kind itself
VALUE_KINDS = frozenset({TokenKind.NUMBER})


def token_kind_string(kind: TokenKind) -> str:
    """Return the display name of a token kind."""
    return kind.name


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified unit of source text.

    Attributes:
        kind: The TokenKind classification
        value: The exact matched text ("EOF" sentinel for end of input)
        offset: Cursor offset where the token starts in the source
    """
    kind: TokenKind
    value: str
    offset: int

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.value!r}, @{self.offset})"

    def is_one_of_many(self, *kinds: TokenKind) -> bool:
        """Return True if this token's kind is any of the given kinds."""
        return self.kind in kinds

    def debug(self) -> str:
        """
        Render the token for debug output.

        Value-bearing tokens show their text, all others show empty parens:

            NUMBER (42)
            PLUS ()
        """
        if self.kind in VALUE_KINDS:
            return f"{token_kind_string(self.kind)} ({self.value})"
        return f"{token_kind_string(self.kind)} ()"
