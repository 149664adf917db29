"""
Pratt Lang - Lexer Configuration
================================

Settings that shape lexer diagnostics. Configuration can come
from:
- Default values (defined here)
- Environment variables

The pattern rule table is not configurable; it is fixed for every run.

Environment variables (all optional):
    PRATT_LEXER_ERROR_CONTEXT: Characters of unmatched input kept in errors
"""

from dataclasses import dataclass
import logging
import os

logger = logging.getLogger(__name__)


@dataclass
class LexerConfig:
    """
    Configuration for a lexer run.

    Attributes:
        error_context: Maximum number of characters of the unmatched source
            suffix copied into an UnrecognizedTokenError (default: 20)
    """

    error_context: int = 20

    def __post_init__(self) -> None:
        if self.error_context < 1:
            raise ValueError(
                f"error_context must be at least 1, got {self.error_context}"
            )

    @classmethod
    def from_env(cls) -> "LexerConfig":
        """
        Create LexerConfig from environment variables.

        Invalid values are ignored and the default is kept.

        Returns:
            LexerConfig with values from environment variables
        """
        config = cls()

        if context := os.environ.get("PRATT_LEXER_ERROR_CONTEXT"):
            try:
                value = int(context)
            except ValueError:
                logger.warning(
                    "Ignoring PRATT_LEXER_ERROR_CONTEXT=%r: not an integer", context
                )
            else:
                if value > 0:
                    config.error_context = value
                else:
                    logger.warning(
                        "Ignoring PRATT_LEXER_ERROR_CONTEXT=%r: must be positive",
                        context,
                    )

        return config

    def clip(self, text: str) -> str:
        """Cut text to error_context characters, marking the cut with '...'."""
        if len(text) <= self.error_context:
            return text
        return text[: self.error_context] + "..."
