"""
Tests for lexer configuration
=============================
"""

import logging

import pytest

from pratt_lang.config import LexerConfig
from pratt_lang.errors import UnrecognizedTokenError
from pratt_lang.lexer import tokenize


class TestDefaults:

    def test_defaults(self):
        config = LexerConfig()
        assert config.error_context == 20

    @pytest.mark.parametrize("value", [0, -1])
    def test_non_positive_error_context_rejected(self, value):
        with pytest.raises(ValueError, match="error_context"):
            LexerConfig(error_context=value)

    def test_smallest_context_keeps_offending_character(self):
        with pytest.raises(UnrecognizedTokenError) as exc_info:
            tokenize("@abc", config=LexerConfig(error_context=1))
        assert exc_info.value.remainder == "@..."


class TestFromEnv:
    """Environment overrides."""

    def test_no_env(self, monkeypatch):
        monkeypatch.delenv("PRATT_LEXER_ERROR_CONTEXT", raising=False)
        assert LexerConfig.from_env() == LexerConfig()

    def test_error_context_override(self, monkeypatch):
        monkeypatch.setenv("PRATT_LEXER_ERROR_CONTEXT", "8")
        assert LexerConfig.from_env().error_context == 8

    def test_invalid_value_ignored(self, monkeypatch, caplog):
        monkeypatch.setenv("PRATT_LEXER_ERROR_CONTEXT", "lots")
        with caplog.at_level(logging.WARNING, logger="pratt_lang.config"):
            config = LexerConfig.from_env()
        assert config.error_context == 20
        assert "not an integer" in caplog.text

    def test_non_positive_value_ignored(self, monkeypatch, caplog):
        monkeypatch.setenv("PRATT_LEXER_ERROR_CONTEXT", "0")
        with caplog.at_level(logging.WARNING, logger="pratt_lang.config"):
            config = LexerConfig.from_env()
        assert config.error_context == 20
        assert "must be positive" in caplog.text


class TestClip:

    def test_short_text_unchanged(self):
        assert LexerConfig(error_context=5).clip("@abc") == "@abc"

    def test_exact_length_unchanged(self):
        assert LexerConfig(error_context=4).clip("@abc") == "@abc"

    def test_long_text_clipped(self):
        assert LexerConfig(error_context=3).clip("@abcdef") == "@ab..."
