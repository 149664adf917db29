"""
Tests for prattlex - Tokenizer CLI
==================================
"""

from click.testing import CliRunner

from pratt_lang import __version__
from pratt_lang.cli.errors import ExitCode
from pratt_lang.cli.prattlex import main


def write_source(tmp_path, text, name="test.lang"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


class TestPrattlexCLI:
    """Tests for the prattlex CLI tool."""

    def test_cli_help(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "Tokenize a Pratt Lang source file" in result.output

    def test_cli_version(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_prints_source_and_tokens(self, tmp_path):
        source = write_source(tmp_path, "1 + 2.5 >= 3;")

        runner = CliRunner()
        result = runner.invoke(main, [str(source)])

        assert result.exit_code == ExitCode.SUCCESS
        lines = result.output.splitlines()
        assert lines[0] == "Source code: "
        assert "1 + 2.5 >= 3;" in lines
        assert "Tokens:" in lines
        assert lines[lines.index("Tokens:"):] == [
            "Tokens:",
            "NUMBER (1)",
            "PLUS ()",
            "NUMBER (2.5)",
            "GREATER_EQUAL ()",
            "NUMBER (3)",
            "SEMI_COLON ()",
            "EOF ()",
        ]

    def test_tokens_only(self, tmp_path):
        source = write_source(tmp_path, "(1)")

        runner = CliRunner()
        result = runner.invoke(main, ["--tokens-only", str(source)])

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "OPEN_PAREN ()",
            "NUMBER (1)",
            "CLOSE_PAREN ()",
            "EOF ()",
        ]

    def test_unrecognized_token(self, tmp_path):
        source = write_source(tmp_path, "1 +\n  @ 2")

        runner = CliRunner()
        result = runner.invoke(main, ["--tokens-only", str(source)])

        assert result.exit_code == ExitCode.LEX_ERROR
        assert f"{source}:2:3: error: unrecognised token near '@ 2'" in result.output
        assert "NUMBER" not in result.output

    def test_error_context_option(self, tmp_path):
        source = write_source(tmp_path, "@abcdefgh")

        runner = CliRunner()
        result = runner.invoke(main, ["--error-context", "3", str(source)])

        assert result.exit_code == ExitCode.LEX_ERROR
        assert "near '@ab...'" in result.output

    def test_error_context_from_env(self, tmp_path):
        source = write_source(tmp_path, "@abcdefgh")

        runner = CliRunner()
        result = runner.invoke(
            main, [str(source)], env={"PRATT_LEXER_ERROR_CONTEXT": "2"}
        )

        assert result.exit_code == ExitCode.LEX_ERROR
        assert "near '@a...'" in result.output

    def test_error_context_must_be_positive(self, tmp_path):
        source = write_source(tmp_path, "1")

        runner = CliRunner()
        result = runner.invoke(main, ["--error-context", "0", str(source)])

        assert result.exit_code == 2

    def test_missing_file(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, [str(tmp_path / "missing.lang")])

        assert result.exit_code == 2

    def test_undecodable_file(self, tmp_path):
        source = tmp_path / "binary.lang"
        source.write_bytes(b"\xff\xfe\x00")

        runner = CliRunner()
        result = runner.invoke(main, [str(source)])

        assert result.exit_code == ExitCode.INVALID_ARGS
