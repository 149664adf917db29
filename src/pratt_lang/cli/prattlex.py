"""
prattlex - Pratt Lang Tokenizer Command-Line Interface
======================================================

Reads a source file, tokenizes it, and prints one line per token.

Usage Examples
--------------
Print source and tokens:
    $ prattlex examples/00.lang

Tokens only:
    $ prattlex --tokens-only examples/00.lang

Longer error context:
    $ prattlex --error-context 60 broken.lang

Verbose mode:
    $ prattlex -v examples/00.lang
"""

import logging
from pathlib import Path
from typing import Optional

import click

from pratt_lang import __version__
from pratt_lang.cli.errors import handle_cli_exception
from pratt_lang.config import LexerConfig
from pratt_lang.lexer import tokenize

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--tokens-only",
    is_flag=True,
    help="Print tokens without echoing the source",
)
@click.option(
    "--error-context",
    type=click.IntRange(min=1),
    default=None,
    help="Characters of unmatched input shown in errors "
         "(default: $PRATT_LEXER_ERROR_CONTEXT or 20)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="prattlex")
def main(
    input_file: Path,
    tokens_only: bool,
    error_context: Optional[int],
    verbose: bool,
) -> None:
    """
    Tokenize a Pratt Lang source file.

    INPUT_FILE is the source file to tokenize. Each token is printed
    on its own line as KIND (value).

    \b
    Examples:
        prattlex examples/00.lang
        prattlex --tokens-only examples/00.lang
    """
    setup_logging(verbose)

    config = LexerConfig.from_env()
    if error_context is not None:
        config.error_context = error_context

    try:
        logger.debug("Reading %s", input_file)
        source = input_file.read_text(encoding="utf-8")

        if not tokens_only:
            click.echo(f"Source code: \n{source}\n\nTokens:")

        tokens = tokenize(source, str(input_file), config)
        for token in tokens:
            click.echo(token.debug())

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()
