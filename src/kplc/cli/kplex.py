"""
kplex - KPL Token Dump Command-Line Interface
=============================================

This module implements a command-line tool that runs the KPL lexer over a
source file and prints the resulting token stream. It is mainly a debugging
aid for the language front end.

Usage Examples
--------------
Dump tokens:
    $ kplex main.kpl

Keep comment tokens:
    $ kplex --comments main.kpl

Machine-readable output:
    $ kplex --format json main.kpl

Use the corrected operator table (`--`, `||`, `>>`):
    $ kplex --modern main.kpl

Output Format
-------------
One token per line, span first:

    1:1-1:9     PROCEDURE
    1:11-1:14   IDENTITY     'main'
    2:5-2:8     MACHINE      31
"""

import json
import logging
from pathlib import Path
from typing import Optional

import click

from kplc import __version__
from kplc.analyzer import Lexer, Token, TokenSymbol
from kplc.cli.errors import handle_cli_exception
from kplc.config import LexerOptions


def format_token(token: Token) -> str:
    """Format a token as one line of text output."""
    span = f"{token.start}-{token.end}"
    if token.value is None:
        return f"{span:<12}{token.symbol.name}"
    if token.symbol is TokenSymbol.NONE:
        value = f"0x{token.value:02X}"
    else:
        value = repr(token.value)
    return f"{span:<12}{token.symbol.name:<13}{value}"


def token_to_dict(token: Token) -> dict:
    return {
        "symbol": token.symbol.name,
        "value": token.value,
        "start": [token.start.line, token.start.column],
        "end": [token.end.line, token.end.column],
    }


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--comments",
    is_flag=True,
    help="Include COMMENT tokens in the output",
)
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    show_default=True,
    help="Output format",
)
@click.option(
    "--legacy/--modern",
    default=None,
    help="Operator table: legacy (--, |+, ><) or modern (--, ||, >>). "
         "Default: legacy, or KPLC_LEGACY_OPERATORS.",
)
@click.option(
    "--strict-comments",
    is_flag=True,
    help="Fail on a block comment that is never closed",
)
@click.option(
    "--max-identifier",
    type=click.IntRange(min=1),
    default=None,
    help="Longest identifier accepted (default: 1024)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (debug logging)",
)
@click.version_option(version=__version__, prog_name="kplex")
def main(
    input_file: Path,
    comments: bool,
    output_format: str,
    legacy: Optional[bool],
    strict_comments: bool,
    max_identifier: Optional[int],
    verbose: bool,
) -> None:
    """
    Print the tokens of a KPL source file.

    INPUT_FILE is the KPL source file to tokenize.

    \b
    Examples:
        kplex main.kpl                 # One token per line
        kplex --comments main.kpl      # Keep comments
        kplex -f json main.kpl         # JSON array of tokens
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    options = LexerOptions.from_env()
    if legacy is not None:
        options.legacy_operators = legacy
    if strict_comments:
        options.strict_comments = True
    if max_identifier is not None:
        options.max_identifier_length = max_identifier

    try:
        if verbose:
            click.echo(f"Tokenizing {input_file}...", err=True)

        source = input_file.read_bytes()
        with Lexer(source, str(input_file), options) as lexer:
            tokens = list(lexer.tokenize(skip_comments=not comments))

        if output_format.lower() == "json":
            click.echo(json.dumps([token_to_dict(t) for t in tokens], indent=2))
        else:
            for token in tokens:
                click.echo(format_token(token))

        if verbose:
            click.echo(f"Tokenized: {len(tokens)} tokens", err=True)

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
