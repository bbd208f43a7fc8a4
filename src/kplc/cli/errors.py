"""
CLI Error Handling
==================

Maps exceptions raised while running a kplc tool onto a message on stderr
and a process exit code.

Exit Codes
----------
| Code | Meaning                                            |
|------|----------------------------------------------------|
| 0    | Tokens produced                                    |
| 1    | Lexer fault in the source (malformed literal, ...) |
| 2    | Bad arguments, or the input could not be read      |
| 3    | Unexpected internal error                          |
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from kplc.analyzer.errors import LexerError
from kplc.errors import KplcError


class ExitCode(IntEnum):
    """Exit codes shared by the kplc tools."""
    SUCCESS = 0
    BUILD_ERROR = 1      # Source rejected by the lexer
    INVALID_ARGS = 2     # Bad arguments or unreadable input
    INTERNAL_ERROR = 3


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report error on stderr and exit with the matching ExitCode.

    Lexer faults are printed in their "file:line:col: error:" form followed by
    the fault category, which is what editors and scripts match on.
    """
    if isinstance(error, LexerError):
        click.echo(str(error), err=True)
        click.echo(f"  [{error.module.name.lower()}/{error.kind.name.lower()}]", err=True)
        sys.exit(ExitCode.BUILD_ERROR)

    if isinstance(error, KplcError):
        click.echo(f"kplex: {error}", err=True)
        sys.exit(ExitCode.BUILD_ERROR)

    if isinstance(error, (click.BadParameter, OSError)):
        click.echo(f"kplex: cannot read input: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    click.echo(f"kplex: internal error: {error}", err=True)
    if verbose:
        traceback.print_exc()
    sys.exit(ExitCode.INTERNAL_ERROR)
