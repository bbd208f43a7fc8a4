"""
KPLC Lexer Configuration
========================

Options that change how the lexer treats a handful of borderline inputs.
Configuration can come from:
- Default values (defined here)
- Environment variables (LexerOptions.from_env)
- Command-line flags (kplex)

The defaults reproduce the historical behaviour of the language's lexer,
including its operator table quirks (`--` lexes as INCREMENT, `|+` as
DOUBLE_LINE, `><` as RIGHT_SHIFT).
"""

from dataclasses import dataclass
import os


_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _parse_flag(value: str):
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    return None


@dataclass
class LexerOptions:
    """
    Lexer configuration options.

    Attributes:
        max_identifier_length: Longest identifier accepted (default: 1024).
        legacy_operators: Use the historical operator table. When False,
                          `--` is DECREMENT, `||` is DOUBLE_LINE and `>>` is
                          RIGHT_SHIFT instead of `--`/`|+`/`><`.
        strict_comments: Raise IncompleteError for a block comment that
                         reaches end of input instead of ending it silently.
        scientific_literals: Accept an exponent suffix on real literals
                             (`1.5e3`). When False the `e` starts a new token.
    """

    max_identifier_length: int = 1024
    legacy_operators: bool = True
    strict_comments: bool = False
    scientific_literals: bool = True

    def __post_init__(self):
        if self.max_identifier_length < 1:
            raise ValueError("max_identifier_length must be at least 1")

    @classmethod
    def from_env(cls) -> "LexerOptions":
        """
        Create LexerOptions from environment variables.

        Environment variables (all optional):
            KPLC_MAX_IDENTIFIER: Identifier length cap (integer)
            KPLC_LEGACY_OPERATORS: Historical operator table (1/0, true/false)
            KPLC_STRICT_COMMENTS: Fault on unterminated block comments
            KPLC_SCIENTIFIC: Accept exponent suffixes on real literals

        Invalid values are ignored and the default is kept.
        """
        options = cls()

        if limit := os.environ.get("KPLC_MAX_IDENTIFIER"):
            try:
                value = int(limit)
            except ValueError:
                value = 0
            if value >= 1:
                options.max_identifier_length = value

        if (flag := _parse_flag(os.environ.get("KPLC_LEGACY_OPERATORS", ""))) is not None:
            options.legacy_operators = flag

        if (flag := _parse_flag(os.environ.get("KPLC_STRICT_COMMENTS", ""))) is not None:
            options.strict_comments = flag

        if (flag := _parse_flag(os.environ.get("KPLC_SCIENTIFIC", ""))) is not None:
            options.scientific_literals = flag

        return options
