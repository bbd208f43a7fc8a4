"""
KPLC Error Hierarchy
====================

This module defines the root of the exception hierarchy for the KPLC
toolchain. All exceptions inherit from KplcError, allowing callers to catch
every toolchain error with a single except clause if desired.

Exception Hierarchy
-------------------
KplcError (base)
├── AnalyzerError (front-end errors carrying a source location)
│   └── LexerError - malformed token (see kplc.analyzer.errors)
│       ├── WrongFormatError
│       ├── ValuelessError
│       ├── IncompleteError
│       ├── InconvertibleError
│       └── LexerRangeError
└── LexerClosedError - lexer used after close()

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class KplcError(Exception):
    """
    Base exception for all KPLC errors.

        try:
            tokens = list(Lexer(source).tokenize())
        except KplcError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Analyzer Exceptions
# =============================================================================

class AnalyzerError(KplcError):
    """
    Base exception for front-end errors that point into the source.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The actual source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            main.kpl:3:14: error: binary literal has no digits
                datum x = 0b__;
                          ^
            hint: add at least one '0' or '1' after the prefix
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class LexerClosedError(KplcError):
    """Raised when a lexer is used after its source buffer was released."""

    def __init__(self, filename: str = "<input>"):
        self.filename = filename
        super().__init__(f"lexer for '{filename}' has been closed")
