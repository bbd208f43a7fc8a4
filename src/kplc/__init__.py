"""
KPLC - Compiler Front End for the KPL Language
==============================================

KPL is a small statically-typed language with procedures, data declarations
and fixed-width numeric types (Nat8..Nat64, Int8..Int64).

Main Components
---------------
- **analyzer**: lexer producing tokens with exact source spans
- **config**: lexer options (LexerOptions)
- **text**: single-byte character classes and 64-bit numeric conversion
- **cli**: command-line tools (kplex)

Quick Start
-----------
    >>> from kplc import Lexer
    >>> with Lexer(b"procedure main") as lexer:
    ...     [t.symbol.name for t in lexer.tokenize()]
    ['PROCEDURE', 'IDENTITY', 'END']

Or use the command-line tool:
    $ kplex main.kpl
"""

__version__ = "0.1.0"

# =============================================================================
# Public API Exports
# =============================================================================

from kplc.errors import (
    KplcError,
    SourceLocation,
    AnalyzerError,
    LexerClosedError,
)
from kplc.config import LexerOptions
from kplc.analyzer import (
    Lexer,
    Token,
    TokenPoint,
    TokenSymbol,
    LexerError,
    LexerModule,
    LexerErrorKind,
)

__all__ = [
    "__version__",
    "KplcError",
    "SourceLocation",
    "AnalyzerError",
    "LexerClosedError",
    "LexerOptions",
    "Lexer",
    "Token",
    "TokenPoint",
    "TokenSymbol",
    "LexerError",
    "LexerModule",
    "LexerErrorKind",
]
