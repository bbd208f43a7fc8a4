"""
KPL Analyzer
============

Front end of the KPL compiler. This package currently provides the lexer,
which turns source bytes into classified tokens with exact source spans.

Pipeline
--------
    KPL Source -> Lexer -> Tokens -> (parser)

Usage
-----
>>> from kplc.analyzer import Lexer, TokenSymbol
>>> with Lexer(b"give 0b1010;") as lexer:
...     token = lexer.next_token()
...     token.symbol is TokenSymbol.GIVE
True
"""

from kplc.analyzer.lexer import Lexer
from kplc.analyzer.tokens import KEYWORDS, Token, TokenPoint, TokenSymbol
from kplc.analyzer.errors import (
    LexerModule,
    LexerErrorKind,
    LexerError,
    WrongFormatError,
    ValuelessError,
    IncompleteError,
    InconvertibleError,
    LexerRangeError,
)

__all__ = [
    "Lexer",
    "KEYWORDS",
    "Token",
    "TokenPoint",
    "TokenSymbol",
    "LexerModule",
    "LexerErrorKind",
    "LexerError",
    "WrongFormatError",
    "ValuelessError",
    "IncompleteError",
    "InconvertibleError",
    "LexerRangeError",
]
