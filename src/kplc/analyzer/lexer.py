"""
KPL Lexer (Tokenizer)
=====================

This module implements the lexer for KPL, a small statically-typed language.
It converts source bytes into a stream of tokens for the parser, one token
per call to `next_token()`.

Token Categories
----------------
- Keywords: procedure, datum, give, Nat8..Nat64, Int8..Int64
- Identifiers: letters, digits and underscores, not starting with a digit
- Numbers: natural (123), binary (0b1010), hexadecimal (0x1F), real (3.14)
- Operators and punctuators: < <= << > >= :: -> && == ...
- Comments: returned as COMMENT tokens, never skipped by next_token()

Number Formats
--------------
| Format      | Prefix  | Example    | Symbol   | Value      |
|-------------|---------|------------|----------|------------|
| Natural     | (none)  | 1_000      | NATURAL  | 1000       |
| Binary      | 0b/0B   | 0b1010     | MACHINE  | 10         |
| Hexadecimal | 0x/0X   | 0x1F       | MACHINE  | 31         |
| Real        | (none)  | 3.14       | REAL     | 3.14       |
| Scientific  | (none)  | 2.5e3      | REAL     | 2500.0     |

Underscores inside a digit run are separators and are ignored. Leading
zeros collapse: 00123 is 123.

Comments
--------
- Line: \\\\ comment (to end of line)
- Block: \\* comment *\\

Example Usage
-------------
>>> from kplc.analyzer.lexer import Lexer
>>> with Lexer(b"datum x = 0x1F;") as lexer:
...     for token in lexer.tokenize():
...         print(token)
Token(DATUM, 1:1-1:5)
Token(IDENTITY, 'x', 1:7-1:7)
Token(EQUAL, 1:9-1:9)
Token(MACHINE, 31, 1:11-1:14)
Token(SEMICOLON, 1:15-1:15)
Token(END, 1:16-1:15)
"""

import logging
from typing import Callable, Iterator, Optional, Union

from kplc.config import LexerOptions
from kplc.errors import LexerClosedError, SourceLocation
from kplc.analyzer.errors import (
    LexerError,
    LexerErrorKind,
    LexerModule,
    make_lexer_error,
)
from kplc.analyzer.tokens import KEYWORDS, Token, TokenPoint, TokenSymbol, TokenValue
from kplc.text import (
    convert_to_integer,
    convert_to_natural,
    convert_to_real,
    is_alphabetic,
    is_hexadecimal,
    is_numeric,
    is_whitespace,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Symbol Tables
# =============================================================================

SINGLE_SYMBOLS: dict[str, TokenSymbol] = {
    "{": TokenSymbol.LEFT_BRACE,
    "}": TokenSymbol.RIGHT_BRACE,
    "(": TokenSymbol.LEFT_PARENTHESIS,
    ")": TokenSymbol.RIGHT_PARENTHESIS,
    "[": TokenSymbol.LEFT_BRACKET,
    "]": TokenSymbol.RIGHT_BRACKET,
    '"': TokenSymbol.QUOTE,
    ",": TokenSymbol.COMMA,
    ";": TokenSymbol.SEMICOLON,
    "!": TokenSymbol.EXCLAMATION,
    "?": TokenSymbol.QUESTION,
    "@": TokenSymbol.AT,
    "\\": TokenSymbol.SLOSH,
    "<": TokenSymbol.LESSER,
    ">": TokenSymbol.GREATER,
    ":": TokenSymbol.COLON,
    "+": TokenSymbol.PLUS,
    "-": TokenSymbol.MINUS,
    "&": TokenSymbol.AND,
    "|": TokenSymbol.LINE,
    "=": TokenSymbol.EQUAL,
}

DOUBLE_SYMBOLS: dict[str, TokenSymbol] = {
    "<=": TokenSymbol.LESSER_EQUIVALENT,
    "<<": TokenSymbol.LEFT_SHIFT,
    ">=": TokenSymbol.GREATER_EQUIVALENT,
    "::": TokenSymbol.DOUBLE_COLON,
    "++": TokenSymbol.INCREMENT,
    "->": TokenSymbol.RIGHT_ARROW,
    "&&": TokenSymbol.DOUBLE_AND,
    "==": TokenSymbol.EQUIVALENT,
}

# Historical spellings kept for compatibility with existing sources
LEGACY_DOUBLE_SYMBOLS: dict[str, TokenSymbol] = {
    "><": TokenSymbol.RIGHT_SHIFT,
    "--": TokenSymbol.INCREMENT,
    "|+": TokenSymbol.DOUBLE_LINE,
}

MODERN_DOUBLE_SYMBOLS: dict[str, TokenSymbol] = {
    ">>": TokenSymbol.RIGHT_SHIFT,
    "--": TokenSymbol.DECREMENT,
    "||": TokenSymbol.DOUBLE_LINE,
}

LINE_COMMENT = "\\\\"
BLOCK_COMMENT_OPEN = "\\*"
BLOCK_COMMENT_CLOSE = "*\\"

Scanned = tuple[TokenSymbol, TokenValue]


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes KPL source.

    The lexer owns its source buffer until `close()` is called. The buffer
    ends at its first zero byte or at its length, whichever comes first;
    nothing beyond that point is ever read.

    Usage:
        lexer = Lexer(source_bytes, filename)
        token = lexer.next_token()
        ...
        lexer.close()

    After the END token has been produced, further calls keep returning END
    tokens at the same position.

    Attributes:
        source: The source being tokenized, one character per byte
        filename: Name of the source file (for error reporting)
        options: LexerOptions in effect
    """

    def __init__(
        self,
        source: Union[bytes, bytearray, str],
        filename: str = "<input>",
        options: Optional[LexerOptions] = None,
    ):
        """
        Initialize the lexer with source code.

        Args:
            source: Source bytes; str input is encoded as UTF-8
            filename: Name of the source file (for error messages)
            options: Lexer options (default: LexerOptions())
        """
        data = source.encode("utf-8") if isinstance(source, str) else bytes(source)
        terminator = data.find(b"\0")
        if terminator != -1:
            data = data[:terminator]

        # Latin-1 maps every byte to exactly one character
        self.source: Optional[str] = data.decode("latin-1")
        self.filename = filename
        self.options = options or LexerOptions()

        self._pos = 0
        self._line = 1
        self._column = 1
        self._last_point = TokenPoint(1, 0)

        self._line_start_pos = 0
        self._token_line_start_pos = 0

        self._double_symbols = dict(DOUBLE_SYMBOLS)
        if self.options.legacy_operators:
            self._double_symbols.update(LEGACY_DOUBLE_SYMBOLS)
        else:
            self._double_symbols.update(MODERN_DOUBLE_SYMBOLS)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    @property
    def closed(self) -> bool:
        return self.source is None

    def close(self) -> None:
        """Release the source buffer. Closing twice is harmless."""
        if self.source is None:
            return
        logger.debug(f"Closing lexer for {self.filename} at {self._line}:{self._column}")
        self.source = None

    def __enter__(self) -> "Lexer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # =========================================================================
    # Driver
    # =========================================================================

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Comments are returned as COMMENT tokens; call again to get past them.
        A token's end is the position of its last consumed byte, so a block
        comment that runs into end of input ends on the byte it last read.

        Raises:
            LexerError: If the token at the cursor is malformed
            LexerClosedError: If the lexer has been closed
        """
        if self.source is None:
            raise LexerClosedError(self.filename)

        while is_whitespace(self._peek()):
            self._advance()

        if self._at_end():
            logger.debug(f"End of input in {self.filename} at {self._line}:{self._column}")
            return Token(
                TokenSymbol.END,
                None,
                TokenPoint(self._line, self._column),
                TokenPoint(self._line, self._column - 1),
            )

        start = TokenPoint(self._line, self._column)
        self._token_line_start_pos = self._line_start_pos
        char = self._peek()

        if is_alphabetic(char) or char == "_":
            symbol, value = self._scan_identifier(start)
        elif is_numeric(char):
            symbol, value = self._scan_number(start)
        else:
            symbol, value = self._scan_symbol(start)

        return Token(symbol, value, start, self._last_point)

    def tokenize(self, skip_comments: bool = True) -> Iterator[Token]:
        """
        Generate tokens up to and including the first END token.

        Args:
            skip_comments: Drop COMMENT tokens from the stream

        Raises:
            LexerError: If invalid input is encountered
        """
        while True:
            token = self.next_token()
            if skip_comments and token.symbol is TokenSymbol.COMMENT:
                continue
            yield token
            if token.symbol is TokenSymbol.END:
                return

    def peek_token(self) -> Token:
        """
        Scan the next token without consuming it.

        The lexer state is restored afterwards, also when scanning fails.
        """
        saved = (
            self._pos,
            self._line,
            self._column,
            self._last_point,
            self._line_start_pos,
            self._token_line_start_pos,
        )
        try:
            return self.next_token()
        finally:
            (
                self._pos,
                self._line,
                self._column,
                self._last_point,
                self._line_start_pos,
                self._token_line_start_pos,
            ) = saved

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self.source)

    def _peek(self, offset: int = 0) -> str:
        """
        Look at the character at the cursor + offset without advancing.

        Returns empty string if past end of source.
        """
        pos = self._pos + offset
        if pos >= len(self.source):
            return ""
        return self.source[pos]

    def _advance(self) -> str:
        """
        Consume and return the current character, advancing position.

        A consumed newline moves to column 1 of the next line.
        """
        if self._at_end():
            return ""

        char = self.source[self._pos]
        self._last_point = TokenPoint(self._line, self._column)
        self._pos += 1

        if char == "\n":
            self._line += 1
            self._column = 1
            self._line_start_pos = self._pos
        else:
            self._column += 1

        return char

    # =========================================================================
    # Errors
    # =========================================================================

    def _error(
        self,
        module: LexerModule,
        kind: LexerErrorKind,
        start: TokenPoint,
        message: str,
        hint: Optional[str] = None,
    ) -> LexerError:
        """
        Create a lexer fault located at the start of the current token.

        Returns:
            LexerError subclass matching kind
        """
        line_end = self.source.find("\n", self._token_line_start_pos)
        if line_end == -1:
            line_end = len(self.source)
        source_line = self.source[self._token_line_start_pos:line_end]

        logger.debug(f"Lexer fault {module.name}/{kind.name} at {self.filename}:{start}: {message}")
        return make_lexer_error(
            module,
            kind,
            message,
            location=SourceLocation(self.filename, start.line, start.column),
            hint=hint,
            source_line=source_line,
        )

    # =========================================================================
    # Identifiers and Keywords
    # =========================================================================

    def _scan_identifier(self, start: TokenPoint) -> Scanned:
        """
        Scan an identifier or keyword.

        Keywords are matched exactly and case-sensitively after the whole
        run has been read, so `procedures` is an identifier.
        """
        limit = self.options.max_identifier_length
        chars = []
        while self._is_identity_char(self._peek()):
            if len(chars) >= limit:
                raise self._error(
                    LexerModule.ALPHABETIC,
                    LexerErrorKind.OUT_OF_RANGE,
                    start,
                    f"identifier longer than {limit} characters",
                    hint="shorten the identifier",
                )
            chars.append(self._advance())

        name = "".join(chars)
        if name in KEYWORDS:
            return KEYWORDS[name], None
        return TokenSymbol.IDENTITY, name

    @staticmethod
    def _is_identity_char(char: str) -> bool:
        return is_alphabetic(char) or is_numeric(char) or char == "_"

    # =========================================================================
    # Numbers
    # =========================================================================

    def _scan_number(self, start: TokenPoint) -> Scanned:
        """
        Scan a numeric literal.

        Handles:
        - Natural: 123, 1_000, 00123
        - Binary: 0b1010 or 0B1010
        - Hexadecimal: 0x1F or 0X1F
        - Real: 3.14, 0.5, 2.5e3
        - A bare 0
        """
        if self._peek() == "0":
            self._advance()
            char = self._peek()
            if char == "0":
                while self._peek() == "0":
                    self._advance()
            elif char in ("b", "B"):
                self._advance()
                return self._scan_binary(start)
            elif char in ("x", "X"):
                self._advance()
                return self._scan_hexadecimal(start)

        if self._is_decimal_digit(self._peek()):
            return self._scan_natural(start, [])
        if self._peek() == ".":
            return self._scan_real(start, [])
        return TokenSymbol.NATURAL, 0

    @staticmethod
    def _is_decimal_digit(char: str) -> bool:
        return is_numeric(char) or char == "_"

    @staticmethod
    def _is_binary_digit(char: str) -> bool:
        return char in ("0", "1", "_")

    @staticmethod
    def _is_hexadecimal_digit(char: str) -> bool:
        return is_hexadecimal(char) or char == "_"

    def _put_digit(self, chars: list[str]) -> None:
        """Consume one digit-run character, dropping separators."""
        char = self._advance()
        if char != "_":
            chars.append(char)

    def _convert(
        self,
        module: LexerModule,
        start: TokenPoint,
        convert: Callable[..., Union[int, float]],
        *args,
    ) -> Union[int, float]:
        """Run a text-to-number conversion, turning its failures into faults."""
        try:
            return convert(*args)
        except OverflowError as e:
            raise self._error(
                module, LexerErrorKind.OUT_OF_RANGE, start, f"literal out of range: {e}"
            ) from e
        # Scanners only collect digits their converter accepts
        except ValueError as e:
            raise self._error(
                module, LexerErrorKind.INCONVERTIBLE, start, f"cannot convert literal: {e}"
            ) from e

    def _scan_machine_digits(
        self,
        start: TokenPoint,
        module: LexerModule,
        is_digit: Callable[[str], bool],
        base: int,
        name: str,
        prefix: str,
    ) -> Scanned:
        """Scan the digits of a binary or hexadecimal literal after its prefix."""
        if not is_digit(self._peek()):
            raise self._error(
                module,
                LexerErrorKind.WRONG_FORMAT,
                start,
                f"expected {name} digit after '{prefix}'",
            )

        chars = []
        while is_digit(self._peek()):
            self._put_digit(chars)

        if not chars:
            raise self._error(
                module,
                LexerErrorKind.VALUELESS,
                start,
                f"{name} literal has no digits",
                hint=f"add at least one {name} digit after '{prefix}'",
            )

        value = self._convert(module, start, convert_to_natural, "".join(chars), base)
        return TokenSymbol.MACHINE, value

    def _scan_binary(self, start: TokenPoint) -> Scanned:
        return self._scan_machine_digits(
            start, LexerModule.BINARY, self._is_binary_digit, 2, "binary", "0b"
        )

    def _scan_hexadecimal(self, start: TokenPoint) -> Scanned:
        return self._scan_machine_digits(
            start, LexerModule.HEXADECIMAL, self._is_hexadecimal_digit, 16, "hexadecimal", "0x"
        )

    def _scan_natural(self, start: TokenPoint, chars: list[str]) -> Scanned:
        """Scan a decimal run, handing over to the real scanner on '.'."""
        while self._is_decimal_digit(self._peek()):
            self._put_digit(chars)
            if self._peek() == ".":
                return self._scan_real(start, chars)

        if not chars:
            raise self._error(
                LexerModule.NATURAL,
                LexerErrorKind.VALUELESS,
                start,
                "natural literal has no digits",
            )

        value = self._convert(LexerModule.NATURAL, start, convert_to_integer, "".join(chars))
        return TokenSymbol.NATURAL, value

    def _scan_real(self, start: TokenPoint, chars: list[str]) -> Scanned:
        """
        Scan the fraction (and optional exponent) of a real literal.

        The cursor is on the decimal point; chars holds the integer digits
        read so far, possibly none.
        """
        chars.append(self._advance())

        if not self._is_decimal_digit(self._peek()):
            raise self._error(
                LexerModule.REAL,
                LexerErrorKind.WRONG_FORMAT,
                start,
                "expected digit after decimal point",
            )

        mark = len(chars)
        while self._is_decimal_digit(self._peek()):
            self._put_digit(chars)
            if self._peek() == ".":
                raise self._error(
                    LexerModule.REAL,
                    LexerErrorKind.WRONG_FORMAT,
                    start,
                    "second decimal point in real literal",
                )

        if len(chars) == mark:
            raise self._error(
                LexerModule.REAL,
                LexerErrorKind.VALUELESS,
                start,
                "real literal has no digits after the decimal point",
            )

        module = LexerModule.REAL
        if self.options.scientific_literals and self._peek() in ("e", "E"):
            module = LexerModule.SCIENTIFIC
            self._scan_exponent(start, chars)

        value = self._convert(module, start, convert_to_real, "".join(chars))
        return TokenSymbol.REAL, value

    def _scan_exponent(self, start: TokenPoint, chars: list[str]) -> None:
        """Scan 'e', an optional sign and the exponent digits into chars."""
        chars.append(self._advance())
        if self._peek() in ("+", "-"):
            chars.append(self._advance())

        if not self._is_decimal_digit(self._peek()):
            raise self._error(
                LexerModule.SCIENTIFIC,
                LexerErrorKind.INCOMPLETE,
                start,
                "exponent has no digits",
                hint="write the exponent as e.g. 1.5e3 or 1.5e-3",
            )

        mark = len(chars)
        while self._is_decimal_digit(self._peek()):
            self._put_digit(chars)

        if len(chars) == mark:
            raise self._error(
                LexerModule.SCIENTIFIC,
                LexerErrorKind.VALUELESS,
                start,
                "exponent has no digits",
            )
        if self._peek() == ".":
            raise self._error(
                LexerModule.SCIENTIFIC,
                LexerErrorKind.WRONG_FORMAT,
                start,
                "decimal point in exponent",
            )

    # =========================================================================
    # Operators, Punctuators and Comments
    # =========================================================================

    def _scan_symbol(self, start: TokenPoint) -> Scanned:
        """
        Scan an operator, punctuator or comment.

        Two-character forms are tried before their one-character prefix.
        A character that matches nothing becomes a NONE token carrying its
        byte value; rejecting it is left to the parser.
        """
        char = self._peek()
        pair = char + self._peek(1)

        if pair == LINE_COMMENT:
            return self._scan_line_comment()
        if pair == BLOCK_COMMENT_OPEN:
            return self._scan_block_comment(start)

        symbol = self._double_symbols.get(pair)
        if symbol is not None:
            self._advance()
            self._advance()
            return symbol, None

        self._advance()
        symbol = SINGLE_SYMBOLS.get(char)
        if symbol is not None:
            return symbol, None
        return TokenSymbol.NONE, ord(char)

    def _scan_line_comment(self) -> Scanned:
        """Consume a line comment up to, not including, the newline."""
        self._advance()
        self._advance()
        while not self._at_end() and self._peek() != "\n":
            self._advance()
        return TokenSymbol.COMMENT, None

    def _scan_block_comment(self, start: TokenPoint) -> Scanned:
        """
        Consume a block comment through its closing '*\\'.

        Raises:
            IncompleteError: If input ends first and strict_comments is set
        """
        self._advance()
        self._advance()

        while not self._at_end():
            if self._peek() == "*" and self._peek(1) == "\\":
                self._advance()
                self._advance()
                return TokenSymbol.COMMENT, None
            self._advance()

        if self.options.strict_comments:
            raise self._error(
                LexerModule.SYMBOLIC,
                LexerErrorKind.INCOMPLETE,
                start,
                "unterminated block comment",
                hint="add closing *\\ to terminate the comment",
            )
        return TokenSymbol.COMMENT, None
