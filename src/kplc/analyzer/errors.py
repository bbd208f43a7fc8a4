"""
Lexer Fault Taxonomy
====================

Every fault raised while scanning a token is a LexerError. A fault carries
two independent tags:

- module: the sub-scanner that gave up (LexerModule)
- kind: what went wrong (LexerErrorKind)

Each kind has its own subclass so callers can catch a single category:

LexerError
├── WrongFormatError   - literal shape is malformed (bad digit, second point)
├── ValuelessError     - prefix or point present but no significant digits
├── IncompleteError    - construct started but never finished
├── InconvertibleError - conversion rejected the accumulated text
└── LexerRangeError    - value wider than its target, or identifier too long

The only position attached to a fault is the start of the token that was
being scanned when it occurred.
"""

from enum import Enum, IntEnum, auto
from typing import Optional

from kplc.errors import AnalyzerError, SourceLocation


class LexerModule(Enum):
    """Sub-scanner that raised a fault."""

    ALPHABETIC = auto()
    NUMERIC = auto()
    NATURAL = auto()
    BINARY = auto()
    HEXADECIMAL = auto()
    REAL = auto()
    SCIENTIFIC = auto()
    SYMBOLIC = auto()


class LexerErrorKind(IntEnum):
    """Category of a lexer fault."""

    WRONG_FORMAT = 1
    VALUELESS = 2
    INCOMPLETE = 3
    INCONVERTIBLE = 4
    OUT_OF_RANGE = 5


# Default wording per kind, used when the scanner gives no better message
_DEFAULT_MESSAGES = {
    LexerErrorKind.WRONG_FORMAT: "malformed literal",
    LexerErrorKind.VALUELESS: "literal has no significant digits",
    LexerErrorKind.INCOMPLETE: "incomplete token",
    LexerErrorKind.INCONVERTIBLE: "literal cannot be converted",
    LexerErrorKind.OUT_OF_RANGE: "value out of range",
}


class LexerError(AnalyzerError):
    """
    A fault raised by one of the lexer's sub-scanners.

    Attributes:
        module: The LexerModule that raised the fault
        kind: The LexerErrorKind of the fault
        location: Start of the token being scanned
    """

    kind: LexerErrorKind = LexerErrorKind.WRONG_FORMAT

    def __init__(
        self,
        module: LexerModule,
        message: Optional[str] = None,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.module = module
        super().__init__(
            message or _DEFAULT_MESSAGES[self.kind],
            location=location,
            hint=hint,
            source_line=source_line,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.module.name}, {self.kind.name}, {self.location})"


class WrongFormatError(LexerError):
    """
    Malformed literal shape.

    Examples:
        0b2      # '2' is not a binary digit
        0x       # prefix with nothing after it
        1.2.3    # second decimal point
    """
    kind = LexerErrorKind.WRONG_FORMAT


class ValuelessError(LexerError):
    """
    A prefix or decimal point was present but only separators followed.

    Example:
        0b___
    """
    kind = LexerErrorKind.VALUELESS


class IncompleteError(LexerError):
    """
    A construct was started but its mandatory tail never arrived.

    Examples:
        1.5e         # exponent marker without digits
        \\* abc       # unterminated block comment (strict mode only)
    """
    kind = LexerErrorKind.INCOMPLETE


class InconvertibleError(LexerError):
    """The numeric conversion rejected the accumulated text."""
    kind = LexerErrorKind.INCONVERTIBLE


class LexerRangeError(LexerError):
    """A literal exceeds its target width, or an identifier its length cap."""
    kind = LexerErrorKind.OUT_OF_RANGE


ERROR_CLASSES: dict[LexerErrorKind, type[LexerError]] = {
    LexerErrorKind.WRONG_FORMAT: WrongFormatError,
    LexerErrorKind.VALUELESS: ValuelessError,
    LexerErrorKind.INCOMPLETE: IncompleteError,
    LexerErrorKind.INCONVERTIBLE: InconvertibleError,
    LexerErrorKind.OUT_OF_RANGE: LexerRangeError,
}


def make_lexer_error(
    module: LexerModule,
    kind: LexerErrorKind,
    message: Optional[str] = None,
    location: Optional[SourceLocation] = None,
    hint: Optional[str] = None,
    source_line: Optional[str] = None,
) -> LexerError:
    """Build the LexerError subclass matching kind."""
    return ERROR_CLASSES[kind](
        module,
        message,
        location=location,
        hint=hint,
        source_line=source_line,
    )
