"""
KPL Tokens
==========

Token symbols, the keyword table and the Token value produced by the lexer.

Payloads
--------
| Symbol    | value type | Meaning                                  |
|-----------|------------|------------------------------------------|
| IDENTITY  | str        | identifier text                          |
| NATURAL   | int        | decimal literal, signed 64-bit           |
| MACHINE   | int        | binary/hex literal, unsigned 64-bit      |
| REAL      | float      | real literal                             |
| NONE      | int        | raw byte of an unrecognized character    |
| (others)  | None       |                                          |
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


# =============================================================================
# Token Symbol Enumeration
# =============================================================================

class TokenSymbol(Enum):
    """Lexical kinds of the KPL language."""

    # === Structural ===
    END = auto()            # End of input
    NONE = auto()           # Unrecognized character
    COMMENT = auto()        # \\ line or \* block *\ comment

    # === Identifiers and Literals ===
    IDENTITY = auto()       # Identifier
    NATURAL = auto()        # Decimal integer literal
    MACHINE = auto()        # Binary or hexadecimal literal
    REAL = auto()           # Real literal

    # === Keywords ===
    PROCEDURE = auto()      # procedure
    DATUM = auto()          # datum
    GIVE = auto()           # give

    # === Keywords - Primitive Types ===
    NAT8 = auto()
    NAT16 = auto()
    NAT32 = auto()
    NAT64 = auto()
    INT8 = auto()
    INT16 = auto()
    INT32 = auto()
    INT64 = auto()

    # === Punctuators ===
    LEFT_BRACE = auto()         # {
    RIGHT_BRACE = auto()        # }
    LEFT_PARENTHESIS = auto()   # (
    RIGHT_PARENTHESIS = auto()  # )
    LEFT_BRACKET = auto()       # [
    RIGHT_BRACKET = auto()      # ]
    QUOTE = auto()              # "
    COMMA = auto()              # ,
    SEMICOLON = auto()          # ;
    EXCLAMATION = auto()        # !
    QUESTION = auto()           # ?
    AT = auto()                 # @
    SLOSH = auto()              # lone backslash
    COLON = auto()              # :
    DOUBLE_COLON = auto()       # ::
    RIGHT_ARROW = auto()        # ->

    # === Operators ===
    LESSER = auto()             # <
    LESSER_EQUIVALENT = auto()  # <=
    GREATER = auto()            # >
    GREATER_EQUIVALENT = auto() # >=
    LEFT_SHIFT = auto()         # <<
    RIGHT_SHIFT = auto()        # >< (legacy) or >>
    PLUS = auto()               # +
    INCREMENT = auto()          # ++ (and -- in the legacy table)
    MINUS = auto()              # -
    DECREMENT = auto()          # -- (modern table only)
    AND = auto()                # &
    DOUBLE_AND = auto()         # &&
    LINE = auto()               # |
    DOUBLE_LINE = auto()        # |+ (legacy) or ||
    EQUAL = auto()              # =
    EQUIVALENT = auto()         # ==


# =============================================================================
# Keyword Mapping
# =============================================================================

KEYWORDS: dict[str, TokenSymbol] = {
    "procedure": TokenSymbol.PROCEDURE,
    "datum": TokenSymbol.DATUM,
    "give": TokenSymbol.GIVE,

    # Primitive numeric types
    "Nat8": TokenSymbol.NAT8,
    "Nat16": TokenSymbol.NAT16,
    "Nat32": TokenSymbol.NAT32,
    "Nat64": TokenSymbol.NAT64,
    "Int8": TokenSymbol.INT8,
    "Int16": TokenSymbol.INT16,
    "Int32": TokenSymbol.INT32,
    "Int64": TokenSymbol.INT64,
}

TYPE_KEYWORDS = frozenset({
    TokenSymbol.NAT8,
    TokenSymbol.NAT16,
    TokenSymbol.NAT32,
    TokenSymbol.NAT64,
    TokenSymbol.INT8,
    TokenSymbol.INT16,
    TokenSymbol.INT32,
    TokenSymbol.INT64,
})

# Payload type carried by each symbol that has one
PAYLOAD_TYPES: dict[TokenSymbol, type] = {
    TokenSymbol.IDENTITY: str,
    TokenSymbol.NATURAL: int,
    TokenSymbol.MACHINE: int,
    TokenSymbol.REAL: float,
    TokenSymbol.NONE: int,
}


# =============================================================================
# Token Data Classes
# =============================================================================

@dataclass(frozen=True, order=True)
class TokenPoint:
    """A 1-based (line, column) source position."""
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


TokenValue = Union[str, int, float, None]


@dataclass(frozen=True)
class Token:
    """
    A single token from KPL source.

    Attributes:
        symbol: The TokenSymbol classification
        value: The payload (see module docstring), None for payload-less symbols
        start: Position of the first byte of the token
        end: Position of the last byte of the token
    """
    symbol: TokenSymbol
    value: TokenValue
    start: TokenPoint
    end: TokenPoint

    def __post_init__(self):
        expected = PAYLOAD_TYPES.get(self.symbol)
        if expected is None:
            if self.value is not None:
                raise TypeError(f"{self.symbol.name} token carries no value")
        elif type(self.value) is not expected:
            raise TypeError(
                f"{self.symbol.name} token needs a {expected.__name__} value, "
                f"got {type(self.value).__name__}"
            )

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.value is not None:
            return f"Token({self.symbol.name}, {self.value!r}, {self.start}-{self.end})"
        return f"Token({self.symbol.name}, {self.start}-{self.end})"

    def _payload(self, symbol: TokenSymbol):
        if self.symbol is not symbol:
            raise TypeError(f"{self.symbol.name} token has no {symbol.name.lower()} payload")
        return self.value

    @property
    def identity(self) -> str:
        """Identifier text of an IDENTITY token."""
        return self._payload(TokenSymbol.IDENTITY)

    @property
    def natural(self) -> int:
        """Value of a NATURAL token."""
        return self._payload(TokenSymbol.NATURAL)

    @property
    def machine(self) -> int:
        """Value of a MACHINE token."""
        return self._payload(TokenSymbol.MACHINE)

    @property
    def real(self) -> float:
        """Value of a REAL token."""
        return self._payload(TokenSymbol.REAL)

    @property
    def byte(self) -> int:
        """Raw byte of a NONE (unrecognized character) token."""
        return self._payload(TokenSymbol.NONE)

    def is_keyword(self) -> bool:
        return self.symbol in KEYWORDS.values()

    def is_type_keyword(self) -> bool:
        """Return True if this token names a primitive numeric type."""
        return self.symbol in TYPE_KEYWORDS
