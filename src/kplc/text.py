"""
Text Utilities
==============

Single-byte character classification and fixed-width numeric conversion
used by the analyzer. Characters are one-character strings holding a single
byte (the lexer decodes its source as Latin-1); the empty string stands for
end of input and is never classified as anything.

Conversions mirror C library semantics with explicit 64-bit limits:

| Function            | Result range          | Failure                 |
|---------------------|-----------------------|-------------------------|
| convert_to_natural  | 0 .. 2**64 - 1        | ValueError, OverflowError |
| convert_to_integer  | -2**63 .. 2**63 - 1   | ValueError, OverflowError |
| convert_to_real     | finite float          | ValueError, OverflowError |
"""

import math
import string

NATURAL_MAX = 2**64 - 1
INTEGER_MIN = -(2**63)
INTEGER_MAX = 2**63 - 1

WHITESPACE = " \t\n\v\f\r"
ALPHABETIC = string.ascii_letters
NUMERIC = string.digits
HEXADECIMAL = string.hexdigits


def is_whitespace(char: str) -> bool:
    return char != "" and char in WHITESPACE


def is_alphabetic(char: str) -> bool:
    return char != "" and char in ALPHABETIC


def is_numeric(char: str) -> bool:
    return char != "" and char in NUMERIC


def is_hexadecimal(char: str) -> bool:
    return char != "" and char in HEXADECIMAL


def convert_to_natural(text: str, base: int = 10) -> int:
    """
    Convert text to an unsigned 64-bit value.

    Raises:
        ValueError: text is empty or holds a character invalid in base
        OverflowError: value does not fit in 64 bits
    """
    if not 2 <= base <= 36:
        raise ValueError(f"unsupported base {base}")
    digits = (string.digits + string.ascii_lowercase)[:base]
    if not text or not all(c.lower() in digits for c in text):
        raise ValueError(f"invalid base-{base} text: {text!r}")
    value = int(text, base)
    if value > NATURAL_MAX:
        raise OverflowError(f"{text!r} exceeds 64-bit unsigned range")
    return value


def convert_to_integer(text: str) -> int:
    """
    Convert decimal text (optionally signed) to a signed 64-bit value.

    Raises:
        ValueError: text is not a decimal integer
        OverflowError: value does not fit in a signed 64-bit integer
    """
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not digits or not all(c in NUMERIC for c in digits):
        raise ValueError(f"invalid decimal text: {text!r}")
    value = int(text, 10)
    if not INTEGER_MIN <= value <= INTEGER_MAX:
        raise OverflowError(f"{text!r} exceeds 64-bit signed range")
    return value


def convert_to_real(text: str) -> float:
    """
    Convert decimal text to a finite 64-bit float.

    Raises:
        ValueError: text is not a decimal floating-point literal
        OverflowError: value is too large to be represented
    """
    # float() also accepts "inf", "nan" and underscores, none of which are literals
    if not text or any(c not in "0123456789.eE+-" for c in text):
        raise ValueError(f"invalid real text: {text!r}")
    value = float(text)
    if math.isinf(value):
        raise OverflowError(f"{text!r} exceeds 64-bit float range")
    return value
