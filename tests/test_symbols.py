# =============================================================================
# test_symbols.py - Operator, Punctuator and Comment Unit Tests
# =============================================================================
# Tests for the symbolic scanner:
#   - Maximal munch over one- and two-character operators
#   - The legacy and modern operator tables
#   - Single-character punctuators
#   - Line and block comments
#   - Unrecognized characters
# =============================================================================

import pytest

from kplc.analyzer.lexer import Lexer
from kplc.analyzer.tokens import TokenPoint, TokenSymbol
from kplc.analyzer.errors import IncompleteError, LexerModule
from kplc.config import LexerOptions


def tokenize(source, skip_comments=True, **options) -> list:
    """Tokenize source and drop the trailing END token."""
    with Lexer(source, "<test>", LexerOptions(**options)) as lexer:
        return list(lexer.tokenize(skip_comments=skip_comments))[:-1]


def symbols(source, **options) -> list:
    return [t.symbol for t in tokenize(source, **options)]


# =============================================================================
# Operator Tests
# =============================================================================

class TestOperators:
    """Test operator recognition with the default (legacy) table."""

    @pytest.mark.parametrize("text,expected", [
        ("<=", TokenSymbol.LESSER_EQUIVALENT),
        ("<<", TokenSymbol.LEFT_SHIFT),
        ("<", TokenSymbol.LESSER),
        (">=", TokenSymbol.GREATER_EQUIVALENT),
        ("><", TokenSymbol.RIGHT_SHIFT),
        (">", TokenSymbol.GREATER),
        ("::", TokenSymbol.DOUBLE_COLON),
        (":", TokenSymbol.COLON),
        ("++", TokenSymbol.INCREMENT),
        ("+", TokenSymbol.PLUS),
        ("--", TokenSymbol.INCREMENT),
        ("->", TokenSymbol.RIGHT_ARROW),
        ("-", TokenSymbol.MINUS),
        ("&&", TokenSymbol.DOUBLE_AND),
        ("&", TokenSymbol.AND),
        ("|+", TokenSymbol.DOUBLE_LINE),
        ("|", TokenSymbol.LINE),
        ("==", TokenSymbol.EQUIVALENT),
        ("=", TokenSymbol.EQUAL),
    ])
    def test_operator(self, text, expected):
        assert symbols(text) == [expected]

    def test_maximal_munch(self):
        """'<=' is one token, never LESSER then EQUAL."""
        assert symbols("<=") == [TokenSymbol.LESSER_EQUIVALENT]

    def test_single_then_identifier(self):
        tokens = tokenize("<x")
        assert tokens[0].symbol is TokenSymbol.LESSER
        assert tokens[0].end == TokenPoint(1, 1)
        assert tokens[1].symbol is TokenSymbol.IDENTITY
        assert tokens[1].start == TokenPoint(1, 2)

    def test_three_characters(self):
        """Only one character of lookahead: '<<=' is LEFT_SHIFT then EQUAL."""
        assert symbols("<<=") == [TokenSymbol.LEFT_SHIFT, TokenSymbol.EQUAL]

    def test_legacy_double_pipe(self):
        """In the legacy table '||' is two LINE tokens."""
        assert symbols("||") == [TokenSymbol.LINE, TokenSymbol.LINE]

    def test_legacy_greater_greater(self):
        assert symbols(">>") == [TokenSymbol.GREATER, TokenSymbol.GREATER]

    def test_operators_in_expression(self):
        assert symbols("a<=b&&c") == [
            TokenSymbol.IDENTITY,
            TokenSymbol.LESSER_EQUIVALENT,
            TokenSymbol.IDENTITY,
            TokenSymbol.DOUBLE_AND,
            TokenSymbol.IDENTITY,
        ]


class TestModernOperators:
    """Test the corrected operator table."""

    @pytest.mark.parametrize("text,expected", [
        ("--", [TokenSymbol.DECREMENT]),
        ("||", [TokenSymbol.DOUBLE_LINE]),
        (">>", [TokenSymbol.RIGHT_SHIFT]),
        ("|+", [TokenSymbol.LINE, TokenSymbol.PLUS]),
        ("><", [TokenSymbol.GREATER, TokenSymbol.LESSER]),
        ("++", [TokenSymbol.INCREMENT]),
        ("->", [TokenSymbol.RIGHT_ARROW]),
    ])
    def test_modern_table(self, text, expected):
        assert symbols(text, legacy_operators=False) == expected


# =============================================================================
# Punctuator Tests
# =============================================================================

class TestPunctuators:
    """Test single-character punctuators."""

    @pytest.mark.parametrize("text,expected", [
        ("{", TokenSymbol.LEFT_BRACE),
        ("}", TokenSymbol.RIGHT_BRACE),
        ("(", TokenSymbol.LEFT_PARENTHESIS),
        (")", TokenSymbol.RIGHT_PARENTHESIS),
        ("[", TokenSymbol.LEFT_BRACKET),
        ("]", TokenSymbol.RIGHT_BRACKET),
        ('"', TokenSymbol.QUOTE),
        (",", TokenSymbol.COMMA),
        (";", TokenSymbol.SEMICOLON),
        ("!", TokenSymbol.EXCLAMATION),
        ("?", TokenSymbol.QUESTION),
        ("@", TokenSymbol.AT),
        ("\\", TokenSymbol.SLOSH),
    ])
    def test_punctuator(self, text, expected):
        tokens = tokenize(text)
        assert [t.symbol for t in tokens] == [expected]
        assert tokens[0].value is None


# =============================================================================
# Comment Tests
# =============================================================================

class TestComments:
    """Test line and block comments."""

    def test_line_comment(self):
        tokens = tokenize("a \\\\ rest of line\nb", skip_comments=False)
        assert [t.symbol for t in tokens] == [
            TokenSymbol.IDENTITY,
            TokenSymbol.COMMENT,
            TokenSymbol.IDENTITY,
        ]
        assert tokens[1].value is None
        assert tokens[1].end == TokenPoint(1, 17)
        assert tokens[2].start == TokenPoint(2, 1)

    def test_line_comment_at_end(self):
        assert symbols("\\\\ trailing") == []

    def test_block_comment(self):
        tokens = tokenize("a \\* x\ny *\\ b", skip_comments=False)
        assert [t.symbol for t in tokens] == [
            TokenSymbol.IDENTITY,
            TokenSymbol.COMMENT,
            TokenSymbol.IDENTITY,
        ]
        assert tokens[2].value == "b"

    def test_block_comment_star_inside(self):
        assert [t.value for t in tokenize("\\* a * b *\\ c")] == ["c"]

    def test_unterminated_block_comment(self):
        """An unterminated block comment ends at end of input."""
        lexer = Lexer(b"\\* abc")
        assert lexer.next_token().symbol is TokenSymbol.COMMENT
        assert lexer.next_token().symbol is TokenSymbol.END

    def test_unterminated_block_comment_strict(self):
        with pytest.raises(IncompleteError) as excinfo:
            tokenize("x \\* abc", strict_comments=True)
        assert excinfo.value.module is LexerModule.SYMBOLIC
        assert excinfo.value.location.column == 3


# =============================================================================
# Unrecognized Character Tests
# =============================================================================

class TestUnrecognized:
    """Unknown characters become NONE tokens, never faults."""

    @pytest.mark.parametrize("text", ["#", "$", "%", "~", "`", "'", "*", "/", "^", "."])
    def test_unknown_character(self, text):
        tokens = tokenize(text)
        assert tokens[0].symbol is TokenSymbol.NONE
        assert tokens[0].byte == ord(text)

    def test_high_byte(self):
        tokens = tokenize(b"\xff")
        assert tokens[0].symbol is TokenSymbol.NONE
        assert tokens[0].byte == 0xFF

    def test_utf8_text_is_bytes(self):
        """Non-ASCII text is lexed byte by byte."""
        tokens = tokenize("é")
        assert [t.byte for t in tokens] == list("é".encode("utf-8"))

    def test_unknown_between_tokens(self):
        assert symbols("a#b") == [
            TokenSymbol.IDENTITY,
            TokenSymbol.NONE,
            TokenSymbol.IDENTITY,
        ]
