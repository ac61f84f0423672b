"""
Tests for clex.errors
=====================

Location rendering and error message formatting.
"""

import pytest

from clex.errors import (
    ClexError,
    LexerError,
    Location,
    NumericLiteralOverflowError,
    UnknownEscapeSequenceError,
    UnknownTokenError,
    UnterminatedCharLiteralError,
    UnterminatedStringLiteralError,
)
from clex.lexer import tokenize


# =============================================================================
# Location
# =============================================================================

class TestLocation:
    """Zero-based storage, one-based display."""

    def test_str_is_one_based(self):
        assert str(Location("a.c", 0, 0)) == "a.c:1:1"
        assert str(Location("a.c", 4, 9)) == "a.c:5:10"

    def test_display_properties(self):
        loc = Location("a.c", 2, 3)
        assert (loc.line, loc.col) == (3, 4)

    def test_equality(self):
        assert Location("a.c", 1, 1) == Location("a.c", 1, 1)


# =============================================================================
# Formatting
# =============================================================================

class TestFormatting:
    """Messages follow 'file:line:col: error: message' with context."""

    def test_full_format(self):
        error = LexerError(
            "boom",
            Location("f.c", 2, 4),
            hint="fix it",
            source_line="abcdefg",
        )
        assert str(error) == (
            "f.c:3:5: error: boom\n"
            "    abcdefg\n"
            "        ^\n"
            "hint: fix it"
        )

    def test_without_location(self):
        assert str(LexerError("boom")) == "error: boom"

    def test_caret_at_first_column(self):
        error = LexerError("boom", Location("f.c", 0, 0), source_line="@")
        assert str(error).splitlines()[2] == "    ^"

    def test_lexer_error_context(self):
        """Errors raised by the lexer carry the offending line."""
        with pytest.raises(UnknownTokenError) as exc_info:
            tokenize("int x;\nx @ 1;", "m.c")
        lines = str(exc_info.value).splitlines()
        assert lines[0] == "m.c:2:3: error: unknown token '@'"
        assert lines[1] == "    x @ 1;"
        assert lines[2] == "      ^"


# =============================================================================
# Hierarchy
# =============================================================================

class TestHierarchy:
    """Every lexer error can be caught as LexerError or ClexError."""

    @pytest.mark.parametrize("error", [
        UnterminatedStringLiteralError(),
        UnterminatedCharLiteralError(),
        UnknownEscapeSequenceError("\\q"),
        UnknownTokenError("@"),
        NumericLiteralOverflowError("9999999999"),
    ])
    def test_subclasses(self, error):
        assert isinstance(error, LexerError)
        assert isinstance(error, ClexError)
        assert error.message in str(error)

    def test_payload_attributes(self):
        assert UnknownEscapeSequenceError("\\q").sequence == "\\q"
        assert UnknownTokenError("=(").lexeme == "=("
        assert NumericLiteralOverflowError("9999999999").literal == "9999999999"
