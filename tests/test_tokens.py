"""
Tests for clex.tokens
=====================

Token equality, kind-only matching and text rendering.
"""

import pytest

from clex.tokens import (
    EOF_TOKEN,
    ESCAPE_SEQUENCES,
    OPERATOR_LEXEMES,
    SINGLE_CHAR_TOKENS,
    Token,
    TokenKind,
)


# =============================================================================
# Equality and Matching
# =============================================================================

class TestMatching:
    """Structural equality versus kind-only matching."""

    def test_structural_equality(self):
        assert Token(TokenKind.INT, 1) == Token(TokenKind.INT, 1)
        assert Token(TokenKind.INT, 1) != Token(TokenKind.INT, 2)

    def test_matches_kind(self):
        assert Token(TokenKind.IDENTIFIER, "a").matches(TokenKind.IDENTIFIER)
        assert not Token(TokenKind.IDENTIFIER, "a").matches(TokenKind.STRING)

    def test_matches_token_ignores_payload(self):
        assert Token(TokenKind.INT, 1).matches(Token(TokenKind.INT, 2))
        assert not Token(TokenKind.INT, 1).matches(Token(TokenKind.CHAR, "1"))

    def test_tokens_are_hashable(self):
        """Frozen tokens can be used in sets and as dict keys."""
        assert len({Token(TokenKind.PLUS), Token(TokenKind.PLUS)}) == 1

    def test_tokens_are_immutable(self):
        token = Token(TokenKind.INT, 1)
        with pytest.raises(AttributeError):
            token.value = 2

    def test_eof_token(self):
        assert EOF_TOKEN.is_eof
        assert EOF_TOKEN == Token(TokenKind.EOF)
        assert not Token(TokenKind.SEMICOLON).is_eof


# =============================================================================
# Rendering
# =============================================================================

class TestRendering:
    """repr and text of tokens."""

    def test_repr_with_value(self):
        assert repr(Token(TokenKind.IDENTIFIER, "x")) == "Token(IDENTIFIER, 'x')"
        assert repr(Token(TokenKind.INT, 42)) == "Token(INT, 42)"

    def test_repr_without_value(self):
        assert repr(Token(TokenKind.PLUS_EQUAL)) == "Token(PLUS_EQUAL)"

    def test_operator_text(self):
        assert Token(TokenKind.SHIFT_RIGHT_EQUAL).text == ">>="

    def test_identifier_and_int_text(self):
        assert Token(TokenKind.IDENTIFIER, "main").text == "main"
        assert Token(TokenKind.INT, 7).text == "7"

    def test_string_text_escapes(self):
        assert Token(TokenKind.STRING, 'a"b\n').text == '"a\\"b\\n"'

    def test_string_text_keeps_single_quote(self):
        assert Token(TokenKind.STRING, "it's").text == '"it\'s"'

    def test_char_text(self):
        assert Token(TokenKind.CHAR, "'").text == "'\\''"
        assert Token(TokenKind.CHAR, "\t").text == "'\\t'"

    def test_eof_text(self):
        assert EOF_TOKEN.text == ""


# =============================================================================
# Tables
# =============================================================================

class TestTables:
    """Consistency of the lexeme tables."""

    def test_lexemes_unique(self):
        lexemes = list(OPERATOR_LEXEMES.values())
        assert len(lexemes) == len(set(lexemes))

    def test_single_char_tokens_agree(self):
        for char, kind in SINGLE_CHAR_TOKENS.items():
            assert OPERATOR_LEXEMES[kind] == char

    def test_no_numeric_escapes(self):
        for code in "0123456789xuU":
            assert code not in ESCAPE_SEQUENCES

    def test_literal_kinds_have_no_fixed_text(self):
        for kind in (TokenKind.IDENTIFIER, TokenKind.INT, TokenKind.FLOAT,
                     TokenKind.CHAR, TokenKind.STRING, TokenKind.EOF):
            assert kind not in OPERATOR_LEXEMES
