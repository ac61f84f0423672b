"""
clex - Tokenizer for a C-like Language
======================================

This package converts C-like source text into a stream of classified
tokens for a parser to consume.

Main Components
---------------
- **lexer**: The pull-based scanner (Lexer, LexerOptions, tokenize)
- **tokens**: Token kinds and the Token value type
- **errors**: Source locations and the exception hierarchy
- **cli**: The ``ctok`` command that prints the tokens of a file

Quick Start
-----------
    >>> from clex import Lexer, TokenKind
    >>> lexer = Lexer("f(x);", "demo.c")
    >>> lexer.next_token()
    Token(IDENTIFIER, 'f')
    >>> lexer.expect_token(TokenKind.OPEN_PAREN)
    Token(OPEN_PAREN)
    >>> str(lexer.current_location())
    'demo.c:1:3'

Or from the command line:
    $ ctok hello.c
"""

__version__ = "0.1.0"

# =============================================================================
# Public API Exports
# =============================================================================

from clex.errors import (
    ClexError,
    Location,
    LexerError,
    UnterminatedStringLiteralError,
    UnterminatedCharLiteralError,
    UnknownEscapeSequenceError,
    UnknownTokenError,
    NumericLiteralOverflowError,
)
from clex.tokens import Token, TokenKind
from clex.lexer import Lexer, LexerOptions, tokenize

__all__ = [
    # Version
    "__version__",
    # Lexer
    "Lexer",
    "LexerOptions",
    "tokenize",
    # Tokens
    "Token",
    "TokenKind",
    # Errors
    "ClexError",
    "Location",
    "LexerError",
    "UnterminatedStringLiteralError",
    "UnterminatedCharLiteralError",
    "UnknownEscapeSequenceError",
    "UnknownTokenError",
    "NumericLiteralOverflowError",
]
