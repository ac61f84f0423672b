"""
clex Error Hierarchy
====================

This module defines the exception hierarchy for the clex tokenizer.
All exceptions inherit from ClexError, allowing callers to catch every
library error with a single except clause if desired.

Exception Hierarchy
-------------------
ClexError (base)
└── LexerError - malformed input found while scanning
    ├── UnterminatedStringLiteralError - missing closing double quote
    ├── UnterminatedCharLiteralError - missing or misplaced closing quote
    ├── UnknownEscapeSequenceError - unsupported character after backslash
    ├── UnknownTokenError - character (or operator pair) matches no rule
    └── NumericLiteralOverflowError - integer literal exceeds 32 bits

Error Message Format
--------------------
Every lexer error carries the position it was detected at and renders
like this:

    hello.c:3:9: error: unknown escape sequence '\\q'
        puts("\\q");
                ^
    hint: supported escapes are \\a \\b \\e \\f \\v \\? \\n \\r \\t \\' \\" \\\\
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class ClexError(Exception):
    """
    Base exception for all clex errors.

        try:
            tokens = tokenize(source, "main.c")
        except ClexError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class Location:
    """
    A position in source code for diagnostics.

    Row and column are stored zero-based, exactly as the lexer counts
    them. They are rendered one-based when formatted for humans.

    Attributes:
        filepath: Label of the source file (or "<input>" for string input)
        row: Line index (0-indexed)
        column: Character offset within the line (0-indexed)
    """
    filepath: str
    row: int
    column: int

    @property
    def line(self) -> int:
        """One-based line number for display."""
        return self.row + 1

    @property
    def col(self) -> int:
        """One-based column number for display."""
        return self.column + 1

    def __str__(self) -> str:
        """Format as 'filepath:line:col' for error messages."""
        return f"{self.filepath}:{self.line}:{self.col}"


# =============================================================================
# Lexer Exceptions
# =============================================================================

class LexerError(ClexError):
    """
    Base exception for malformed input found while scanning.

    Attributes:
        message: The error description
        location: Where in the source the error was detected (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text of the offending line (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[Location] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            main.c:1:5: error: unknown token '@'
                int @x;
                    ^
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Caret sits under the zero-based column
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            padding = " " * (4 + self.location.column)
            parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class UnterminatedStringLiteralError(LexerError):
    """
    End of input reached before the closing double quote.

    Example:
        char *s = "hello
    """

    def __init__(
        self,
        location: Optional[Location] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "unterminated string literal",
            location=location,
            hint="add closing '\"' to complete the string",
            source_line=source_line,
        )


class UnterminatedCharLiteralError(LexerError):
    """
    Character literal that is empty, too long, or never closed.

    A character literal holds exactly one literal or escaped character
    between single quotes.
    """

    def __init__(
        self,
        reason: str = "unterminated character literal",
        location: Optional[Location] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            reason,
            location=location,
            hint="character literals hold exactly one character, e.g. 'a' or '\\n'",
            source_line=source_line,
        )


class UnknownEscapeSequenceError(LexerError):
    """
    Unsupported character after a backslash.

    Numeric escapes (\\0, \\x41, \\u00e9, ...) are deliberately not
    supported and end up here as well.
    """

    def __init__(
        self,
        sequence: str,
        location: Optional[Location] = None,
        source_line: Optional[str] = None,
    ):
        self.sequence = sequence
        super().__init__(
            f"unknown escape sequence '{sequence}'",
            location=location,
            hint="supported escapes are \\a \\b \\e \\f \\v \\? \\n \\r \\t \\' \\\" \\\\",
            source_line=source_line,
        )


class UnknownTokenError(LexerError):
    """
    Input that matches no classification rule.

    Raised for a stray character such as '@' or '$', and for an operator
    combination the lexer refuses, such as '=' directly followed by a
    punctuation character in strict mode.
    """

    def __init__(
        self,
        lexeme: str,
        location: Optional[Location] = None,
        source_line: Optional[str] = None,
        hint: Optional[str] = None,
    ):
        self.lexeme = lexeme
        super().__init__(
            f"unknown token '{lexeme}'",
            location=location,
            hint=hint,
            source_line=source_line,
        )


class NumericLiteralOverflowError(LexerError):
    """Integer literal that does not fit a signed 32-bit integer."""

    def __init__(
        self,
        literal: str,
        location: Optional[Location] = None,
        source_line: Optional[str] = None,
    ):
        self.literal = literal
        shown = literal if len(literal) <= 20 else f"{literal[:16]}..."
        super().__init__(
            f"integer literal '{shown}' is too large",
            location=location,
            hint="integer literals must not exceed 2147483647",
            source_line=source_line,
        )
