"""
clex Lexer (Tokenizer)
======================

This module implements the scanner for a C-like language. It converts
source text into tokens on demand: every call to next_token() consumes
exactly one token and advances the cursors past it.

Token Categories
----------------
- Identifiers: letter or underscore, then letters, digits, underscores
- Integers: decimal digit runs, signed 32-bit range
- Strings: "double quoted", may span lines
- Characters: 'x' holding exactly one (possibly escaped) character
- Operators: + - * / % & | ^ ! << >> == != < <= > >= && || ++ --
  and the compound assignments = += -= *= /= %= &= |= ^= <<= >>=
- Separators: ( ) { } , ; ->

Escape Sequences
----------------
\\a \\b \\e \\f \\v \\? \\n \\r \\t \\' \\" \\\\

Numeric escapes and comments are not supported. Floats, hexadecimal and
octal literals are not scanned: a leading zero is plain decimal.

Error Handling
--------------
Malformed input raises a LexerError subclass from next_token(). The lexer
never skips ahead on its own; a driver that wants to keep going calls
skip_char() or drop_line() and then asks for the next token.

Example Usage
-------------
>>> from clex.lexer import Lexer
>>> lexer = Lexer('x += 42;', "test.c")
>>> for token in lexer.tokenize():
...     print(token)
Token(IDENTIFIER, 'x')
Token(PLUS_EQUAL)
Token(INT, 42)
Token(SEMICOLON)
Token(EOF)
"""

import logging
import string
from dataclasses import dataclass
from typing import Iterator, Optional, Union

from clex.errors import (
    Location,
    LexerError,
    NumericLiteralOverflowError,
    UnknownEscapeSequenceError,
    UnknownTokenError,
    UnterminatedCharLiteralError,
    UnterminatedStringLiteralError,
)
from clex.tokens import (
    EOF_TOKEN,
    ESCAPE_SEQUENCES,
    SINGLE_CHAR_TOKENS,
    Token,
    TokenKind,
)

logger = logging.getLogger(__name__)

# Largest value an INT token can carry
INT32_MAX = 2**31 - 1

# First characters of multi-form operators
OPERATOR_START = "=+-*/%&|^!<>"


@dataclass
class LexerOptions:
    """
    Lexer configuration options.

    Attributes:
        strict_assignment: Reject '=' directly followed by a character that
                           is not whitespace, alphanumeric, '_' or '='
                           (so "a=(b)" is an error but "a = (b)" is not).
                           Set to False for plain C behaviour.
    """
    strict_assignment: bool = True


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Pull-based scanner over one source unit.

    The whole source is held in memory for the lifetime of the lexer.
    Three cursors track the scan: the absolute offset, the zero-based row,
    and the offset where the current row begins. They only move forward.

    Usage:
        lexer = Lexer(source_text, "main.c")
        while not (token := lexer.next_token()).is_eof:
            ...

    Attributes:
        source: The source text being tokenized
        filepath: Label of the source file (for diagnostics only)
        options: Scanning options
    """

    def __init__(
        self,
        source: str,
        filepath: str = "<input>",
        options: Optional[LexerOptions] = None,
    ):
        self.source = source
        self.filepath = filepath
        self.options = options or LexerOptions()

        self._cur = 0   # absolute offset
        self._row = 0   # zero-based line index
        self._bol = 0   # offset of the current line start

        # Where the most recent token began
        self._token_start = Location(filepath, 0, 0)
        self._token_bol = 0

    # =========================================================================
    # Public Interface
    # =========================================================================

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Returns the EOF token once the input is exhausted, on this and
        every later call. Whitespace after the token is consumed as well,
        so current_location() then points at the following token.

        Raises:
            LexerError: If the input at the cursor is malformed
        """
        self._skip_whitespace()
        self._token_start = self.current_location()
        self._token_bol = self._bol

        if self._at_end():
            return EOF_TOKEN

        try:
            token = self._scan_token()
        except LexerError as e:
            logger.debug(f"Lexical error in {self.filepath}: {e.message} at {e.location}")
            raise

        # Leave the cursor on the start of whatever comes next
        self._skip_whitespace()
        return token

    def expect_token(self, candidate: Union[Token, TokenKind]) -> Optional[Token]:
        """
        Consume the next token and return it if its kind matches.

        The token is consumed whether or not it matches. Only the kind is
        compared, so any IDENTIFIER matches TokenKind.IDENTIFIER.

        Returns:
            The consumed token, or None if its kind differs

        Raises:
            LexerError: If the input at the cursor is malformed
        """
        token = self.next_token()
        if token.matches(candidate):
            return token
        return None

    def peek_token(self) -> Token:
        """
        Look at the next token without consuming it.

        Scans normally, then restores every cursor.
        """
        saved = (self._cur, self._row, self._bol, self._token_start, self._token_bol)
        try:
            return self.next_token()
        finally:
            self._cur, self._row, self._bol, self._token_start, self._token_bol = saved

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens lazily up to and including EOF.

        Raises:
            LexerError: If invalid input is encountered
        """
        while True:
            token = self.next_token()
            yield token
            if token.is_eof:
                return

    def current_location(self) -> Location:
        """Return the position of the cursor. Safe to call at any time."""
        return Location(self.filepath, self._row, self._cur - self._bol)

    def token_location(self) -> Location:
        """Return the position where the most recently scanned token began."""
        return self._token_start

    # =========================================================================
    # Recovery Helpers (for drivers)
    # =========================================================================

    def skip_char(self) -> None:
        """Discard one character. Does nothing at end of input."""
        if not self._at_end():
            logger.debug(f"Skipping {self._peek()!r} at {self.current_location()}")
            self._advance()

    def drop_line(self) -> None:
        """Discard the rest of the current line, including its newline."""
        row = self._row
        while not self._at_end() and self._row == row:
            self._advance()

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._cur >= len(self.source)

    def _peek(self, offset: int = 0) -> str:
        """Character at the cursor + offset, or "" past the end."""
        pos = self._cur + offset
        if pos >= len(self.source):
            return ""
        return self.source[pos]

    def _advance(self) -> str:
        """Consume and return one character, tracking newlines."""
        if self._at_end():
            return ""

        char = self.source[self._cur]
        self._cur += 1

        if char == "\n":
            self._row += 1
            self._bol = self._cur

        return char

    def _match(self, expected: str) -> bool:
        """Consume the next character if it equals expected."""
        if self._peek() == expected:
            self._advance()
            return True
        return False

    def _skip_whitespace(self) -> None:
        while not self._at_end() and self._peek().isspace():
            self._advance()

    def _line_text(self, bol: int) -> str:
        """Source text of the line starting at bol, for error context."""
        line_end = self.source.find("\n", bol)
        if line_end == -1:
            line_end = len(self.source)
        return self.source[bol:line_end]

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self) -> Token:
        char = self._peek()

        if char.isalpha() or char == "_":
            return self._scan_identifier()

        if char in string.digits:
            return self._scan_number()

        if char == "'":
            return self._scan_char()

        if char == '"':
            return self._scan_string()

        return self._scan_operator()

    def _scan_identifier(self) -> Token:
        """Scan a maximal run of letters, digits and underscores."""
        start = self._cur
        while not self._at_end() and (self._peek().isalnum() or self._peek() == "_"):
            self._advance()

        return Token(TokenKind.IDENTIFIER, self.source[start:self._cur])

    def _scan_number(self) -> Token:
        """
        Scan a decimal integer literal.

        Leading zeros are allowed and do not mean octal: 007 is 7.
        """
        start = self._cur
        while self._peek() and self._peek() in string.digits:
            self._advance()

        literal = self.source[start:self._cur]
        # int() refuses very long digit strings, so rule those out first
        digits = literal.lstrip("0") or "0"
        if len(digits) > len(str(INT32_MAX)) or int(digits) > INT32_MAX:
            raise NumericLiteralOverflowError(
                literal,
                self._token_start,
                self._line_text(self._token_bol),
            )

        return Token(TokenKind.INT, int(digits))

    def _scan_string(self) -> Token:
        """Scan a double-quoted string literal, decoding escapes."""
        self._advance()  # consume opening "

        chars = []
        while not self._at_end():
            char = self._peek()

            if char == '"':
                self._advance()  # consume closing "
                return Token(TokenKind.STRING, "".join(chars))

            if char == "\\":
                decoded = self._scan_escape_sequence()
                if decoded is None:
                    break
                chars.append(decoded)
            else:
                chars.append(self._advance())

        raise UnterminatedStringLiteralError(
            self._token_start,
            self._line_text(self._token_bol),
        )

    def _scan_char(self) -> Token:
        """Scan a character literal holding exactly one character."""
        self._advance()  # consume opening '

        if self._peek() == "'":
            raise UnterminatedCharLiteralError(
                "empty character literal",
                self._token_start,
                self._line_text(self._token_bol),
            )

        if self._at_end() or self._peek() == "\n":
            raise UnterminatedCharLiteralError(
                location=self._token_start,
                source_line=self._line_text(self._token_bol),
            )

        if self._peek() == "\\":
            char = self._scan_escape_sequence()
            if char is None:
                raise UnterminatedCharLiteralError(
                    location=self._token_start,
                    source_line=self._line_text(self._token_bol),
                )
        else:
            char = self._advance()

        if not self._match("'"):
            raise UnterminatedCharLiteralError(
                "character literal too long or missing closing quote",
                self._token_start,
                self._line_text(self._token_bol),
            )

        return Token(TokenKind.CHAR, char)

    def _scan_escape_sequence(self) -> Optional[str]:
        """
        Decode the escape sequence at the cursor (which is on the backslash).

        Returns:
            The decoded character, or None if input ends after the backslash

        Raises:
            UnknownEscapeSequenceError: For any character outside the table
        """
        location = self.current_location()
        bol = self._bol
        self._advance()  # consume backslash

        if self._at_end():
            return None

        code = self._peek()
        if code not in ESCAPE_SEQUENCES:
            raise UnknownEscapeSequenceError(f"\\{code}", location, self._line_text(bol))

        self._advance()
        return ESCAPE_SEQUENCES[code]

    def _scan_operator(self) -> Token:
        """
        Scan an operator or separator using longest match.

        An unknown character is reported without being consumed.
        """
        char = self._peek()

        if char in SINGLE_CHAR_TOKENS:
            self._advance()
            return Token(SINGLE_CHAR_TOKENS[char])

        if char not in OPERATOR_START:
            raise UnknownTokenError(
                char,
                self.current_location(),
                self._line_text(self._bol),
            )

        self._advance()

        if char == "=":
            if self._match("="):
                return Token(TokenKind.EQUAL_EQUAL)
            self._check_assignment()
            return Token(TokenKind.EQUAL)

        if char == "+":
            if self._match("+"):
                return Token(TokenKind.PLUS_PLUS)
            if self._match("="):
                return Token(TokenKind.PLUS_EQUAL)
            return Token(TokenKind.PLUS)

        if char == "-":
            if self._match("-"):
                return Token(TokenKind.MINUS_MINUS)
            if self._match("="):
                return Token(TokenKind.MINUS_EQUAL)
            if self._match(">"):
                return Token(TokenKind.ARROW)
            return Token(TokenKind.MINUS)

        if char == "*":
            if self._match("="):
                return Token(TokenKind.MULTIPLY_EQUAL)
            return Token(TokenKind.MULTIPLY)

        if char == "/":
            if self._match("="):
                return Token(TokenKind.DIVIDE_EQUAL)
            return Token(TokenKind.DIVIDE)

        if char == "%":
            if self._match("="):
                return Token(TokenKind.MOD_EQUAL)
            return Token(TokenKind.MOD)

        if char == "&":
            if self._match("&"):
                return Token(TokenKind.AND_AND)
            if self._match("="):
                return Token(TokenKind.AND_EQUAL)
            return Token(TokenKind.AND)

        if char == "|":
            if self._match("|"):
                return Token(TokenKind.OR_OR)
            if self._match("="):
                return Token(TokenKind.OR_EQUAL)
            return Token(TokenKind.OR)

        if char == "^":
            if self._match("="):
                return Token(TokenKind.XOR_EQUAL)
            return Token(TokenKind.XOR)

        if char == "!":
            if self._match("="):
                return Token(TokenKind.NOT_EQUAL)
            return Token(TokenKind.NOT)

        if char == "<":
            if self._match("<"):
                if self._match("="):
                    return Token(TokenKind.SHIFT_LEFT_EQUAL)
                return Token(TokenKind.SHIFT_LEFT)
            if self._match("="):
                return Token(TokenKind.LESS_EQUAL)
            return Token(TokenKind.LESS)

        # char == ">"
        if self._match(">"):
            if self._match("="):
                return Token(TokenKind.SHIFT_RIGHT_EQUAL)
            return Token(TokenKind.SHIFT_RIGHT)
        if self._match("="):
            return Token(TokenKind.GREATER_EQUAL)
        return Token(TokenKind.GREATER)

    def _check_assignment(self) -> None:
        """
        Validate the character after a bare '=' in strict mode.

        The offending character is left unconsumed.
        """
        if not self.options.strict_assignment or self._at_end():
            return

        char = self._peek()
        if char.isspace() or char.isalnum() or char == "_":
            return

        raise UnknownTokenError(
            f"={char}",
            self._token_start,
            self._line_text(self._token_bol),
            hint="separate '=' from the following operator with a space",
        )


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize(
    source: str,
    filepath: str = "<input>",
    options: Optional[LexerOptions] = None,
) -> list[Token]:
    """
    Tokenize a whole source string, EOF token included.

    Raises:
        LexerError: On the first malformed token
    """
    return list(Lexer(source, filepath, options).tokenize())
