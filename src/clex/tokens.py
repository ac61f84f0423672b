"""
clex Tokens
===========

Token kinds and the token value type produced by the lexer.

A token is a (kind, value) pair. The kind is one of a closed set of
lexical categories; the value carries the decoded payload for names and
literals and is None for operators, separators and EOF.

Matching by Kind
----------------
Grammar code usually asks "is this an OPEN_PAREN?" and does not care
about any payload. Use the kind for that, never full equality:

    >>> Token(TokenKind.IDENTIFIER, "a").matches(TokenKind.IDENTIFIER)
    True
    >>> Token(TokenKind.INT, 1).matches(Token(TokenKind.INT, 2))
    True
    >>> Token(TokenKind.INT, 1) == Token(TokenKind.INT, 2)
    False
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """Lexical categories of the C-like language."""

    # === Structural ===
    EOF = auto()                # End of input

    # === Names and Literals ===
    IDENTIFIER = auto()         # foo_bar1
    INT = auto()                # 123
    FLOAT = auto()              # reserved, never produced by the scanner
    CHAR = auto()               # 'a'
    STRING = auto()             # "Hello, World!"

    # === Arithmetic Operators ===
    PLUS = auto()               # +
    MINUS = auto()              # -
    MULTIPLY = auto()           # *
    DIVIDE = auto()             # /
    MOD = auto()                # %

    # === Bitwise Operators ===
    AND = auto()                # &
    OR = auto()                 # |
    XOR = auto()                # ^
    SHIFT_LEFT = auto()         # <<
    SHIFT_RIGHT = auto()        # >>

    # === Comparison Operators ===
    EQUAL_EQUAL = auto()        # ==
    NOT_EQUAL = auto()          # !=
    LESS = auto()               # <
    LESS_EQUAL = auto()         # <=
    GREATER = auto()            # >
    GREATER_EQUAL = auto()      # >=

    # === Logical Operators ===
    AND_AND = auto()            # &&
    OR_OR = auto()              # ||
    NOT = auto()                # !

    # === Increment/Decrement ===
    PLUS_PLUS = auto()          # ++
    MINUS_MINUS = auto()        # --

    # === Assignment Operators ===
    EQUAL = auto()              # =
    PLUS_EQUAL = auto()         # +=
    MINUS_EQUAL = auto()        # -=
    MULTIPLY_EQUAL = auto()     # *=
    DIVIDE_EQUAL = auto()       # /=
    MOD_EQUAL = auto()          # %=
    AND_EQUAL = auto()          # &=
    OR_EQUAL = auto()           # |=
    XOR_EQUAL = auto()          # ^=
    SHIFT_LEFT_EQUAL = auto()   # <<=
    SHIFT_RIGHT_EQUAL = auto()  # >>=

    # === Separators ===
    OPEN_PAREN = auto()         # (
    CLOSE_PAREN = auto()        # )
    OPEN_CURLY = auto()         # {
    CLOSE_CURLY = auto()        # }
    COMMA = auto()              # ,
    SEMICOLON = auto()          # ;
    ARROW = auto()              # ->


# =============================================================================
# Lexeme Tables
# =============================================================================

# Fixed source text of every operator and separator kind
OPERATOR_LEXEMES: dict[TokenKind, str] = {
    TokenKind.PLUS: "+",
    TokenKind.MINUS: "-",
    TokenKind.MULTIPLY: "*",
    TokenKind.DIVIDE: "/",
    TokenKind.MOD: "%",
    TokenKind.AND: "&",
    TokenKind.OR: "|",
    TokenKind.XOR: "^",
    TokenKind.SHIFT_LEFT: "<<",
    TokenKind.SHIFT_RIGHT: ">>",
    TokenKind.EQUAL_EQUAL: "==",
    TokenKind.NOT_EQUAL: "!=",
    TokenKind.LESS: "<",
    TokenKind.LESS_EQUAL: "<=",
    TokenKind.GREATER: ">",
    TokenKind.GREATER_EQUAL: ">=",
    TokenKind.AND_AND: "&&",
    TokenKind.OR_OR: "||",
    TokenKind.NOT: "!",
    TokenKind.PLUS_PLUS: "++",
    TokenKind.MINUS_MINUS: "--",
    TokenKind.EQUAL: "=",
    TokenKind.PLUS_EQUAL: "+=",
    TokenKind.MINUS_EQUAL: "-=",
    TokenKind.MULTIPLY_EQUAL: "*=",
    TokenKind.DIVIDE_EQUAL: "/=",
    TokenKind.MOD_EQUAL: "%=",
    TokenKind.AND_EQUAL: "&=",
    TokenKind.OR_EQUAL: "|=",
    TokenKind.XOR_EQUAL: "^=",
    TokenKind.SHIFT_LEFT_EQUAL: "<<=",
    TokenKind.SHIFT_RIGHT_EQUAL: ">>=",
    TokenKind.OPEN_PAREN: "(",
    TokenKind.CLOSE_PAREN: ")",
    TokenKind.OPEN_CURLY: "{",
    TokenKind.CLOSE_CURLY: "}",
    TokenKind.COMMA: ",",
    TokenKind.SEMICOLON: ";",
    TokenKind.ARROW: "->",
}

# Separators that never combine with a following character
SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    "(": TokenKind.OPEN_PAREN,
    ")": TokenKind.CLOSE_PAREN,
    "{": TokenKind.OPEN_CURLY,
    "}": TokenKind.CLOSE_CURLY,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
}

# Character after a backslash -> decoded character.
# Shared by string and character literals.
ESCAPE_SEQUENCES: dict[str, str] = {
    "a": "\x07",    # Alert (bell)
    "b": "\x08",    # Backspace
    "e": "\x1b",    # Escape
    "f": "\x0c",    # Form feed
    "v": "\x0b",    # Vertical tab
    "?": "?",       # Question mark (trigraph avoidance)
    "n": "\n",      # Line feed
    "r": "\r",      # Carriage return
    "t": "\t",      # Horizontal tab
    "'": "'",
    '"': '"',
    "\\": "\\",
}

_REVERSE_ESCAPES = {
    decoded: f"\\{code}"
    for code, decoded in ESCAPE_SEQUENCES.items()
    if code != "?"
}


def _quote(text: str, quote: str) -> str:
    """Re-encode decoded literal text using the escape table."""
    chars = []
    for char in text:
        if char in _REVERSE_ESCAPES and (char not in "'\"" or char == quote):
            chars.append(_REVERSE_ESCAPES[char])
        else:
            chars.append(char)
    return quote + "".join(chars) + quote


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single lexical token.

    Equality compares kind and value. Use matches() or compare the kind
    attribute directly when only the category matters.

    Attributes:
        kind: The TokenKind classification
        value: Identifier name, decoded literal, or None for operators
    """
    kind: TokenKind
    value: str | int | float | None = None

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.value is None:
            return f"Token({self.kind.name})"
        return f"Token({self.kind.name}, {self.value!r})"

    def matches(self, candidate: Union["Token", TokenKind]) -> bool:
        """Return True if this token has the candidate's kind, ignoring payload."""
        if isinstance(candidate, Token):
            candidate = candidate.kind
        return self.kind is candidate

    @property
    def is_eof(self) -> bool:
        return self.kind is TokenKind.EOF

    @property
    def text(self) -> str:
        """Render the token as it would appear in source."""
        if self.kind in OPERATOR_LEXEMES:
            return OPERATOR_LEXEMES[self.kind]
        if self.kind is TokenKind.STRING:
            return _quote(self.value, '"')
        if self.kind is TokenKind.CHAR:
            return _quote(self.value, "'")
        if self.kind is TokenKind.EOF:
            return ""
        return str(self.value)


# The one EOF token; scanning past the end keeps returning it
EOF_TOKEN = Token(TokenKind.EOF)
