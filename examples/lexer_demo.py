#!/usr/bin/env python3
"""
clex Lexer Demo
===============

This script demonstrates how to use the clex lexer to:
1. Pull tokens one at a time
2. Match tokens by kind with expect_token
3. Report positions for diagnostics
4. Keep going after lexical errors

Usage:
    source .venv/bin/activate
    python examples/lexer_demo.py
"""

from clex import Lexer, LexerError, TokenKind


SOURCE = """\
counter += 1;
puts("tab:\\there");
x = y @ 2;
"""


def main():
    # ==========================================================================
    # 1. Pull tokens until EOF
    # ==========================================================================
    print("Tokens:")
    lexer = Lexer(SOURCE, "demo.c")
    while True:
        try:
            token = lexer.next_token()
        except LexerError as e:
            # The lexer never recovers by itself; skip the bad character
            print(e)
            lexer.skip_char()
            continue
        if token.is_eof:
            break
        print(f"  {lexer.token_location()}: {token!r}")

    # ==========================================================================
    # 2. Match by kind
    # ==========================================================================
    print("\nMatching:")
    lexer = Lexer("puts(", "demo.c")
    name = lexer.expect_token(TokenKind.IDENTIFIER)
    paren = lexer.expect_token(TokenKind.OPEN_PAREN)
    print(f"  call to {name.value!r}, open paren: {paren is not None}")
    print(f"  cursor now at {lexer.current_location()}")


if __name__ == "__main__":
    main()
