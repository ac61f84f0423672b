"""
ctok - Token Dump Command-Line Interface
========================================

Reads a C-like source file and prints every token with the position it
starts at, one per line. Lexical errors are reported on stderr and the
scan continues after them, so a single run lists every problem in the
file.

Usage Examples
--------------
Dump tokens:
    $ ctok hello.c
    hello.c:1:1: Token(IDENTIFIER, 'int')
    hello.c:1:5: Token(IDENTIFIER, 'main')
    ...

Stop at the first error:
    $ ctok --fail-fast hello.c

Skip the rest of the line after an error instead of one character:
    $ ctok --recover line hello.c

Print tokens as source text:
    $ ctok --text hello.c
    hello.c:1:1: int
    ...

Accept '=' directly before punctuation (plain C behaviour):
    $ ctok --relaxed-assign hello.c
"""

import logging
import sys
from pathlib import Path

import click

from clex import __version__
from clex.cli.errors import ExitCode, handle_cli_exception
from clex.errors import LexerError
from clex.lexer import Lexer, LexerOptions


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--relaxed-assign",
    is_flag=True,
    help="Allow '=' to be followed directly by punctuation",
)
@click.option(
    "--fail-fast",
    is_flag=True,
    help="Stop at the first lexical error",
)
@click.option(
    "--recover",
    type=click.Choice(["char", "line"], case_sensitive=False),
    default="char",
    show_default=True,
    help="What to skip after a lexical error",
)
@click.option(
    "--text",
    "as_text",
    is_flag=True,
    help="Print tokens as source text instead of Token(...) form",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (debug logging and a summary line)",
)
@click.version_option(version=__version__, prog_name="ctok")
def main(
    input_file: Path,
    relaxed_assign: bool,
    fail_fast: bool,
    recover: str,
    as_text: bool,
    verbose: bool,
) -> None:
    """
    Print the tokens of a C-like source file.

    INPUT_FILE is the source file to tokenize.

    \b
    Examples:
        ctok hello.c                 # One token per line
        ctok --fail-fast hello.c     # Stop at the first error
        ctok --recover line hello.c  # Drop the line after an error
        ctok --text hello.c          # Tokens as source text
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        source = input_file.read_text()
    except (OSError, UnicodeDecodeError) as e:
        handle_cli_exception(e, verbose)

    options = LexerOptions(strict_assignment=not relaxed_assign)
    lexer = Lexer(source, str(input_file), options)

    token_count = 0
    error_count = 0

    while True:
        try:
            token = lexer.next_token()
        except LexerError as e:
            if fail_fast:
                handle_cli_exception(e, verbose)
            click.echo(str(e), err=True)
            error_count += 1
            if recover.lower() == "line":
                lexer.drop_line()
            else:
                lexer.skip_char()
            continue
        except Exception as e:
            handle_cli_exception(e, verbose)

        if token.is_eof:
            break

        shown = token.text if as_text else repr(token)
        click.echo(f"{lexer.token_location()}: {shown}")
        token_count += 1

    if verbose:
        click.echo(f"Tokenized {input_file}: {token_count} tokens, {error_count} errors")

    if error_count:
        sys.exit(ExitCode.LEXICAL_ERROR)


if __name__ == "__main__":
    main()
