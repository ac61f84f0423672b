"""
clex Command-Line Interface
===========================

This package provides the command-line tools for clex:

- **ctok**: prints the tokens of a C-like source file

Each tool is a Click application with consistent error reporting.
"""

__all__ = ["ctok"]
