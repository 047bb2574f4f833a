"""
Lox Lexer Package

Single-pass scanner for the Lox scripting language. Produces a flat list
of classified tokens for the parser and reports lexical errors through a
caller-supplied ErrorSink without aborting the scan.
"""

from .tokens import Token, TokenType, Literal, KEYWORDS
from .scanner import Scanner, scan_tokens, scan_tokens_strict, scan_file
from .errors import (
    Diagnostic, ErrorSink, ErrorReporter, LexerError,
    UNSUPPORTED_CHARACTER, UNTERMINATED_STRING,
)

__all__ = [
    "Scanner",
    "scan_tokens",
    "scan_tokens_strict",
    "scan_file",
    "Token",
    "TokenType",
    "Literal",
    "KEYWORDS",
    "Diagnostic",
    "ErrorSink",
    "ErrorReporter",
    "LexerError",
    "UNSUPPORTED_CHARACTER",
    "UNTERMINATED_STRING",
]
