"""
Lox Front End Package

Lexical analysis stage for the Lox scripting language.

Architecture:
    lox/
    ├── lexer/           # Tokens, scanner and lexical error model
    ├── utils/           # Logging helpers
    ├── config.py        # Driver configuration
    └── cli.py           # File / REPL driver
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Scanner, Token, TokenType, ErrorReporter, LexerError, scan_tokens

__all__ = [
    "Scanner",
    "Token",
    "TokenType",
    "ErrorReporter",
    "LexerError",
    "scan_tokens",

    # Version info
    "__version__",
    "__license__",
]
