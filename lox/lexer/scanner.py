"""
Lox scanner - turns source text into a flat list of tokens.

Single pass, left to right, one character of lookahead (two for number
literals). Lexical errors are reported through an ErrorSink and scanning
carries on with the next character, so one run surfaces every error.
"""

from typing import List, Optional

from .tokens import (
    Token, TokenType, Literal, KEYWORDS, SINGLE_CHAR_TOKENS, ONE_OR_TWO_CHAR_TOKENS
)
from .errors import (
    ErrorSink, ErrorReporter, LexerError, UNSUPPORTED_CHARACTER, UNTERMINATED_STRING
)
from ..utils.logger import get_logger

logger = get_logger(__name__)

WHITESPACE = frozenset(" \r\t")


class Scanner:
    """
    Lox lexical analyzer.

    Converts source text into a list of tokens terminated by a single
    EOF token.
    """

    def __init__(self, source: str, reporter: Optional[ErrorSink] = None):
        """
        Initialize the scanner with source code.

        Args:
            source: Complete source text
            reporter: Sink for lexical errors; an ErrorReporter that only
                collects is created when omitted
        """
        self.source = source
        self.reporter = reporter if reporter is not None else ErrorReporter()
        # Cursor state; rebuilt at the start of every scan_tokens() call
        self._start = 0
        self._current = 0
        self._line = 1
        self._start_line = 1
        self._tokens: List[Token] = []

    def scan_tokens(self) -> List[Token]:
        """
        Scan the entire source.

        Returns:
            List of tokens ending with EOF
        """
        self._start = 0
        self._current = 0
        self._line = 1
        self._start_line = 1
        self._tokens = []

        while not self._is_at_end():
            self._start = self._current
            self._start_line = self._line
            self._scan_token()

        self._tokens.append(Token(TokenType.EOF, "", None, self._line))

        tokens = self._tokens
        self._tokens = []
        logger.debug("Scanned %d tokens over %d lines", len(tokens), self._line)
        return tokens

    def _scan_token(self):
        c = self._advance()

        if c in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[c])
        elif c in ONE_OR_TWO_CHAR_TOKENS:
            single, double = ONE_OR_TWO_CHAR_TOKENS[c]
            self._add_token(double if self._match('=') else single)
        elif c == '/':
            if self._match('/'):
                # Comment runs to the end of the line
                while self._peek() != '\n' and not self._is_at_end():
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
        elif c in WHITESPACE:
            pass
        elif c == '\n':
            self._line += 1
        elif c == '"':
            self._string()
        elif _is_digit(c):
            self._number()
        elif _is_alpha(c):
            self._identifier()
        else:
            self.reporter.report(self._line, UNSUPPORTED_CHARACTER)

    def _string(self):
        """Scan a string literal. The opening quote is already consumed."""
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == '\n':
                self._line += 1
            self._advance()

        if self._is_at_end():
            self.reporter.report(self._line, UNTERMINATED_STRING)
            return

        self._advance()  # closing quote

        # No escape processing: the literal is the raw text between the quotes
        value = self.source[self._start + 1:self._current - 1]
        self._add_token(TokenType.STRING, value)

    def _number(self):
        while _is_digit(self._peek()):
            self._advance()

        # A '.' only belongs to the number when a digit follows it
        if self._peek() == '.' and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, float(self.source[self._start:self._current]))

    def _identifier(self):
        while _is_alphanumeric(self._peek()):
            self._advance()

        text = self.source[self._start:self._current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def _add_token(self, token_type: TokenType, literal: Literal = None):
        text = self.source[self._start:self._current]
        self._tokens.append(Token(token_type, text, literal, self._start_line))

    def _advance(self) -> str:
        c = self.source[self._current]
        self._current += 1
        return c

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is `expected`."""
        if self._is_at_end() or self.source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _peek(self) -> str:
        if self._is_at_end():
            return '\0'
        return self.source[self._current]

    def _peek_next(self) -> str:
        if self._current + 1 >= len(self.source):
            return '\0'
        return self.source[self._current + 1]

    def _is_at_end(self) -> bool:
        return self._current >= len(self.source)


def _is_digit(c: str) -> bool:
    return '0' <= c <= '9'


def _is_alpha(c: str) -> bool:
    return 'a' <= c <= 'z' or 'A' <= c <= 'Z' or c == '_'


def _is_alphanumeric(c: str) -> bool:
    return _is_alpha(c) or _is_digit(c)


def scan_tokens(source: str, reporter: Optional[ErrorSink] = None) -> List[Token]:
    """
    Convenience function to scan a source string.

    Args:
        source: Source code string
        reporter: Sink for lexical errors

    Returns:
        List of tokens ending with EOF
    """
    return Scanner(source, reporter).scan_tokens()


def scan_tokens_strict(source: str) -> List[Token]:
    """
    Scan a source string, failing on the first lexical error.

    Raises:
        LexerError: If any lexical error was reported
    """
    reporter = ErrorReporter()
    tokens = Scanner(source, reporter).scan_tokens()

    if reporter.had_error:
        raise LexerError(reporter.errors[0])

    return tokens


def scan_file(filepath: str, reporter: Optional[ErrorSink] = None) -> List[Token]:
    """
    Convenience function to scan a source file.

    Args:
        filepath: Path to source file
        reporter: Sink for lexical errors

    Raises:
        OSError: If the file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return scan_tokens(source, reporter)
