"""
Error handling for the Lox scanner.

Lexical errors never abort a scan. The scanner reports each one by line
and message through an ErrorSink supplied by the caller, then resumes at
the next character. The caller decides what an error means for the
program as a whole.
"""

from dataclasses import dataclass
from typing import List, Optional, Protocol, TextIO

from ..utils.logger import get_logger

logger = get_logger(__name__)


UNSUPPORTED_CHARACTER = "Unsupported character"
UNTERMINATED_STRING = "Unterminated string"

# Error codes for categorization
ERROR_CODES = {
    "L001": UNSUPPORTED_CHARACTER,
    "L002": UNTERMINATED_STRING,
}

_CODES_BY_MESSAGE = {message: code for code, message in ERROR_CODES.items()}


@dataclass(frozen=True)
class Diagnostic:
    """A single reported lexical error."""
    line: int
    message: str
    code: Optional[str] = None

    def __str__(self) -> str:
        return f"[line {self.line}] Error: {self.message}"


class ErrorSink(Protocol):
    """Capability through which the scanner reports lexical errors."""

    def report(self, line: int, message: str) -> None:
        ...


class LexerError(Exception):
    """
    Exception raised by the strict scanning helpers.

    The scanner itself never raises this; it is built from the first
    diagnostic collected during a scan.
    """

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    @property
    def line(self) -> int:
        return self.diagnostic.line

    def __str__(self) -> str:
        return str(self.diagnostic)


class ErrorReporter:
    """
    Default ErrorSink: collects diagnostics and optionally echoes them.

    Args:
        stream: Text stream each diagnostic is written to, or None to
            only collect.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self.errors: List[Diagnostic] = []

    def report(self, line: int, message: str) -> None:
        diagnostic = Diagnostic(line, message, _CODES_BY_MESSAGE.get(message))
        self.errors.append(diagnostic)
        logger.debug("Lexical error %s at line %d: %s",
                     diagnostic.code or "-", line, message)
        if self.stream is not None:
            print(diagnostic, file=self.stream)

    @property
    def had_error(self) -> bool:
        return len(self.errors) > 0

    def reset(self) -> None:
        """Forget every collected diagnostic."""
        self.errors.clear()
