#!/usr/bin/env python3
"""
Lox command-line driver.

Usage:
    lox [script]

With no argument an interactive prompt is started; with one argument the
file is scanned and every token printed. Exit statuses follow sysexits.h.
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .config import RunConfig
from .lexer import ErrorReporter, ErrorSink, Scanner, Token, scan_file
from .utils.logger import get_logger

logger = get_logger(__name__)

EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66


def print_tokens(tokens: List[Token], config: RunConfig, out: TextIO) -> None:
    if config.print_tokens:
        for token in tokens:
            print(token, file=out)


def run_source(source: str, reporter: ErrorSink, config: RunConfig, out: TextIO) -> None:
    """Scan one chunk of source and print its tokens."""
    print_tokens(Scanner(source, reporter).scan_tokens(), config, out)


def run_file(path: str, config: RunConfig, out: Optional[TextIO] = None,
             err: Optional[TextIO] = None) -> int:
    """Scan a script file. Returns the process exit status."""
    out = out or sys.stdout
    err = err or sys.stderr
    reporter = ErrorReporter(err)

    try:
        tokens = scan_file(path, reporter)
    except OSError as e:
        print(f"Cannot read {path}: {e.strerror or e}", file=err)
        return EX_NOINPUT

    print_tokens(tokens, config, out)

    if reporter.had_error:
        logger.info("%s: %d lexical error(s)", path, len(reporter.errors))
        return EX_DATAERR
    return EX_OK


def run_prompt(config: RunConfig, stdin: Optional[TextIO] = None,
               out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    """Read-scan-print loop. Ends cleanly at end of input."""
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    err = err or sys.stderr
    reporter = ErrorReporter(err)

    while True:
        print(config.prompt, end="", file=out, flush=True)
        line = stdin.readline()
        if not line:
            print(file=out)
            break

        run_source(line, reporter, config, out)

        if config.reset_errors_per_line:
            reporter.reset()

    # Only reachable with errors when they are kept across lines
    return EX_DATAERR if reporter.had_error else EX_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the lox command."""

    parser = argparse.ArgumentParser(
        prog="lox",
        description="Scan Lox source and print its tokens",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    lox                  # Interactive prompt
    lox script.lox       # Scan a file
    lox -v script.lox    # Scan with debug logging
        """
    )
    parser.add_argument('script', nargs='*', help='Script file to scan')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--no-tokens', action='store_true',
                        help='Do not print scanned tokens')

    args = parser.parse_args(argv)

    if len(args.script) > 1:
        print("Usage: lox [script]", file=sys.stderr)
        return EX_USAGE

    config = RunConfig(
        print_tokens=not args.no_tokens,
        log_level="DEBUG" if args.verbose else "WARNING",
    )
    logging.basicConfig(level=config.log_level,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.script:
            return run_file(args.script[0], config)
        return run_prompt(config)
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return EX_OK


if __name__ == "__main__":
    sys.exit(main())
