"""
Tests for the lox command-line driver.
"""

import unittest
import sys
import os
import io
import tempfile
from contextlib import redirect_stdout, redirect_stderr

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lox.cli import main, print_tokens, run_file, run_prompt, EX_OK, EX_USAGE, EX_DATAERR, EX_NOINPUT
from lox.config import RunConfig
from lox.lexer import Token, TokenType


class TestRunFile(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def _script(self, text):
        path = os.path.join(self.tmp.name, "script.lox")
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        return path

    def test_clean_script(self):
        out, err = io.StringIO(), io.StringIO()
        status = run_file(self._script("var a = 42;"), RunConfig(), out, err)
        self.assertEqual(status, EX_OK)
        self.assertEqual(out.getvalue().splitlines(), [
            "VAR var null",
            "IDENTIFIER a null",
            "EQUAL = null",
            "NUMBER 42 42.0",
            "SEMICOLON ; null",
            "EOF  null",
        ])
        self.assertEqual(err.getvalue(), "")

    def test_script_with_errors(self):
        out, err = io.StringIO(), io.StringIO()
        status = run_file(self._script("1\n@\n\"open"), RunConfig(), out, err)
        self.assertEqual(status, EX_DATAERR)
        self.assertEqual(err.getvalue().splitlines(), [
            "[line 2] Error: Unsupported character",
            "[line 3] Error: Unterminated string",
        ])

    def test_missing_file(self):
        out, err = io.StringIO(), io.StringIO()
        status = run_file(os.path.join(self.tmp.name, "missing.lox"), RunConfig(), out, err)
        self.assertEqual(status, EX_NOINPUT)
        self.assertIn("missing.lox", err.getvalue())

    def test_no_tokens_option(self):
        out = io.StringIO()
        status = run_file(self._script("1 + 2"), RunConfig(print_tokens=False), out, io.StringIO())
        self.assertEqual(status, EX_OK)
        self.assertEqual(out.getvalue(), "")


class TestPrintTokens(unittest.TestCase):

    def test_one_token_per_line(self):
        out = io.StringIO()
        tokens = [Token(TokenType.NIL, "nil", None, 1), Token(TokenType.EOF, "", None, 1)]
        print_tokens(tokens, RunConfig(), out)
        self.assertEqual(out.getvalue(), "NIL nil null\nEOF  null\n")

    def test_disabled(self):
        out = io.StringIO()
        print_tokens([Token(TokenType.EOF, "", None, 1)], RunConfig(print_tokens=False), out)
        self.assertEqual(out.getvalue(), "")


class TestRunPrompt(unittest.TestCase):

    def test_errors_reset_per_line(self):
        stdin = io.StringIO("1 @\n2\n")
        out, err = io.StringIO(), io.StringIO()
        status = run_prompt(RunConfig(), stdin, out, err)
        self.assertEqual(status, EX_OK)
        self.assertEqual(err.getvalue(), "[line 1] Error: Unsupported character\n")
        self.assertIn("NUMBER 2 2.0", out.getvalue())

    def test_errors_kept_across_lines(self):
        stdin = io.StringIO("@\nprint 1;\n")
        status = run_prompt(RunConfig(reset_errors_per_line=False), stdin,
                            io.StringIO(), io.StringIO())
        self.assertEqual(status, EX_DATAERR)

    def test_prompt_is_printed(self):
        out = io.StringIO()
        run_prompt(RunConfig(prompt=">> "), io.StringIO("nil\n"), out, io.StringIO())
        self.assertTrue(out.getvalue().startswith(">> "))


class TestMain(unittest.TestCase):

    def test_too_many_arguments(self):
        err = io.StringIO()
        with redirect_stderr(err):
            status = main(["a.lox", "b.lox"])
        self.assertEqual(status, EX_USAGE)
        self.assertIn("Usage: lox [script]", err.getvalue())

    def test_runs_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "ok.lox")
            with open(path, "w", encoding="utf-8") as f:
                f.write("print true;")
            out = io.StringIO()
            with redirect_stdout(out):
                status = main([path])
        self.assertEqual(status, EX_OK)
        self.assertIn("PRINT print null", out.getvalue())


class TestRunConfig(unittest.TestCase):

    def test_from_dict_ignores_unknown_keys(self):
        config = RunConfig.from_dict({"prompt": "lox> ", "colour": True})
        self.assertEqual(config.prompt, "lox> ")
        self.assertTrue(config.reset_errors_per_line)


if __name__ == '__main__':
    unittest.main()
