#!/usr/bin/env python3
import sys
from enum import IntEnum
from typing import List

from loxi.ast_printer import AstPrinter
from loxi.diagnostics import Diagnostic
from loxi.parser import parse
from loxi.scanner import scan
from loxi.token import Token


class ExitCode(IntEnum):
    """Process exit codes used by the loxi command, from sysexits.h."""

    USAGE = 64
    DATA_ERROR = 65
    NO_INPUT = 66


class Lox:
    """Lox front end control and error reporting.

    This ties the Scanner and Parser together for one session of the loxi
    command, and reports every error they find to stderr.

    For example:
    lox = Lox()
    lox.run("1 + 2 * 3")
    (+ 1 (* 2 3))

    lox.run("(1 + 2")
    [line 1] Error at end: Expect ')' after expression.

    Public Attributes:
        had_error: bool. Whether or not an error was reported since the last
            reset(). A file run exits with ExitCode.DATA_ERROR if this is set,
            while the interactive prompt resets it after every line.
    """

    def __init__(self) -> None:
        self.had_error = False

    def reset(self) -> None:
        self.had_error = False

    def run(self, source: str) -> bool:
        """Scan and parse a source text, printing the expression if successful.

        Errors from the Scanner do not stop the Parser from running on the Tokens
        that were scanned, so both phases can report their errors.

        Args:
            source: str. The lox source text to run.

        Returns:
            success: bool. Whether the source was free of errors.
        """

        tokens = self.scan(source)
        expression, diagnostics = parse(tokens)
        self.report_all(diagnostics)

        # Stop if there was a syntax error
        if self.had_error or expression is None:
            return False

        print(AstPrinter().print(expression))
        return True

    def print_tokens(self, source: str) -> bool:
        """Scan a source text and print every Token, one per line.

        Args:
            source: str. The lox source text to scan.

        Returns:
            success: bool. Whether the source was free of scanning errors.
        """

        tokens = self.scan(source)
        for token in tokens:
            print(token)

        return not self.had_error

    def scan(self, source: str) -> List[Token]:
        tokens, diagnostics = scan(source)
        self.report_all(diagnostics)
        return tokens

    def report_all(self, diagnostics: List[Diagnostic]) -> None:
        for diagnostic in diagnostics:
            self.report(diagnostic)

    def report(self, diagnostic: Diagnostic) -> None:
        """Report an error to the user.

        Scanning and parsing are not stopped by this, a flag is set instead so
        the caller can decide what to do once the source has been processed.

        Args:
            diagnostic: Diagnostic. The error, printed to stderr.
        """

        print(diagnostic.render(), file=sys.stderr)
        self.had_error = True
