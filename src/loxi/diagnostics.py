#!/usr/bin/env python3
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from loxi.errors import LoxError, ParseError
from loxi.token_type import TokenType


@dataclass(frozen=True)
class Diagnostic:
    """A single line-tagged error message, ready to be shown to the user.

    For example:
    Diagnostic(1, " at end", "Expect expression.").render()
    [line 1] Error at end: Expect expression.

    Args:
        line: int. Line where the error was encountered.
        location: str. Where on the line the error occurred, one of "",
            " at end" or " at '<lexeme>'".
        message: str. Error message for the user.
    """

    line: int
    location: str
    message: str

    @classmethod
    def from_error(cls, error: LoxError) -> Diagnostic:
        """Build a Diagnostic from a Scanner or Parser error.

        Scanner errors only know their line. Parser errors point at a Token,
        which is described as "at end" for the EOF Token and by its lexeme
        otherwise.

        Args:
            error: LoxError. Error to describe.

        Returns:
            diagnostic: Diagnostic. Renderable description of the error.
        """

        location = ""
        if isinstance(error, ParseError):
            if error.token.type is TokenType.EOF:
                location = " at end"
            else:
                location = f" at '{error.token.lexeme}'"

        return cls(error.line, location, error.message)

    def __str__(self) -> str:
        return self.render()

    def render(self) -> str:
        return f"[line {self.line}] Error{self.location}: {self.message}"


class Diagnostics:
    """Accumulator for the errors found in one source unit.

    One of these is created for each source text by scan() and parse(), which
    hand back its diagnostics. It replaces a process-wide "had error" flag:
    once the source unit is done it is simply discarded.

    Public Attributes:
        errors: List[LoxError]. Every error recorded, in order.
    """

    def __init__(self) -> None:
        self.errors: List[LoxError] = []

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return [Diagnostic.from_error(error) for error in self.errors]

    def error(self, error: LoxError) -> None:
        """Record an error.

        Args:
            error: LoxError. Error encountered while scanning or parsing.
        """

        self.errors.append(error)
