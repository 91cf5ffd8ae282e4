#!/usr/bin/env python3
from loxi.token import Token
from loxi.token_type import TokenType


class LoxError(Exception):
    """Base class for every error found in a Lox source.

    Errors carry the line they were found on and a message for the user. How
    they are shown is up to loxi.diagnostics.Diagnostic.

    Args:
        line: int. Line where the error was encountered.
        message: str. Error message with details.
    """

    def __init__(self, line: int, message: str) -> None:
        super().__init__(message)
        self.line = line
        self.message = message


class ScanError(LoxError):
    """Error encountered by the Scanner.

    These are never raised. The Scanner records them and keeps scanning, in
    order to report as many of them as possible in one pass.
    """

    pass


class UnexpectedCharacter(ScanError):
    """A character that does not start any Lox lexeme.

    Args:
        line: int. Line the character was found on.
        char: str. The offending character.
    """

    def __init__(self, line: int, char: str) -> None:
        super().__init__(line, "Unexpected character.")
        self.char = char


class UnterminatedString(ScanError):
    """The source ended before the closing quote of a string literal.

    Args:
        line: int. Line the source ended on.
    """

    def __init__(self, line: int) -> None:
        super().__init__(line, "Unterminated string.")


class ParseError(LoxError):
    """Error for any fatal errors encountered during parsing.

    Args:
        token: Token. Token where the error was encountered.
        message: str. Error message with details.
    """

    def __init__(self, token: Token, message: str) -> None:
        super().__init__(token.line, message)
        self.token = token


class ExpectedExpression(ParseError):
    """No primary expression starts at the given Token."""

    def __init__(self, token: Token) -> None:
        super().__init__(token, "Expect expression.")


class ExpressionTooDeep(ParseError):
    """Groupings or unary operators nested deeper than the Parser allows."""

    def __init__(self, token: Token) -> None:
        super().__init__(token, "Expression nested too deeply.")


class ExpectedToken(ParseError):
    """A required Token, such as a closing parenthesis, was missing.

    Args:
        token: Token. Token found in place of the expected one.
        expected: TokenType. Type of the Token that was required.
        message: str. Error message with details.
    """

    def __init__(self, token: Token, expected: TokenType, message: str) -> None:
        super().__init__(token, message)
        self.expected = expected
