#!/usr/bin/env python3
from typing import Dict, List, Optional, Tuple

from loxi.diagnostics import Diagnostic, Diagnostics
from loxi.errors import UnexpectedCharacter, UnterminatedString
from loxi.literal import LiteralValue
from loxi.token import Token
from loxi.token_type import TokenType


class Scanner:
    """Lox Scanner

    This class scans a given source text and returns a list of Tokens, to be
    used by the Parser to build an expression.

    To use:
    Scanner("1 + 2").scan_tokens()
    [NUMBER 1 1,
     PLUS + None,
     NUMBER 2 2,
     EOF  None]

    Args:
        source: str. The lox source text to scan.
        diagnostics: Optional[Diagnostics]. Accumulator receiving any errors
            found while scanning. A fresh one is created if not provided.

    Public Attributes:
        tokens: List[Token]. All scanned tokens.
        start: int. Start index in the source for the Token currently being scanned.
        start_line: int. Line on which the Token currently being scanned begins.
        current: int. The current index in the source, this will be combined with
            the start to generate the Token lexeme.
        line: int. Current line being scanned, this is incremented whenever a
            newline character is found in the source text.
    """

    # Used to map a scanned portion of the source text representing a keyword to
    # it's TokenType.
    keywords: Dict[str, TokenType] = {
        "and": TokenType.AND,
        "class": TokenType.CLASS,
        "else": TokenType.ELSE,
        "false": TokenType.FALSE,
        "for": TokenType.FOR,
        "fun": TokenType.FUN,
        "if": TokenType.IF,
        "nil": TokenType.NIL,
        "or": TokenType.OR,
        "print": TokenType.PRINT,
        "return": TokenType.RETURN,
        "super": TokenType.SUPER,
        "this": TokenType.THIS,
        "true": TokenType.TRUE,
        "var": TokenType.VAR,
        "while": TokenType.WHILE,
    }

    def __init__(self, source: str, diagnostics: Optional[Diagnostics] = None) -> None:
        self.source = source
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.tokens: List[Token] = []
        self.start = 0
        self.start_line = 1
        self.current = 0
        self.line = 1

    def scan_tokens(self) -> List[Token]:
        """Scan the source text and return all scanned Tokens.

        This method will return regardless of whether or not there were errors
        during scanning, the errors are recorded in self.diagnostics.

        Returns:
            tokens: List[Token]. All successfully scanned Tokens, ending with
                exactly one EOF Token.
        """

        while not self.is_at_end():
            # Move the start position up to the current index prior to scanning
            # the next token
            self.start = self.current
            self.start_line = self.line
            self.scan_token()

        # Add the end-of-file token
        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        return self.tokens

    def is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def scan_token(self) -> None:
        """Scan the remaining text for a Token.

        This is called until the end of the text is reached, adding at most one
        Token per call.
        """

        c = self.advance()
        match c:
            # Single character Lexemes.
            case "(":
                self.add_empty_token(TokenType.LEFT_PAREN)
            case ")":
                self.add_empty_token(TokenType.RIGHT_PAREN)
            case "{":
                self.add_empty_token(TokenType.LEFT_BRACE)
            case "}":
                self.add_empty_token(TokenType.RIGHT_BRACE)
            case ",":
                self.add_empty_token(TokenType.COMMA)
            case ".":
                self.add_empty_token(TokenType.DOT)
            case "-":
                self.add_empty_token(TokenType.MINUS)
            case "+":
                self.add_empty_token(TokenType.PLUS)
            case ";":
                self.add_empty_token(TokenType.SEMICOLON)
            case "*":
                self.add_empty_token(TokenType.STAR)
            # One or two character Lexemes.
            case "!":
                self.add_empty_token(
                    TokenType.BANG_EQUAL if self.match("=") else TokenType.BANG
                )
            case "=":
                self.add_empty_token(
                    TokenType.EQUAL_EQUAL if self.match("=") else TokenType.EQUAL
                )
            case "<":
                self.add_empty_token(
                    TokenType.LESS_EQUAL if self.match("=") else TokenType.LESS
                )
            case ">":
                self.add_empty_token(
                    TokenType.GREATER_EQUAL if self.match("=") else TokenType.GREATER
                )
            # Division or Comment.
            case "/":
                if self.match("/"):
                    # A comment goes until the end of the line. The newline
                    # itself is left for the next pass to count.
                    while self.peek() != "\n" and not self.is_at_end():
                        self.advance()
                else:
                    self.add_empty_token(TokenType.SLASH)
            # Ignore whitespace.
            case " " | "\r" | "\t":
                pass
            case "\n":
                self.line += 1
            case '"':
                self.string()
            case _:
                if self.is_digit(c):
                    self.number()
                elif self.is_alpha(c):
                    self.identifier()
                # Unrecognized single character, record it but keep scanning
                # just in case there are other errors we have yet to detect.
                else:
                    self.diagnostics.error(UnexpectedCharacter(self.line, c))

    def identifier(self) -> None:
        """Scan and match an alphanumeric "identifier".

        An identifier can either be a reserved keyword or an identifier for
        something within a Lox source.

        Examples:
        print  -> Token(TokenType.PRINT,      "print",  None, 1)
        foobar -> Token(TokenType.IDENTIFIER, "foobar", None, 1)
        """

        while self.is_alpha_numeric(self.peek()):
            self.advance()

        text = self.source[self.start : self.current]

        # Default to user-defined identifier if unreserved.
        type = self.keywords.get(text, TokenType.IDENTIFIER)

        self.add_empty_token(type)

    def number(self) -> None:
        """Scan and match a number.

        A "." is only part of the number when a digit follows it, so "10." is
        scanned as the number 10 followed by a DOT.

        Examples:
        4   -> Token(TokenType.NUMBER, "4",   LiteralValue.number(4.0), 1)
        4.2 -> Token(TokenType.NUMBER, "4.2", LiteralValue.number(4.2), 1)
        """

        while self.is_digit(self.peek()):
            self.advance()

        # Look for a fractional part and a digit after it (ie .5).
        if self.peek() == "." and self.is_digit(self.peek_next()):
            # Consume the "."
            self.advance()

            while self.is_digit(self.peek()):
                self.advance()

        self.add_token(
            TokenType.NUMBER,
            LiteralValue.number(float(self.source[self.start : self.current])),
        )

    def string(self) -> None:
        """Scan a Lox string.

        A scanned string in Lox is between double quotation marks, and can include
        newlines. The lexeme will contain the quotes, and the literal will hold
        the contents without them. There are no escape sequences.

        Examples:
        "foo"      -> Token(TokenType.STRING, '"foo"',      LiteralValue.string("foo"),      1)
        "foo\nbar" -> Token(TokenType.STRING, '"foo\nbar"', LiteralValue.string("foo\nbar"), 1)
        """

        while self.peek() != '"' and not self.is_at_end():
            if self.peek() == "\n":
                self.line += 1

            self.advance()

        if self.is_at_end():
            self.diagnostics.error(UnterminatedString(self.line))
            return

        # The closing ".
        self.advance()

        value = self.source[self.start + 1 : self.current - 1]
        self.add_token(TokenType.STRING, LiteralValue.string(value))

    def advance(self) -> str:
        """Retrieve the char at the Scanner's current position, then advance it.

        Returns:
            char: str. Character at Scanner's position prior to advancement.
        """

        current = self.source[self.current]
        self.current += 1
        return current

    def match(self, expected: str) -> bool:
        """Consume the char at the current index if it is the expected one.

        This is used for scanning two character lexemes such as != and ==.

        Args:
            expected. str. Expected char.

        Returns:
            matched: bool. Whether or not the char was consumed.
        """

        if self.is_at_end():
            return False
        if self.source[self.current] != expected:
            return False

        self.current += 1
        return True

    def peek(self) -> str:
        """Return the char at the current index without consuming it.

        Returns:
            current_char: str. Char at the current index, or "\\0" at the end.
        """

        if self.is_at_end():
            return "\0"

        return self.source[self.current]

    def peek_next(self) -> str:
        """Return the char at the current index + 1 without consuming it.

        Returns:
            next_char: str. Char at the current index + 1, or "\\0" past the end.
        """

        if self.current + 1 >= len(self.source):
            return "\0"

        return self.source[self.current + 1]

    def is_alpha(self, c: str) -> bool:
        return ("a" <= c <= "z") or ("A" <= c <= "Z") or c == "_"

    def is_alpha_numeric(self, c: str) -> bool:
        return self.is_alpha(c) or self.is_digit(c)

    def is_digit(self, c: str) -> bool:
        return "0" <= c <= "9"

    def add_empty_token(self, type: TokenType) -> None:
        """Add a Token with no literal value, such as an operator or keyword.

        Args:
            type: TokenType. Type of Token being added.
        """

        self.add_token(type, None)

    def add_token(self, type: TokenType, literal: Optional[LiteralValue] = None) -> None:
        """Add a Token spanning the start and current indexes.

        The Token is placed on the line its first character was scanned on,
        which differs from the current line for strings spanning several lines.

        Args:
            type: TokenType. Type of Token being added.
            literal: Optional[LiteralValue]. Eagerly evaluated value of the
                lexeme if any, otherwise None.
        """

        text = self.source[self.start : self.current]
        self.tokens.append(Token(type, text, literal, self.start_line))


def scan(source: str) -> Tuple[List[Token], List[Diagnostic]]:
    """Scan a whole source text.

    Args:
        source: str. The lox source text to scan.

    Returns:
        result: Tuple[List[Token], List[Diagnostic]]. The scanned Tokens and a
            Diagnostic for every error found along the way.
    """

    diagnostics = Diagnostics()
    tokens = Scanner(source, diagnostics).scan_tokens()
    return tokens, diagnostics.diagnostics
