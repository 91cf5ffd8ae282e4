#!/usr/bin/env python3
from dataclasses import dataclass
from typing import Optional

from loxi.literal import LiteralValue
from loxi.token_type import TokenType


@dataclass(frozen=True)
class Token:
    """Scanner Token

    A Token represents a "chunk" of text within the processed source code. These
    are returned by the Scanner and consumed by the Parser.

    For example:
    -12 * (3)

    Has 7 Tokens:
    Scanner("-12 * (3)").scan_tokens()
    Token(TokenType.MINUS,       "-",  None,                    1)
    Token(TokenType.NUMBER,      "12", LiteralValue.number(12), 1)
    Token(TokenType.STAR,        "*",  None,                    1)
    Token(TokenType.LEFT_PAREN,  "(",  None,                    1)
    Token(TokenType.NUMBER,      "3",  LiteralValue.number(3),  1)
    Token(TokenType.RIGHT_PAREN, ")",  None,                    1)
    Token(TokenType.EOF,         "",   None,                    1)

    Args:
        type: TokenType. The type of Token being identified, see the TokenType
            enum for possible types.
        lexeme: str. Scanned source contents representing this Token, copied out
            of the source text.
        literal: Optional[LiteralValue]. Eagerly evaluated value of the lexeme
            for NUMBER and STRING Tokens, otherwise None.
        line: int. The 1-based line in the source code where this Token starts.
    """

    type: TokenType
    lexeme: str
    literal: Optional[LiteralValue]
    line: int

    def __repr__(self) -> str:
        return self.to_string()

    @property
    def literal_value(self) -> LiteralValue:
        """The literal of a NUMBER or STRING Token.

        Raises:
            ValueError: If this Token carries no literal.
        """

        if self.literal is None:
            raise ValueError(f"{self.type.name} token '{self.lexeme}' has no literal")

        return self.literal

    def to_string(self) -> str:
        literal = "None" if self.literal is None else self.literal.to_string()
        return f"{self.type.name} {self.lexeme} {literal}"
