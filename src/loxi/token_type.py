#!/usr/bin/env python3
from enum import IntEnum, auto


class TokenType(IntEnum):
    """Token types

    Each TokenType names one kind of lexeme the Scanner can recognize in Lox
    source text. The Parser only ever looks at the type of a Token to decide
    which grammar rule applies, never at its lexeme.
    """

    # Single-character tokens.
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    LEFT_BRACE = auto()  # {
    RIGHT_BRACE = auto()  # }
    COMMA = auto()  # ,
    DOT = auto()  # .
    MINUS = auto()  # -
    PLUS = auto()  # +
    SEMICOLON = auto()  # ;
    SLASH = auto()  # /
    STAR = auto()  # *

    # One or two character tokens
    BANG = auto()  # !
    BANG_EQUAL = auto()  # !=
    EQUAL = auto()  # =
    EQUAL_EQUAL = auto()  # ==
    GREATER = auto()  # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()  # <
    LESS_EQUAL = auto()  # <=

    # Literals
    IDENTIFIER = auto()  # fooVar
    STRING = auto()  # "foobar"
    NUMBER = auto()  # 42

    # Keywords
    # Reserved by the language even where the expression grammar has no use
    # for them yet.
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # End of input, always the last Token of a scan.
    EOF = auto()
