#!/usr/bin/env python3
from typing import List, Optional, Tuple, Union

from loxi.diagnostics import Diagnostic, Diagnostics
from loxi.errors import (
    ExpectedExpression,
    ExpectedToken,
    ExpressionTooDeep,
    ParseError,
)
from loxi.expr import Binary, Expr, Grouping, Literal, Unary
from loxi.literal import LiteralValue
from loxi.token import Token
from loxi.token_type import TokenType

# Type aliases to common collections of exprs for return value refinement
ParsedPrimary = Union[Literal, Grouping]
ParsedUnary = Union[Unary, ParsedPrimary]
ParsedBinary = Union[Binary, ParsedUnary]

# Deepest nesting of groupings and unary operators accepted by the Parser. A
# grouping costs several stack frames per level, this keeps the whole descent
# well inside the interpreter's recursion limit.
MAX_DEPTH = 64


class Parser:
    """Lox Parser

    This class processes a list of Tokens provided by the Scanner and builds a
    single Lox expression from them, using recursive descent with one function
    per precedence level.

    The first syntax error aborts the parse by raising a ParseError, nothing of
    the partially built tree is kept.

    Args:
        tokens: List[Token]. Tokens to process, typically generated from the Scanner
            against a source text. Must end with an EOF Token.

    Raises:
        ValueError: If the Tokens do not end with an EOF Token.

    Public Attributes:
        current: int. Current token index of the parser.
        depth: int. Number of groupings and unary operators currently open.
    """

    def __init__(self, tokens: List[Token]) -> None:
        if not tokens or tokens[-1].type is not TokenType.EOF:
            raise ValueError("Parser tokens must end with an EOF token")

        self.tokens = tokens
        self.current = 0
        self.depth = 0

    def parse(self) -> Expr:
        """Parse the tokens and return the expression.

        Only one expression is parsed; Tokens following it are left unread.

        Grammar Rule:
        expression → equality ;

        Returns:
            expression: Expr. Parsed expression.

        Raises:
            ParseError: On the first syntax error.
        """

        return self.expression()

    def expression(self) -> Expr:
        """Parse an expression.

        Grammar Rule:
        expression → equality ;

        Returns:
            expression: Expr. Parsed expression.
        """

        return self.equality()

    def equality(self) -> ParsedBinary:
        """Parse an equality expression, or any of lower precedence.

        Grammar Rule:
        equality → comparison ( ( "!=" | "==" ) comparison )* ;

        Returns:
            expression: ParsedBinary. Parsed equality expression.
        """

        # comparison (1)
        expr = self.comparison()

        # ( ( "!=" | "==" ) comparison )*
        # Keep folding into the left operand, so 1 == 2 == 3 is (1 == 2) == 3
        while self.match(TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL):
            operator = self.previous()
            right = self.comparison()
            expr = Binary(expr, operator, right)

        return expr

    def comparison(self) -> ParsedBinary:
        """Parse a comparison expression, or any of lower precedence.

        Grammar Rule:
        comparison → term ( ( ">" | ">=" | "<" | "<=" ) term )* ;

        Returns:
            expression: ParsedBinary. Parsed comparison expression.
        """

        expr = self.term()

        while self.match(
            TokenType.GREATER,
            TokenType.GREATER_EQUAL,
            TokenType.LESS,
            TokenType.LESS_EQUAL,
        ):
            operator = self.previous()
            right = self.term()
            expr = Binary(expr, operator, right)

        return expr

    def term(self) -> ParsedBinary:
        """Parse an addition or subtraction, or any of lower precedence.

        Grammar Rule:
        term → factor ( ( "-" | "+" ) factor )* ;

        Returns:
            expression: ParsedBinary. Parsed term expression.
        """

        expr = self.factor()

        while self.match(TokenType.MINUS, TokenType.PLUS):
            operator = self.previous()
            right = self.factor()
            expr = Binary(expr, operator, right)

        return expr

    def factor(self) -> ParsedBinary:
        """Parse a multiplication or division, or any of lower precedence.

        Grammar Rule:
        factor → unary ( ( "/" | "*" ) unary )* ;

        Returns:
            expression: ParsedBinary. Parsed factor expression.
        """

        expr = self.unary()

        while self.match(TokenType.SLASH, TokenType.STAR):
            operator = self.previous()
            right = self.unary()
            expr = Binary(expr, operator, right)

        return expr

    def unary(self) -> ParsedUnary:
        """Parse a unary expression, or a primary.

        Grammar Rule:
        unary → ( "!" | "-" ) unary | primary ;

        Returns:
            expression: ParsedUnary. Parsed unary expression.

        Raises:
            ExpressionTooDeep: If unary operators nest past MAX_DEPTH.
        """

        # ( "!" | "-" ) unary
        if self.match(TokenType.BANG, TokenType.MINUS):
            operator = self.previous()
            # Recurse as many times as we continue to find ! or -
            # e.g. !!true
            self.enter(operator)
            right = self.unary()
            self.leave()
            return Unary(operator, right)

        return self.primary()

    def primary(self) -> ParsedPrimary:
        """Parse a primary expression.

        This is the highest precedence expression and represents a concrete value.

        Grammar Rule:
        primary → NUMBER | STRING | "true" | "false" | "nil"
                | "(" expression ")" ;

        Returns:
            expression: ParsedPrimary. Parsed primary expression.

        Raises:
            ExpectedExpression: If no primary expression starts here.
            ExpectedToken: If a grouping is not closed.
            ExpressionTooDeep: If groupings nest past MAX_DEPTH.
        """

        # "false" | "true" | "nil"
        # These are carried by their spelling, e.g. Literal(identifier("nil"))
        if self.match(TokenType.FALSE, TokenType.TRUE, TokenType.NIL):
            return Literal(LiteralValue.identifier(self.previous().lexeme))

        # NUMBER | STRING
        # e.g. 5 or "five"
        if self.match(TokenType.NUMBER, TokenType.STRING):
            return Literal(self.previous().literal_value)

        if self.match(TokenType.LEFT_PAREN):
            self.enter(self.previous())
            # expression (1)
            expr = self.expression()
            self.leave()
            # ")", if not found this is a syntax error
            self.consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouping(expr)

        raise ExpectedExpression(self.peek())

    def enter(self, token: Token) -> None:
        """Open one more level of grouping or unary nesting.

        Args:
            token: Token. The "(" or unary operator opening the level.

        Raises:
            ExpressionTooDeep: If this would nest past MAX_DEPTH.
        """

        if self.depth >= MAX_DEPTH:
            raise ExpressionTooDeep(token)

        self.depth += 1

    def leave(self) -> None:
        self.depth -= 1

    def match(self, *types: TokenType) -> bool:
        """Check for a TokenType(s) and advance if present.

        Args:
            types: TokenType. Token types to check for.

        Returns:
            matched: bool. Whether or not the current token is one of the
                provided types.
        """

        for type in types:
            if self.check(type):
                self.advance()
                return True

        return False

    def consume(self, type: TokenType, message: str) -> Token:
        """Consume a specific type of Token, erroring if not found.

        This is used for things ie groupings where a "( expression" must
        have a corresponding ")".

        Args:
            type: TokenType. Type of Token to match and consume.
            message: str. Message for raised error if Token not found.

        Raises:
            ExpectedToken: If the current Token is not of the provided type.
        """

        if self.check(type):
            return self.advance()

        raise ExpectedToken(self.peek(), type, message)

    def check(self, type: TokenType) -> bool:
        """Check if the current token is of the provided type.

        If at the end of the file, this will always return false.

        Returns:
            result: bool. Whether or not the Token is the provided type.
        """

        if self.is_at_end():
            return False

        return self.peek().type == type

    def advance(self) -> Token:
        """Advance to the next Token and return the now previous Token.

        Returns:
            token: Token. The now previous Token after advancing to the
                next, or EOF if already at the end.
        """

        if not self.is_at_end():
            self.current += 1

        return self.previous()

    def is_at_end(self) -> bool:
        return self.peek().type == TokenType.EOF

    def peek(self) -> Token:
        return self.tokens[self.current]

    def previous(self) -> Token:
        return self.tokens[self.current - 1]

    def synchronize(self) -> None:
        """Discard Tokens until the (probable) start of the next statement.

        This looks for either the end of the current statement (;) or the
        beginning of another statement (class/fun/var/etc). It is not used by
        parse(), which stops at the first error; it is meant for resuming after
        an error once statements can be parsed.
        """

        self.advance()

        while not self.is_at_end():
            if self.previous().type == TokenType.SEMICOLON:
                return

            match self.peek().type:
                case (
                    TokenType.CLASS
                    | TokenType.FUN
                    | TokenType.VAR
                    | TokenType.FOR
                    | TokenType.IF
                    | TokenType.WHILE
                    | TokenType.PRINT
                    | TokenType.RETURN
                ):
                    return
                case _:
                    self.advance()


def parse(tokens: List[Token]) -> Tuple[Optional[Expr], List[Diagnostic]]:
    """Parse a single expression from scanned Tokens.

    Args:
        tokens: List[Token]. Tokens to parse, ending with an EOF Token.

    Returns:
        result: Tuple[Optional[Expr], List[Diagnostic]]. The expression and no
            diagnostics, or None and the Diagnostic of the first syntax error.
    """

    diagnostics = Diagnostics()
    parser = Parser(tokens)
    try:
        expr: Optional[Expr] = parser.parse()
    except ParseError as error:
        diagnostics.error(error)
        expr = None
    except RecursionError:
        # Only reachable when called from an already deep stack.
        diagnostics.error(ExpressionTooDeep(parser.peek()))
        expr = None

    return expr, diagnostics.diagnostics
