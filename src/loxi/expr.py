#!/usr/bin/env python3
from __future__ import annotations

from abc import ABCMeta, abstractmethod
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from loxi.literal import LiteralValue
from loxi.token import Token

# TypeVariable for the return type of the Visitor interface. This is covariant
# to allow for Visitor[object] to accept any visitor.
# For more info:
# https://peps.python.org/pep-0484/#covariance-and-contravariance
R = TypeVar("R", covariant=True)


# eq=False keeps identity equality and hashing, two structurally equal
# subtrees parsed from different places in the source are different nodes.
@dataclass(eq=False, frozen=True)
class Expr(metaclass=ABCMeta):
    """Base class for a Lox expression.

    An expression is a tree of nodes built by the Parser from a sequence of
    Tokens. Every composite node owns its children outright, nothing is shared
    between two parents and nodes never point back up the tree.

    For example:
    tokens = Scanner("2").scan_tokens()
    Parser(tokens).parse()

    Produces the simplest expression:
    Literal(value=LiteralValue.number(2.0))

    Expressions are implemented using the visitor pattern. All expressions
    implement a single method, accept, which will route the expression to the
    correct visitor method on the invoking instance.
    """

    @abstractmethod
    def accept(self, visitor: Visitor[R]) -> R: ...


@dataclass(eq=False, frozen=True)
class Binary(Expr):
    """Binary expression.

    Comparison operators:
    > >= < <=

    Equality operators:
    != ==

    Arithmetic operators:
    - + / *

    For example:
    tokens = Scanner("2 + 2").scan_tokens()
    Parser(tokens).parse()

    Binary(
        left=Literal(LiteralValue.number(2.0)),
        operator=Token(TokenType.PLUS, "+", None, 1),
        right=Literal(LiteralValue.number(2.0)),
    )

    Args:
        left: Expr. Left operand.
        operator: Token. Token representing the binary operation.
        right: Expr. Right operand.
    """

    left: Expr
    operator: Token
    right: Expr

    def accept(self, visitor: Visitor[R]) -> R:
        return visitor.visit_binary_expr(self)


@dataclass(eq=False, frozen=True)
class Grouping(Expr):
    """Grouping expression.

    An expression enclosed in parentheses, ie (2 + 2).

    Args:
        expression: Expr. The enclosed expression.
    """

    expression: Expr

    def accept(self, visitor: Visitor[R]) -> R:
        return visitor.visit_grouping_expr(self)


@dataclass(eq=False, frozen=True)
class Literal(Expr):
    """Literal expression.

    A constant number, string, or one of the true/false/nil keywords, which
    are carried as identifier-marker values. A Literal with no value at all is
    allowed as well, and prints the same as nil.

    Args:
        value: Optional[LiteralValue]. The constant value, if any.
    """

    value: Optional[LiteralValue]

    def accept(self, visitor: Visitor[R]) -> R:
        return visitor.visit_literal_expr(self)


@dataclass(eq=False, frozen=True)
class Unary(Expr):
    """Unary expression.

    Either logical negation (!) or arithmetic negation (-) of its operand.
    Unary operators nest, so --1 is a Unary whose operand is another Unary.

    Args:
        operator: Token. Token representing the unary operation.
        right: Expr. Operand.
    """

    operator: Token
    right: Expr

    def accept(self, visitor: Visitor[R]) -> R:
        return visitor.visit_unary_expr(self)


class Visitor(Generic[R], metaclass=ABCMeta):
    """Expression visitor.

    This is a generic class which represents the interface for a Lox expression
    visitor. An implementing subclass must override visit methods for all Expr
    types and return the same type from each.

    For example:
    class Printer(Visitor[str]):
        def print(self, expr: Expr) -> str:
            return expr.accept(self)

        def visit_binary_expr(self, expr: Binary) -> str:
            ...
    """

    @abstractmethod
    def visit_binary_expr(self, expr: Binary) -> R: ...

    @abstractmethod
    def visit_grouping_expr(self, expr: Grouping) -> R: ...

    @abstractmethod
    def visit_literal_expr(self, expr: Literal) -> R: ...

    @abstractmethod
    def visit_unary_expr(self, expr: Unary) -> R: ...
