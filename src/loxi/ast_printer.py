#!/usr/bin/env python3
from typing import List, Union

from loxi.expr import Binary, Expr, Grouping, Literal, Unary, Visitor

# Output of a visit: text to emit as-is, or a child expression to print in its
# place.
Pieces = List[Union[str, Expr]]


class AstPrinter(Visitor[Pieces]):
    """Printer generating a fully parenthesized, prefix form of an expression.

    The output is meant for debugging and tests. It is not Lox source and can
    not be scanned back into the same tree.

    Each visit method only describes its own node, leaving child expressions
    in the returned pieces. print() expands those with an explicit stack, so
    long operator chains like 1 + 1 + ... + 1 print without recursion.

    To use the printer:
    tokens = Scanner("-123 * (45.67)").scan_tokens()
    AstPrinter().print(Parser(tokens).parse())
    (* (- 123) (group 45.67))
    """

    def print(self, expr: Expr) -> str:
        builder: List[str] = []
        stack: Pieces = [expr]

        while stack:
            piece = stack.pop()
            if isinstance(piece, str):
                builder.append(piece)
            else:
                stack.extend(reversed(piece.accept(self)))

        return "".join(builder)

    def visit_binary_expr(self, expr: Binary) -> Pieces:
        return self.parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def visit_grouping_expr(self, expr: Grouping) -> Pieces:
        return self.parenthesize("group", expr.expression)

    def visit_literal_expr(self, expr: Literal) -> Pieces:
        if expr.value is None:
            return ["nil"]

        return [expr.value.to_string()]

    def visit_unary_expr(self, expr: Unary) -> Pieces:
        return self.parenthesize(expr.operator.lexeme, expr.right)

    def parenthesize(self, name: str, *exprs: Expr) -> Pieces:
        pieces: Pieces = [f"({name}"]
        for expr in exprs:
            pieces.append(" ")
            pieces.append(expr)
        pieces.append(")")

        return pieces
