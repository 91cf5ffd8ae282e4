#!/usr/bin/env python3
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import Union


class LiteralKind(IntEnum):
    """Kinds of value a LiteralValue can carry."""

    STRING = auto()
    NUMBER = auto()
    # Spelling of a value keyword (true, false, nil).
    IDENTIFIER = auto()


@dataclass(frozen=True)
class LiteralValue:
    """Tagged literal value.

    The Scanner attaches one of these to every NUMBER and STRING Token, holding
    the eagerly converted Python value of the lexeme. The Parser builds
    identifier-marker values for the true, false and nil keywords so that they
    can travel through a Literal expression like any other constant.

    For example:
    LiteralValue.number(4.0)         -> 4
    LiteralValue.number(4.2)         -> 4.2
    LiteralValue.string("foo")       -> foo
    LiteralValue.identifier("nil")   -> nil

    Args:
        kind: LiteralKind. Which payload this value holds.
        value: Union[str, float]. The payload, a float for numbers and a str
            otherwise.
    """

    kind: LiteralKind
    value: Union[str, float]

    @classmethod
    def string(cls, value: str) -> LiteralValue:
        return cls(LiteralKind.STRING, value)

    @classmethod
    def number(cls, value: float) -> LiteralValue:
        return cls(LiteralKind.NUMBER, float(value))

    @classmethod
    def identifier(cls, name: str) -> LiteralValue:
        return cls(LiteralKind.IDENTIFIER, name)

    def __str__(self) -> str:
        return self.to_string()

    def to_string(self) -> str:
        """Textual form of the literal, as used by the AstPrinter.

        Integral numbers drop their fractional part, so 123.0 prints as 123.

        Returns:
            text: str. Printable representation of the payload.
        """

        if self.kind is LiteralKind.NUMBER:
            number = float(self.value)
            if number.is_integer():
                return str(int(number))

            return str(number)

        return str(self.value)
