"""Classify raw string tokens as integer literals or operators."""
from enum import Enum
import re
from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# 64-bit signed integer range
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1
MAX_INT64_DIGITS: int = len(str(INT64_MAX))

# Optional sign directly adjoined to ASCII digits. int() alone would also accept
# whitespace, underscores and non-ASCII digits.
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class Operator(str, Enum):
    """Binary operators understood by the calculator."""

    ADD = "+"
    SUB = "-"
    MUL = "x"
    DIV = "/"
    MOD = "%"

    @property
    def precedence(self) -> int:
        """Binding strength: higher binds tighter."""
        return PRECEDENCE[self]

    def __str__(self) -> str:
        return self.value


PRECEDENCE: Dict[Operator, int] = {
    Operator.ADD: 1,
    Operator.SUB: 1,
    Operator.MUL: 2,
    Operator.DIV: 2,
    Operator.MOD: 2,
}

OPERATOR_SYMBOLS = frozenset(op.value for op in Operator)


class IntegerLiteral(BaseModel):
    """A signed integer operand that fits in 64 bits."""

    model_config = ConfigDict(frozen=True)

    value: int = Field(..., ge=INT64_MIN, le=INT64_MAX, description="Operand value")

    def __str__(self) -> str:
        return str(self.value)


Token = Union[IntegerLiteral, Operator]


def is_operator(token: str) -> bool:
    """Return True if the token is exactly one of the operator symbols."""
    return token in OPERATOR_SYMBOLS


def classify(token: str) -> Optional[Token]:
    """
    Classify a single raw token.

    A sign adjoined to digits ("+5", "-3") makes a literal; a standalone "+" or "-" is an operator.
    Integers outside the 64-bit range are not clamped: they are left unclassified.

    :param str token: Raw token

    :return: IntegerLiteral, Operator, or None if the token is neither
    :rtype: Optional[Token]
    """
    if INTEGER_PATTERN.fullmatch(token):
        sign = "-" if token.startswith("-") else ""
        digits = token.lstrip("+-").lstrip("0") or "0"
        # Longer digit strings are out of range, and int() refuses very long ones
        if len(digits) > MAX_INT64_DIGITS:
            return None
        value = int(sign + digits)
        if INT64_MIN <= value <= INT64_MAX:
            return IntegerLiteral(value=value)
        return None
    if is_operator(token):
        return Operator(token)
    return None
