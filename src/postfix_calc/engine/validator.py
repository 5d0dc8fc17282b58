"""Check the shape and literals of an infix token sequence before any computation."""
from decimal import Decimal, InvalidOperation
import re
from typing import List, Optional, Sequence

from postfix_calc.common.errors import (
    CalculatorError,
    InvalidInputError,
    InvalidNumberError,
    InvalidOperatorError,
    NumberOverflowError,
)
from postfix_calc.common.logger import logger
from postfix_calc.common.models import ValidatedExpression
from postfix_calc.common.tokens import (
    INT64_MAX,
    INT64_MIN,
    IntegerLiteral,
    Operator,
    Token,
    classify,
    is_operator,
)

# Finite decimal real: sign, digits with optional fraction, optional exponent.
# Narrower than float(), which also accepts "inf", "nan", "1_0" and padding.
REAL_PATTERN = re.compile(
    r"(?P<mantissa>[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+))(?:[eE](?P<exponent>[+-]?[0-9]+))?"
)

# Decimal cannot represent exponents beyond 18 digits
MAX_EXPONENT_DIGITS: int = 18


def _extreme_exponent_error(token: str, mantissa: str, exponent: str) -> CalculatorError:
    """
    Classify a number whose exponent is too large for Decimal.

    Such a number is zero, a fraction closer to zero than any integer, or far outside the 64-bit range.

    :param str token: Raw token
    :param str mantissa: Digits before the exponent marker
    :param str exponent: Signed exponent digits

    :return: Error to raise for the token
    :rtype: CalculatorError
    """
    if exponent.startswith("-") or not re.search(r"[1-9]", mantissa):
        return InvalidNumberError(token)
    return NumberOverflowError(token)


def _parse_real(token: str) -> Decimal:
    """
    Parse a token as an exact decimal number.

    :param str token: Raw token

    :return: Decimal value
    :rtype: Decimal
    :raises InvalidNumberError: If the token is not a finite real number
    :raises NumberOverflowError: If the exponent puts the number far outside the 64-bit range
    """
    match = REAL_PATTERN.fullmatch(token)
    if not match:
        raise InvalidNumberError(token)

    mantissa = match["mantissa"]
    exponent = match["exponent"] or "0"
    # Exponents this long are beyond what Decimal accepts
    if len(exponent.lstrip("+-").lstrip("0")) > MAX_EXPONENT_DIGITS:
        raise _extreme_exponent_error(token, mantissa, exponent)

    try:
        return Decimal(token)
    except InvalidOperation as exc:
        # Adjusted exponent (mantissa digits + exponent) still out of Decimal's range
        raise _extreme_exponent_error(token, mantissa, exponent) from exc


def _check_operand(token: str) -> IntegerLiteral:
    """
    Apply the operand rules to one token: real number, then range, then integer literal.

    :param str token: Token at an operand position

    :return: Classified literal
    :rtype: IntegerLiteral
    :raises InvalidNumberError: If the token is not a number or not an integer literal
    :raises NumberOverflowError: If the number lies outside the 64-bit signed range
    """
    number = _parse_real(token)

    # Exact comparison: converting to float would round INT64_MAX up to 2**63
    if not INT64_MIN <= number <= INT64_MAX:
        raise NumberOverflowError(token)

    literal = classify(token)
    # Real but not an integer literal, e.g. "3.1" or "1e3"
    if not isinstance(literal, IntegerLiteral):
        raise InvalidNumberError(token)
    return literal


def validate(tokens: Sequence[str]) -> ValidatedExpression:
    """
    Validate an infix token sequence of the form `number (operator number)*`.

    Rules are checked in a fixed order and the first violation is raised:
        1. The token count must be odd.
        2. Every token at an even position must be an in-range integer literal.
        3. Every token at an odd position must be one of + - x / %.

    :param Sequence[str] tokens: Raw expression tokens

    :return: Classified expression, ready for conversion
    :rtype: ValidatedExpression
    :raises CalculatorError: A subclass naming the first violated rule
    """
    if len(tokens) % 2 == 0:
        raise InvalidInputError()

    classified: List[Optional[Token]] = [None] * len(tokens)

    for i in range(0, len(tokens), 2):
        classified[i] = _check_operand(tokens[i])

    for i in range(1, len(tokens), 2):
        if not is_operator(tokens[i]):
            raise InvalidOperatorError(tokens[i])
        classified[i] = Operator(tokens[i])

    logger.debug(f"🔎✅ Validated {len(tokens)} tokens: {' '.join(tokens)}")
    return ValidatedExpression(source=tuple(tokens), tokens=tuple(classified))
