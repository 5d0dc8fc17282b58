"""Evaluate postfix expressions with overflow-checked 64-bit integer arithmetic."""
from typing import Callable, Dict, List

from postfix_calc.common.errors import DivisionByZeroError, OutOfBoundsError
from postfix_calc.common.logger import logger
from postfix_calc.common.models import PostfixExpression
from postfix_calc.common.tokens import INT64_MAX, INT64_MIN, IntegerLiteral, Operator


def _truncated_div(a: int, b: int) -> int:
    """Integer division rounding toward zero, unlike Python's floor division."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _truncated_mod(a: int, b: int) -> int:
    """Remainder carrying the sign of the dividend: a - trunc(a / b) * b."""
    return a - _truncated_div(a, b) * b


# Exact results; range checking happens in apply_operator
OPERATIONS: Dict[Operator, Callable[[int, int], int]] = {
    Operator.ADD: lambda a, b: a + b,
    Operator.SUB: lambda a, b: a - b,
    Operator.MUL: lambda a, b: a * b,
    Operator.DIV: _truncated_div,
    Operator.MOD: _truncated_mod,
}


def apply_operator(operator: Operator, a: int, b: int) -> int:
    """
    Compute `a operator b` and check the result fits in a 64-bit signed integer.

    :param Operator operator: Operator to apply
    :param int a: Left-hand operand
    :param int b: Right-hand operand

    :return: Result of the operation
    :rtype: int
    :raises DivisionByZeroError: If b is zero for / or %
    :raises OutOfBoundsError: If the result is outside the 64-bit signed range
    """
    if operator in (Operator.DIV, Operator.MOD) and b == 0:
        raise DivisionByZeroError(a, operator.value)

    result = OPERATIONS[operator](a, b)

    # The remainder is bounded by |b| and never leaves the range
    if not INT64_MIN <= result <= INT64_MAX:
        raise OutOfBoundsError(a, b, operator.value)
    return result


def evaluate(postfix: PostfixExpression) -> int:
    """
    Evaluate an expression in Reverse Polish Notation using an operand stack.

    For each operator the first pop is the right-hand operand and the second pop the left-hand one.

    :param PostfixExpression postfix: Well-formed postfix expression

    :return: Integer result
    :rtype: int
    :raises CalculatorError: On division by zero or integer overflow
    """
    stack: List[int] = []

    for token in postfix.tokens:
        if isinstance(token, IntegerLiteral):
            stack.append(token.value)
        else:
            b = stack.pop()
            a = stack.pop()
            stack.append(apply_operator(token, a, b))

    # PostfixExpression guarantees a single value is left
    result = stack.pop()
    logger.debug(f"🧮 {postfix} = {result}")
    return result
