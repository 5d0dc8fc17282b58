"""Error types raised by the calculation pipeline."""
from postfix_calc.common.tokens import INT64_MAX, INT64_MIN


class CalculatorError(ValueError):
    """Base error for the calculation pipeline."""

    kind: str = "CalculatorError"


class InvalidInputError(CalculatorError):
    """Token count does not describe a `number (operator number)*` expression."""

    kind = "InvalidInput"

    def __init__(self) -> None:
        super().__init__("Incomplete expression: Expected input of the form [number] [operator number ...]")


class InvalidNumberError(CalculatorError):
    """Operand token is not an integer literal."""

    kind = "InvalidNumber"

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid number: {token}")


class NumberOverflowError(CalculatorError):
    """Operand token lies outside the 64-bit signed range."""

    kind = "NumberOverflow"

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Out of bounds integer: {token}")


class InvalidOperatorError(CalculatorError):
    """Operator token is not one of + - x / %."""

    kind = "InvalidOperator"

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unknown operator: {token}")


class DivisionByZeroError(CalculatorError):
    """Divisor is zero for / or %."""

    kind = "DivisionByZero"

    def __init__(self, dividend: int, operator: str) -> None:
        self.dividend = dividend
        self.operator = operator
        super().__init__(f"Division by zero: {dividend} {operator} 0")


class OutOfBoundsError(CalculatorError):
    """Arithmetic result does not fit in a 64-bit signed integer."""

    kind = "OutOfBounds"

    def __init__(self, left: int, right: int, operator: str) -> None:
        self.left = left
        self.right = right
        self.operator = operator
        super().__init__(
            f"Integer overflow: {left} {operator} {right} is outside [{INT64_MIN}, {INT64_MAX}]"
        )
