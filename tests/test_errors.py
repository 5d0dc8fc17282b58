"""Test the calculator error taxonomy."""
import pytest

from postfix_calc.common.errors import (
    CalculatorError,
    DivisionByZeroError,
    InvalidInputError,
    InvalidNumberError,
    InvalidOperatorError,
    NumberOverflowError,
    OutOfBoundsError,
)

ERROR_CLASSES = [
    InvalidInputError,
    InvalidNumberError,
    NumberOverflowError,
    InvalidOperatorError,
    DivisionByZeroError,
    OutOfBoundsError,
]


@pytest.mark.parametrize("error_class", ERROR_CLASSES)
def test_error_classes_are_documented(error_class) -> None:
    """Every error kind describes its trigger and derives from CalculatorError."""
    assert issubclass(error_class, CalculatorError)
    assert error_class.__doc__ and error_class.__doc__.strip()


def test_error_kinds_are_distinct() -> None:
    """Each class carries its own taxonomy tag."""
    kinds = [error_class.kind for error_class in ERROR_CLASSES]
    assert kinds == [
        "InvalidInput",
        "InvalidNumber",
        "NumberOverflow",
        "InvalidOperator",
        "DivisionByZero",
        "OutOfBounds",
    ]


def test_division_by_zero_message() -> None:
    """DivisionByZeroError names the dividend and operator."""
    assert str(DivisionByZeroError(5, "/")) == "Division by zero: 5 / 0"
