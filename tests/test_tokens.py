"""Test token classification."""
from pydantic import ValidationError
import pytest

from postfix_calc.common.tokens import (
    INT64_MAX,
    INT64_MIN,
    IntegerLiteral,
    Operator,
    classify,
    is_operator,
)


@pytest.mark.parametrize("token,expected", [
    ("42", 42),
    ("0", 0),
    ("+5", 5),
    ("-3", -3),
    ("007", 7),
    (str(INT64_MAX), INT64_MAX),
    (str(INT64_MIN), INT64_MIN),
])
def test_classify_integer_literal(token: str, expected: int) -> None:
    """Signed base-10 integers become literals, a sign adjoined to digits included."""
    assert classify(token) == IntegerLiteral(value=expected)


@pytest.mark.parametrize("token,expected", [
    ("+", Operator.ADD),
    ("-", Operator.SUB),
    ("x", Operator.MUL),
    ("/", Operator.DIV),
    ("%", Operator.MOD),
])
def test_classify_operator(token: str, expected: Operator) -> None:
    """Standalone operator symbols become operators."""
    assert classify(token) is expected


@pytest.mark.parametrize("token", [
    "",
    "abc",
    "3.1",
    "1e3",
    " 3",
    "1_000",
    "++",
    "*",
    "--5",
    "٣",  # ARABIC-INDIC DIGIT THREE
    str(INT64_MAX + 1),
    str(INT64_MIN - 1),
])
def test_classify_rejects(token: str) -> None:
    """Anything else, including out-of-range integers, is left unclassified."""
    assert classify(token) is None


def test_precedence_classes() -> None:
    """Multiplicative operators bind tighter than additive ones."""
    assert Operator.ADD.precedence == Operator.SUB.precedence == 1
    assert Operator.MUL.precedence == Operator.DIV.precedence == Operator.MOD.precedence == 2


@pytest.mark.parametrize("token,expected", [
    ("+", True),
    ("%", True),
    ("x", True),
    ("X", False),
    ("+5", False),
    ("foo", False),
])
def test_is_operator(token: str, expected: bool) -> None:
    """is_operator only accepts the exact symbols."""
    assert is_operator(token) == expected


def test_integer_literal_is_immutable() -> None:
    """Literals cannot be modified once classified."""
    literal = IntegerLiteral(value=1)
    with pytest.raises(ValidationError):
        literal.value = 2


def test_integer_literal_range() -> None:
    """Literals are limited to the 64-bit signed range."""
    with pytest.raises(ValidationError):
        IntegerLiteral(value=INT64_MAX + 1)
    with pytest.raises(ValidationError):
        IntegerLiteral(value=INT64_MIN - 1)


def test_token_str() -> None:
    """Tokens print as they would be typed."""
    assert str(IntegerLiteral(value=-3)) == "-3"
    assert str(Operator.MUL) == "x"
