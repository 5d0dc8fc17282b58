"""Run the validate -> convert -> evaluate pipeline for one expression."""
from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field

from postfix_calc.common.errors import CalculatorError
from postfix_calc.common.logger import logger
from postfix_calc.common.operations import OperationRequest, OperationResult
from postfix_calc.engine.converter import to_postfix
from postfix_calc.engine.evaluator import evaluate
from postfix_calc.engine.validator import validate


def calculate(tokens: Sequence[str]) -> int:
    """
    Evaluate an infix token sequence.

    :param Sequence[str] tokens: Expression tokens, e.g. ["2", "+", "3", "x", "4"]

    :return: Integer result
    :rtype: int
    :raises CalculatorError: If validation or evaluation fails
    """
    expression = validate(tokens)
    postfix = to_postfix(expression)
    return evaluate(postfix)


class Calculation(BaseModel):
    """
    A single calculation request and its execution.

    Lifecycle:
        - Created with the request holding the raw tokens of one expression
        - run() evaluates them once and reports a result or a typed error
        - Nothing is shared between calculations
    """

    # Make the Pydantic instance immutable (read-only)
    model_config = ConfigDict(frozen=True)

    request: OperationRequest = Field(..., description="Tokens of the expression to evaluate")

    @property
    def expression(self) -> str:
        return self.request.expression

    def run(self) -> OperationResult:
        """
        Evaluate the expression and package the outcome.

        Only pipeline errors are turned into error results; anything else propagates.

        :return: Result or error for this expression
        :rtype: OperationResult
        """
        logger.info(f"🧮🏁 Calculation started: {self.expression}")

        try:
            result = calculate(self.request.tokens)
        except CalculatorError as exc:
            logger.error(f"🧮❌ Calculation failed ({exc.kind}): {exc}\nExpression: {self.expression!r}")
            return OperationResult(expression=self.expression, error=str(exc), error_kind=exc.kind)

        logger.info(f"🧮✅ Calculation finished: {self.expression} = {result}")
        return OperationResult(expression=self.expression, result=result)
