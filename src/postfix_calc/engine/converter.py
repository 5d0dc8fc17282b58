"""Convert validated infix expressions to Reverse Polish Notation."""
from typing import List

from postfix_calc.common.logger import logger
from postfix_calc.common.models import PostfixExpression, ValidatedExpression
from postfix_calc.common.tokens import IntegerLiteral, Operator, Token


def to_postfix(expression: ValidatedExpression) -> PostfixExpression:
    """
    Convert an infix expression into Reverse Polish Notation (RPN) using the Shunting-yard algorithm.

    Operators are held on a stack and released to the output once an operator of
    lower or equal precedence arrives. Releasing on equal precedence is what makes
    chains such as 10 - 5 - 2 group as (10 - 5) - 2.

    Examples:
        - Infix: 2 + 3 x 4  ->  RPN: 2 3 4 x +
        - Infix: 10 - 3 - 2  ->  RPN: 10 3 - 2 -

    :param ValidatedExpression expression: Validated infix expression

    :return: Expression in postfix order
    :rtype: PostfixExpression
    """
    output: List[Token] = []
    stack: List[Operator] = []

    for token in expression.tokens:
        if isinstance(token, IntegerLiteral):
            # Numbers are added directly to the output
            output.append(token)
        else:
            # Pop operators with higher or equal precedence
            while stack and stack[-1].precedence >= token.precedence:
                output.append(stack.pop())
            stack.append(token)

    # Append remaining operators in reverse order (stack top first)
    output.extend(reversed(stack))

    postfix = PostfixExpression(tokens=tuple(output))
    logger.debug(f"🔀 {expression} -> {postfix}")
    return postfix
