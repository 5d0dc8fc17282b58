"""Immutable token sequences passed between pipeline stages."""
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from postfix_calc.common.tokens import IntegerLiteral, Token


class ValidatedExpression(BaseModel):
    """
    Infix token sequence that passed input validation.

    Produced by the validator only; the converter accepts nothing else.
    """

    model_config = ConfigDict(frozen=True)

    source: Tuple[str, ...] = Field(..., min_length=1, description="Raw tokens as supplied")
    tokens: Tuple[Token, ...] = Field(..., min_length=1, description="Classified infix tokens")

    def __str__(self) -> str:
        return " ".join(self.source)


class PostfixExpression(BaseModel):
    """
    Token sequence in Reverse Polish Notation.

    Construction fails unless the sequence is well-formed postfix: every operator
    finds two operands and exactly one value is left at the end. The evaluator
    therefore never has to deal with a short stack.
    """

    model_config = ConfigDict(frozen=True)

    tokens: Tuple[Token, ...] = Field(..., min_length=1, description="Tokens in postfix order")

    @field_validator("tokens")
    def tokens_must_be_well_formed(cls, v: Tuple[Token, ...]) -> Tuple[Token, ...]:
        """Simulate the operand stack depth over the sequence."""
        depth = 0
        for token in v:
            if isinstance(token, IntegerLiteral):
                depth += 1
            else:
                # Pops two operands, pushes one result
                if depth < 2:
                    raise ValueError(f"Operator {token} is missing an operand")
                depth -= 1
        if depth != 1:
            raise ValueError(f"Postfix sequence leaves {depth} values instead of 1")
        return v

    def __str__(self) -> str:
        return " ".join(str(token) for token in self.tokens)
