"""Pydantic models for calculation requests and results."""
from typing import Annotated, List, Optional

from pydantic import BaseModel, Field, model_validator

from postfix_calc.common.tokens import INT64_MAX, INT64_MIN

Int64 = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]


class OperationRequest(BaseModel):
    """Represents a single calculation request: one token per command-line argument."""

    tokens: List[str] = Field(..., description="Expression tokens, e.g. ['3', '+', '4']")

    @property
    def expression(self) -> str:
        """Tokens joined with spaces, for display."""
        return " ".join(self.tokens)


class OperationResult(BaseModel):
    """Represents the outcome of a calculation: either a result or an error."""

    expression: str = Field(..., description="Original expression")
    result: Optional[Int64] = Field(default=None, description="Evaluated 64-bit integer result")
    error: Optional[str] = Field(default=None, description="Human-readable error message")
    error_kind: Optional[str] = Field(default=None, description="Error taxonomy tag, e.g. DivisionByZero")

    @model_validator(mode="after")
    def exactly_one_outcome(self) -> "OperationResult":
        """Ensure a result and an error are never both present or both missing."""
        if (self.result is None) == (self.error is None):
            raise ValueError("Exactly one of result and error must be set")
        if self.error is not None and self.error_kind is None:
            raise ValueError("An error result must carry its error kind")
        return self

    @property
    def succeeded(self) -> bool:
        return self.error is None
