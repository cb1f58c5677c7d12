"""
Request and response models for the expression API.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, validator

from ..core.config import settings


class EvaluateRequest(BaseModel):
    """Request to evaluate an expression"""
    expression: str = Field(..., description="Arithmetic expression, e.g. '3 + 4 * 2'")
    variables: Dict[str, float] = Field(default_factory=dict, description="Variable bindings by name")

    @validator('expression')
    def limit_length(cls, v):
        """Reject oversized input"""
        if len(v) > settings.MAX_EXPRESSION_LENGTH:
            raise ValueError(
                f"Expression too long (max {settings.MAX_EXPRESSION_LENGTH} characters)"
            )
        return v


class PostfixRequest(BaseModel):
    """Request to convert an expression to postfix"""
    expression: str = Field(..., description="Arithmetic expression")

    @validator('expression')
    def limit_length(cls, v):
        """Reject oversized input"""
        if len(v) > settings.MAX_EXPRESSION_LENGTH:
            raise ValueError(
                f"Expression too long (max {settings.MAX_EXPRESSION_LENGTH} characters)"
            )
        return v


class EvaluateResponse(BaseModel):
    """Evaluation result; non-finite results are only given in text form"""
    expression: str
    result: Optional[float] = None
    text: str


class PostfixResponse(BaseModel):
    """Postfix form of an expression"""
    expression: str
    postfix: List[str]
