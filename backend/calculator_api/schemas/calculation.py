"""Calculation Schemas: Pydantic models for the arithmetic endpoints' wire format.

Invariants:
    - OperandsRequest accepts only 'a' and 'b' (extra="forbid")
    - Operands are strict 64-bit integers: no str, float, or bool coercion
    - JSON null and a missing field both mean 0

Design Decisions:
    - Field(strict=True) over model-wide strict: the null-to-zero hook still runs first
    - Response models exist for OpenAPI docs; routes build bodies via to_response()
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from calculator_api.core.domain_types import INT64_MAX, INT64_MIN


Int64 = Annotated[int, Field(strict=True, ge=INT64_MIN, le=INT64_MAX)]


class OperandsRequest(BaseModel):
    """Request body for /add, /subtract, /multiply, /divide."""
    model_config = ConfigDict(extra="forbid")

    a: Int64 = 0
    b: Int64 = 0

    @field_validator("a", "b", mode="before")
    @classmethod
    def null_as_zero(cls, v):
        return 0 if v is None else v


class OperationResponse(BaseModel):
    result: int


class ErrorResponse(BaseModel):
    error: str
