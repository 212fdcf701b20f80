"""Domain Types: value objects passed between validator, dispatcher, and routes.

Invariants:
    - OperandPair and OperationResult are immutable once built
    - Operand and result values fit in a signed 64-bit integer
    - All supported operations encoded as an Enum, no raw string matching

Design Decisions:
    - Frozen dataclasses over Pydantic models: core stays free of IO and validation concerns
    - str Enum: operation name doubles as the route path segment
"""

from dataclasses import dataclass
from enum import Enum


INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class Operation(str, Enum):
    """The four arithmetic operations exposed over HTTP."""
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"

    @property
    def log_tag(self) -> str:
        return self.value.upper()

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {
    Operation.ADD: "+",
    Operation.SUBTRACT: "-",
    Operation.MULTIPLY: "*",
    Operation.DIVIDE: "/",
}


@dataclass(frozen=True)
class OperandPair:
    """Validated operands. Missing fields have already been defaulted to 0."""
    a: int = 0
    b: int = 0


@dataclass(frozen=True)
class OperationResult:
    value: int

    def to_response(self) -> dict:
        return {"result": self.value}
