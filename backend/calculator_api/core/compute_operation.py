"""Operation Dispatch: pure integer arithmetic over a validated OperandPair.

Invariants:
    - Results are signed 64-bit; add, subtract, multiply, and INT64_MIN / -1 wrap around
    - divide checks b == 0 before computing and raises DivisionByZeroError
    - divide truncates toward zero (-10 / 3 == -3), unlike Python's floor division
"""

from calculator_api.core.domain_types import (
    INT64_MIN,
    Operation,
    OperandPair,
    OperationResult,
)
from calculator_api.core.errors import DivisionByZeroError

_INT64_SPAN = 2 ** 64


def wrap_int64(value: int) -> int:
    """Reduce an arbitrary int to its two's complement 64-bit value."""
    return (value - INT64_MIN) % _INT64_SPAN + INT64_MIN


def truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def add(operands: OperandPair) -> int:
    return operands.a + operands.b


def subtract(operands: OperandPair) -> int:
    return operands.a - operands.b


def multiply(operands: OperandPair) -> int:
    return operands.a * operands.b


def divide(operands: OperandPair) -> int:
    if operands.b == 0:
        raise DivisionByZeroError()
    return truncating_div(operands.a, operands.b)


_DISPATCH = {
    Operation.ADD: add,
    Operation.SUBTRACT: subtract,
    Operation.MULTIPLY: multiply,
    Operation.DIVIDE: divide,
}


def compute_operation(operation: Operation, operands: OperandPair) -> OperationResult:
    """Run one operation. Raises DivisionByZeroError for divide with b == 0."""
    return OperationResult(wrap_int64(_DISPATCH[operation](operands)))
