"""Calculation Service: parse, compute, and log one arithmetic request.

Invariants:
    - Exactly one "[OPERATION] details" log line per request, success or failure
    - Errors are logged then re-raised unchanged; the API layer turns them into responses
    - No FastAPI types here: callers pass the Content-Type value and raw body
"""

import logging

from calculator_api.core.compute_operation import compute_operation
from calculator_api.core.domain_types import Operation, OperationResult
from calculator_api.core.errors import (
    DomainError, MalformedInputError, UnsupportedMediaTypeError,
)
from calculator_api.services.parse_operands import parse_operands

logger = logging.getLogger(__name__)


def calculate(
    operation: Operation, content_type: str | None, body: bytes | str,
) -> OperationResult:
    """Run `operation` on the operands carried by a raw request."""
    tag = operation.log_tag
    try:
        operands = parse_operands(content_type, body)
    except (UnsupportedMediaTypeError, MalformedInputError) as e:
        logger.warning(
            "[%s] Parsing error: %s", tag, e.message,
            extra={"operation": operation.value, "error_code": e.code},
        )
        raise

    try:
        result = compute_operation(operation, operands)
    except DomainError as e:
        logger.warning(
            "[%s] Entry issue: %s", tag, e.message,
            extra={"operation": operation.value, "error_code": e.code},
        )
        raise

    logger.info(
        "[%s] %d %s %d = %d",
        tag, operands.a, operation.symbol, operands.b, result.value,
        extra={"operation": operation.value},
    )
    return result
