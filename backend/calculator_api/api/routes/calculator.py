"""Calculator Routes: POST /add, /subtract, /multiply, /divide.

Invariants:
    - Body is read raw; decoding and validation happen in the service, not via FastAPI params
    - Success → 200 {"result": int}; failures raise CalculatorError for the global handler
"""

from fastapi import APIRouter, Request, status

from calculator_api.core.domain_types import Operation
from calculator_api.schemas.calculation import ErrorResponse, OperationResponse
from calculator_api.services.calculate import calculate

router = APIRouter(tags=["calculator"])

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_415_UNSUPPORTED_MEDIA_TYPE: {"model": ErrorResponse},
}


async def _run(operation: Operation, request: Request) -> dict:
    body = await request.body()
    result = calculate(operation, request.headers.get("content-type"), body)
    return result.to_response()


@router.post(
    "/add", response_model=OperationResponse, responses=_ERROR_RESPONSES,
)
async def add(request: Request):
    """Return a + b."""
    return await _run(Operation.ADD, request)


@router.post(
    "/subtract", response_model=OperationResponse, responses=_ERROR_RESPONSES,
)
async def subtract(request: Request):
    """Return a - b."""
    return await _run(Operation.SUBTRACT, request)


@router.post(
    "/multiply", response_model=OperationResponse, responses=_ERROR_RESPONSES,
)
async def multiply(request: Request):
    """Return a * b."""
    return await _run(Operation.MULTIPLY, request)


@router.post(
    "/divide", response_model=OperationResponse, responses=_ERROR_RESPONSES,
)
async def divide(request: Request):
    """Return a / b, truncated toward zero. b == 0 is rejected with 400."""
    return await _run(Operation.DIVIDE, request)
