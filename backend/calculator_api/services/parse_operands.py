"""Operand Parsing: turns a raw request (Content-Type + body) into an OperandPair.

Invariants:
    - Checks run in order and stop at the first failure:
      Content-Type, then JSON syntax, then shape, then field-level errors
    - Field-level errors (wrong type, unknown field) are reported in document
      order: the first offending key in the body wins
    - Absent or empty Content-Type is treated as JSON
    - Content-Type match is a case-sensitive prefix match on "application/json"
    - Every failure raises a MalformedInputError subclass (400) or UnsupportedMediaTypeError (415)

Design Decisions:
    - Decoding delegated to OperandsRequest.model_validate_json; Pydantic error
      types are mapped onto the four client-facing messages here
    - Pydantic's own error order varies across releases, so the body's key order
      is read back with pydantic_core.from_json to rank field-level errors
    - A body that ends before the JSON value does is reported with the generic
      request-format message, not as a syntax error (same as an empty body)
"""

from pydantic import ValidationError
from pydantic_core import from_json

from calculator_api.core.domain_types import OperandPair
from calculator_api.core.errors import (
    InvalidFieldTypeError,
    MalformedInputError,
    MalformedJSONError,
    UnknownFieldError,
    UnsupportedMediaTypeError,
)
from calculator_api.schemas.calculation import OperandsRequest

JSON_MEDIA_TYPE = "application/json"

_FIELD_TYPE_ERRORS = frozenset({
    "int_type",
    "int_parsing",
    "int_from_float",
    "greater_than_equal",
    "less_than_equal",
})


def parse_operands(content_type: str | None, body: bytes | str) -> OperandPair:
    """Validate a request and return its operands.

    Raises:
        UnsupportedMediaTypeError: Content-Type present but not JSON.
        MalformedInputError: body is not a JSON object of integer 'a'/'b'.
    """
    check_content_type(content_type)

    if not body or not body.strip():
        raise MalformedInputError()

    try:
        request = OperandsRequest.model_validate_json(body)
    except ValidationError as exc:
        raise classify_validation_error(exc, body) from exc

    return OperandPair(a=request.a, b=request.b)


def check_content_type(content_type: str | None) -> None:
    if content_type and not content_type.startswith(JSON_MEDIA_TYPE):
        raise UnsupportedMediaTypeError(content_type)


def classify_validation_error(
    exc: ValidationError, body: bytes | str,
) -> MalformedInputError:
    """Map a Pydantic failure onto a client-facing MalformedInputError."""
    errors = exc.errors(include_url=False)

    for err in errors:
        if err["type"] == "json_invalid":
            if "EOF while parsing" in err["msg"]:
                return MalformedInputError()
            return MalformedJSONError()

    field_errors = [
        err for err in errors
        if err["loc"] and (
            err["type"] in _FIELD_TYPE_ERRORS or err["type"] == "extra_forbidden"
        )
    ]
    # model_type (top-level array, number, string, null) and anything unforeseen
    if not field_errors:
        return MalformedInputError()

    first = min(field_errors, key=_document_position(body))
    field = str(first["loc"][0])
    if first["type"] == "extra_forbidden":
        return UnknownFieldError(field)
    return InvalidFieldTypeError(field)


def _document_position(body: bytes | str):
    """Sort key ranking an error by where its key first appears in the body."""
    positions = {key: index for index, key in enumerate(from_json(body))}

    def position(err) -> int:
        return positions.get(str(err["loc"][0]), len(positions))

    return position
