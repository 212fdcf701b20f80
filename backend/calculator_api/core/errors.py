"""Error Hierarchy: typed, categorized exceptions for every calculator failure mode.

Invariants:
    - Every error has a message (str), code (str), category (ErrorCategory), http_status (int)
    - to_response() produces the REST envelope {"error": message}; status is never in the body
    - Every failure mode is enumerated here; nothing outside this module raises ad hoc HTTP errors

Design Decisions:
    - Single hierarchy with CalculatorError base: one global handler catches all (ADR: uniform error shape)
    - MalformedInputError subclasses keep the offending field name for logging and tests
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    MEDIA_TYPE = "media_type"
    VALIDATION = "validation"
    DOMAIN = "domain"


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 400,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"error": self.message}


# ─── Media Type Errors (415) ────────────────────────────────────

class UnsupportedMediaTypeError(CalculatorError):
    """Request declared a Content-Type other than application/json."""
    def __init__(self, content_type: str):
        super().__init__(
            "Content-Type must be application/json",
            "UNSUPPORTED_MEDIA_TYPE", ErrorCategory.MEDIA_TYPE, 415,
        )
        self.content_type = content_type


# ─── Malformed Input Errors (400) ───────────────────────────────

class MalformedInputError(CalculatorError):
    """Body could not be decoded into an operand pair."""
    def __init__(
        self,
        message: str = (
            "Invalid request format: expected JSON with 'a' and 'b' integer fields"
        ),
        code: str = "MALFORMED_INPUT",
    ):
        super().__init__(message, code, ErrorCategory.VALIDATION, 400)


class MalformedJSONError(MalformedInputError):
    """Body is not syntactically valid JSON."""
    def __init__(self):
        super().__init__(
            "Invalid JSON format: malformed JSON structure", "MALFORMED_JSON",
        )


class InvalidFieldTypeError(MalformedInputError):
    """A recognized field holds something other than a 64-bit integer."""
    def __init__(self, field: str):
        super().__init__(
            f"Invalid field type: field '{field}' must be an integer",
            "INVALID_FIELD_TYPE",
        )
        self.field = field


class UnknownFieldError(MalformedInputError):
    """Body carries a field other than 'a' or 'b'."""
    def __init__(self, field: str):
        super().__init__(
            "Invalid request format: only 'a' and 'b' fields are allowed",
            "UNKNOWN_FIELD",
        )
        self.field = field


# ─── Domain Errors (400) ────────────────────────────────────────

class DomainError(CalculatorError):
    """Operands are well-formed but the operation is undefined for them."""
    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        super().__init__(message, code, ErrorCategory.DOMAIN, 400)


class DivisionByZeroError(DomainError):
    """Divide called with b == 0."""
    def __init__(self):
        super().__init__("Can't divide by 0", "DIVISION_BY_ZERO")
