"""
errors.py — Exception types raised by otpx.

Every error carries a stable ``code`` string and a ``details`` dict so callers
(CLI, web layers, logs) can react to the kind of failure without parsing the
message. Validation errors also subclass ``ValueError``.
"""

from typing import Any, Dict, Optional

INVALID_SECRET = "INVALID_SECRET"
INVALID_DIGITS = "INVALID_DIGITS"
INVALID_PERIOD = "INVALID_PERIOD"
INVALID_WINDOW = "INVALID_WINDOW"
INVALID_COUNTER = "INVALID_COUNTER"
INVALID_TOKEN = "INVALID_TOKEN"
INVALID_LENGTH = "INVALID_LENGTH"
INVALID_CHARSET = "INVALID_CHARSET"
ALGORITHM_NOT_SUPPORTED = "ALGORITHM_NOT_SUPPORTED"


class OTPXError(Exception):
    """Base class for all otpx errors."""

    code = "OTPX_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.code, "message": self.message, "details": self.details}


class ValidationError(OTPXError, ValueError):
    """A parameter failed its precondition; raised before any hashing."""

    code = "VALIDATION_ERROR"

    def __init__(self, parameter: str, value: Any, constraint: str) -> None:
        super().__init__(
            f"invalid {parameter}={value!r}: {constraint}",
            {"parameter": parameter, "value": value, "constraint": constraint},
        )
        self.parameter = parameter
        self.value = value
        self.constraint = constraint


class InvalidDigits(ValidationError):
    code = INVALID_DIGITS


class InvalidPeriod(ValidationError):
    code = INVALID_PERIOD


class InvalidCounter(ValidationError):
    code = INVALID_COUNTER


class UnsupportedAlgorithm(ValidationError):
    code = ALGORITHM_NOT_SUPPORTED


class InvalidSecret(ValidationError):
    code = INVALID_SECRET

    def __init__(self, parameter: str, value: Any, constraint: str) -> None:
        # never echo key material back in messages or logs
        super().__init__(parameter, type(value).__name__, constraint)


class InvalidWindow(ValidationError):
    code = INVALID_WINDOW


class InvalidToken(ValidationError):
    code = INVALID_TOKEN


class InvalidLength(ValidationError):
    code = INVALID_LENGTH


class InvalidCharset(ValidationError):
    code = INVALID_CHARSET
