"""
Error types for the SIP calculator and their JSON representation.

Input errors map to 400 responses, calculation failures to 500. The
FastAPI exception handlers in app.main turn these into the error body
``{"error": ..., "kind": ..., "message": ...}``.
"""

import enum


class InvalidInputKind(str, enum.Enum):
    """Classification of rejected calculator inputs."""

    TypeError = "TypeError"
    RangeError = "RangeError"


INTERNAL_ERROR = "InternalError"


class SipInputError(ValueError):
    """Raised when calculator inputs are missing, non-numeric or out of range."""

    status_code = 400

    def __init__(
        self,
        kind: InvalidInputKind,
        message: str,
        error: str = "Invalid input",
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.error = error

    def to_dict(self) -> dict:
        return {"error": self.error, "kind": self.kind.value, "message": self.message}


class SipCalculationError(ArithmeticError):
    """Raised when a validated input still produces no finite result."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {
            "error": "Calculation error",
            "kind": INTERNAL_ERROR,
            "message": self.message,
        }
