"""Custom exceptions and helpers for consistent operation outcomes."""

from typing import Optional


class AppError(Exception):
    """Base class for application errors."""

    status = "invalid"

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(AppError):
    """Raised when a referenced entity does not resolve."""

    status = "not_found"

    def __init__(self, message: str = "Entity not found"):
        super().__init__(message, status_code=404)


class CustomerNotFoundError(NotFoundError):
    """Raised when a customer id does not resolve in the searched scope."""

    def __init__(self, customer_id: int):
        super().__init__(f"Customer {customer_id} not found")
        self.customer_id = customer_id


class RepresentativeNotFoundError(NotFoundError):
    """Raised when a sales representative id is unknown."""

    def __init__(self, rep_id: int):
        super().__init__(f"Sales representative {rep_id} not found")
        self.rep_id = rep_id


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str = "Invalid input"):
        super().__init__(message, status_code=422)


class UnsupportedOperationError(AppError):
    """Raised when a customer variant lacks the requested capability."""

    status = "unsupported"

    def __init__(self, message: str = "Operation not supported"):
        super().__init__(message, status_code=409)


def to_result(error: AppError, message: Optional[str] = None):
    """Convert an AppError into a reportable OperationResult."""
    # models imports this module, so the result type is resolved lazily.
    from models.response import OperationResult

    return OperationResult(
        status=error.status,
        message=message or str(error),
        data={"error": str(error), "status_code": error.status_code},
    )
