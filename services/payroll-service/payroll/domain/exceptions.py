"""
Custom exceptions for the payroll domain.

These exceptions represent domain-level errors and are independent
of how the caller chooses to report them.
"""

from typing import Any, Optional

INVALID_SALARY_MESSAGE = "Invalid salary."


class PayrollServiceException(Exception):
    """Base exception for all payroll service errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(PayrollServiceException):
    """Raised when input validation fails."""

    def __init__(self, field: str, value: Any, reason: str):
        message = f"Validation failed for {field}: {reason}"
        super().__init__(
            message=message,
            details={"field": field, "value": str(value), "reason": reason},
        )


class InvalidSalaryException(ValidationException, ValueError):
    """Raised when an employee is given a salary the validator rejects."""

    def __init__(self, salary: Any):
        self.salary = salary
        super().__init__("salary", salary, INVALID_SALARY_MESSAGE)
        self.message = INVALID_SALARY_MESSAGE
        self.args = (INVALID_SALARY_MESSAGE,)

    def __str__(self) -> str:
        return self.message
