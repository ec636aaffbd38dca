"""
Salary validation for employees.

This module provides the validator collaborator used by Employee, plus a
Pydantic model for turning raw salary input into a Decimal.
"""

import math
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from .domain.exceptions import ValidationException
from .domain.types import Salary


class ISalaryValidator(ABC):
    """
    Abstract validator interface for employee salaries.

    Employee depends on this contract only, so validation rules can change
    without touching the entity.
    """

    @abstractmethod
    def is_valid_salary(self, salary: Salary) -> bool:
        """
        Check whether a salary is acceptable.

        Args:
            salary: Proposed gross salary

        Returns:
            True if the salary may be stored, False otherwise
        """
        pass


class EmployeeValidator(ISalaryValidator):
    """Rejects negative and NaN salaries. Stateless, safe to share."""

    def is_valid_salary(self, salary: Salary) -> bool:
        if isinstance(salary, Decimal):
            if salary.is_nan():
                return False
        elif isinstance(salary, float) and math.isnan(salary):
            return False
        return not salary < 0


class SalaryInput(BaseModel):
    """
    Request model for raw salary input.

    Accepts numbers or numeric strings and normalizes them to Decimal.
    The sign is not checked here; that is EmployeeValidator's concern.

    Attributes:
        salary: Gross salary as a finite Decimal
    """

    salary: Decimal = Field(..., description="Gross salary")

    @field_validator("salary", mode="before")
    @classmethod
    def normalize_salary(cls, v: Any) -> Any:
        """
        Strip whitespace from string input and reject booleans.

        Args:
            v: Raw salary value

        Returns:
            Value ready for Decimal coercion

        Raises:
            ValueError: If value is a boolean or an empty string
        """
        if isinstance(v, bool):
            raise ValueError("Salary must be a number, not a boolean")
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("Salary cannot be empty or only whitespace")
        return v

    @field_validator("salary")
    @classmethod
    def validate_finite(cls, v: Decimal) -> Decimal:
        if not v.is_finite():
            raise ValueError("Salary must be a finite number")
        return v


def parse_salary(raw: Any) -> Decimal:
    """
    Parse raw salary input into a Decimal.

    Args:
        raw: Salary as int, float, Decimal or numeric string

    Returns:
        Parsed salary

    Raises:
        ValidationException: If the input is not a finite number
    """
    if isinstance(raw, Decimal) and raw.is_finite():
        return raw
    try:
        return SalaryInput(salary=raw).salary
    except ValidationError as e:
        reason = e.errors()[0].get("msg", "Invalid salary input")
        raise ValidationException("salary", raw, reason) from e
