"""
Domain entities for payroll.

Employee holds a validated gross salary and nothing else. Validation and
tax rules live in collaborators passed in at construction.
"""

from typing import TYPE_CHECKING, Any

from .exceptions import InvalidSalaryException
from .types import Salary

if TYPE_CHECKING:
    from ..services.tax_calculator import ITaxCalculator
    from ..validators import ISalaryValidator


class Employee:
    """
    Employee with an immutable, validated gross salary.

    The validator and tax calculator are shared references; the same
    instances may back any number of employees.

    Raises:
        InvalidSalaryException: If the validator rejects the salary
    """

    __slots__ = ("_salary", "_tax_calculator", "_validator")

    def __init__(
        self,
        salary: Salary,
        tax_calculator: "ITaxCalculator",
        validator: "ISalaryValidator",
    ):
        if not validator.is_valid_salary(salary):
            raise InvalidSalaryException(salary)
        object.__setattr__(self, "_salary", salary)
        object.__setattr__(self, "_tax_calculator", tax_calculator)
        object.__setattr__(self, "_validator", validator)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def salary(self) -> Salary:
        """Gross salary."""
        return self._salary

    @property
    def net_salary(self) -> Salary:
        """Gross salary minus taxes, recomputed on every access."""
        return self._salary - self._tax_calculator.get_taxes(self._salary)

    @property
    def tax_calculator(self) -> "ITaxCalculator":
        """Shared tax strategy used for net salary."""
        return self._tax_calculator

    @property
    def validator(self) -> "ISalaryValidator":
        """Shared validator that admitted the salary."""
        return self._validator

    def __repr__(self) -> str:
        return f"Employee(salary={self._salary!r})"
