"""
Employee with validation and tax rules built in.

Deprecated - kept to show what payroll.domain.entities.Employee replaces.
Changing the tax policy or the validation rule both mean editing this
class, which is the coupling the decoupled Employee removes.
"""

from ..domain.exceptions import InvalidSalaryException
from ..domain.types import Salary

LEGACY_TAX_RATE = 0.2


class CoupledEmployee:
    """Employee that validates and taxes its own salary."""

    def __init__(self, salary: Salary):
        self._salary = None
        self.salary = salary

    @property
    def salary(self) -> Salary:
        return self._salary

    @salary.setter
    def salary(self, value: Salary) -> None:
        # Re-validated on every assignment; the old value survives a rejection.
        if not self._is_valid_salary(value):
            raise InvalidSalaryException(value)
        self._salary = value

    @property
    def net_salary(self) -> Salary:
        return self._salary - self._get_taxes()

    def _is_valid_salary(self, value: Salary) -> bool:
        return value >= 0

    def _get_taxes(self) -> Salary:
        return self._salary * LEGACY_TAX_RATE
