"""
Payroll service package.

Illustrates the Single Responsibility Principle: an Employee that delegates
salary validation and tax computation to injected collaborators.
"""

from .domain.entities import Employee
from .domain.exceptions import InvalidSalaryException, PayrollServiceException
from .services.tax_calculator import FlatRateTaxCalculator, TaxCalculator
from .validators import EmployeeValidator

__all__ = [
    "Employee",
    "EmployeeValidator",
    "FlatRateTaxCalculator",
    "InvalidSalaryException",
    "PayrollServiceException",
    "TaxCalculator",
]
