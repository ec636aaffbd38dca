"""
Business logic service layer.

Builds employees from gross salaries using shared collaborators and
aggregates payroll totals.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List

from ..domain.entities import Employee
from ..domain.exceptions import InvalidSalaryException, ValidationException
from ..domain.types import Salary
from ..logging_config import get_logger
from ..validators import ISalaryValidator
from .tax_calculator import ITaxCalculator

logger = get_logger(__name__)


@dataclass(frozen=True)
class PayrollSummary:
    """Totals over a group of employees."""

    headcount: int
    gross_total: Salary
    tax_total: Salary
    net_total: Salary


class PayrollService:
    """
    Payroll orchestration over injected collaborators.

    The service owns one validator and one tax calculator and hands the
    same instances to every employee it creates.
    """

    def __init__(self, tax_calculator: ITaxCalculator, validator: ISalaryValidator):
        """
        Initialize payroll service.

        Args:
            tax_calculator: Tax strategy shared by all employees
            validator: Salary validator shared by all employees
        """
        self.tax_calculator = tax_calculator
        self.validator = validator

    def hire(self, salary: Salary) -> Employee:
        """
        Create an employee with the service's collaborators.

        Args:
            salary: Gross salary

        Returns:
            New Employee

        Raises:
            InvalidSalaryException: If the salary is rejected
        """
        try:
            employee = Employee(salary, self.tax_calculator, self.validator)
        except InvalidSalaryException as e:
            logger.warning("employee_rejected", salary=str(salary), reason=e.message)
            raise

        logger.debug("employee_hired", salary=str(salary))
        return employee

    def net_salaries(self, salaries: Iterable[Salary]) -> List[Salary]:
        """
        Compute net salary for each gross salary, in order.

        Raises:
            InvalidSalaryException: On the first rejected salary
        """
        return [self.hire(salary).net_salary for salary in salaries]

    def summarize(self, employees: Iterable[Employee]) -> PayrollSummary:
        """
        Aggregate gross, tax and net totals.

        Args:
            employees: Employees to include

        Returns:
            PayrollSummary; all totals are 0 for an empty group

        Raises:
            ValidationException: If Decimal salaries are mixed with int or
                float salaries in the same group
        """
        employees = list(employees)
        decimal_count = sum(isinstance(e.salary, Decimal) for e in employees)
        if 0 < decimal_count < len(employees):
            raise ValidationException(
                "salaries",
                [e.salary for e in employees],
                "Decimal salaries cannot be mixed with int or float salaries",
            )

        headcount = 0
        gross_total: Salary = Decimal(0) if decimal_count else 0
        net_total: Salary = Decimal(0) if decimal_count else 0

        for employee in employees:
            headcount += 1
            gross_total += employee.salary
            net_total += employee.net_salary

        summary = PayrollSummary(
            headcount=headcount,
            gross_total=gross_total,
            tax_total=gross_total - net_total,
            net_total=net_total,
        )
        logger.info(
            "payroll_summarized",
            headcount=headcount,
            gross_total=str(gross_total),
            net_total=str(net_total),
        )
        return summary
