"""
Unit tests for domain entities.

Tests for Employee construction, immutability and collaborator delegation.
"""

from decimal import Decimal
from unittest.mock import Mock

import pytest

from payroll import validators
from payroll.domain import entities, types
from payroll.domain.entities import Employee
from payroll.domain.exceptions import InvalidSalaryException
from payroll.legacy import coupled_employee
from payroll.services import payroll_service
from payroll.services import tax_calculator as tax_calculator_module
from payroll.services.tax_calculator import ITaxCalculator
from payroll.validators import ISalaryValidator


class TestEmployeeConstruction:
    """Tests for the validation gate."""

    def test_valid_salary(self, tax_calculator, validator):
        """Test employee with salary 1000."""
        employee = Employee(1000, tax_calculator, validator)
        assert employee.salary == 1000
        assert employee.net_salary == 800

    def test_zero_salary(self, tax_calculator, validator):
        """Zero is a valid salary with zero net."""
        employee = Employee(0, tax_calculator, validator)
        assert employee.salary == 0
        assert employee.net_salary == 0

    def test_negative_salary_raises(self, tax_calculator, validator):
        """Negative salary fails with 'Invalid salary.'."""
        with pytest.raises(InvalidSalaryException, match=r"^Invalid salary\.$") as exc_info:
            Employee(-5, tax_calculator, validator)
        assert exc_info.value.salary == -5

    def test_invalid_salary_is_value_error(self, tax_calculator, validator):
        """Callers may catch the builtin ValueError."""
        with pytest.raises(ValueError):
            Employee(-1, tax_calculator, validator)

    @pytest.mark.parametrize("salary", [Decimal("NaN"), float("nan")])
    def test_nan_salary_raises(self, tax_calculator, validator, salary):
        """NaN salaries fail the validation gate."""
        with pytest.raises(InvalidSalaryException):
            Employee(salary, tax_calculator, validator)

    def test_validator_is_consulted(self, tax_calculator):
        """Construction asks the validator exactly once."""
        validator = Mock(spec=ISalaryValidator)
        validator.is_valid_salary.return_value = True

        Employee(1000, tax_calculator, validator)

        validator.is_valid_salary.assert_called_once_with(1000)

    def test_validator_decision_is_final(self, tax_calculator):
        """A rejecting validator blocks even a positive salary."""
        validator = Mock(spec=ISalaryValidator)
        validator.is_valid_salary.return_value = False

        with pytest.raises(InvalidSalaryException):
            Employee(1000, tax_calculator, validator)


class TestEmployeeNetSalary:
    """Tests for tax delegation."""

    def test_decimal_salary(self, tax_calculator, validator):
        employee = Employee(Decimal("1000.00"), tax_calculator, validator)
        assert employee.net_salary == Decimal("800.00")

    def test_alternative_tax_strategy(self, high_rate_calculator, validator):
        """Swapping the calculator changes net salary only."""
        employee = Employee(1000, high_rate_calculator, validator)
        assert employee.salary == 1000
        assert employee.net_salary == pytest.approx(700)

    def test_net_salary_is_not_cached(self, validator):
        """Each access asks the tax calculator again."""
        calculator = Mock(spec=ITaxCalculator)
        calculator.get_taxes.side_effect = [100, 250]
        employee = Employee(1000, calculator, validator)

        assert employee.net_salary == 900
        assert employee.net_salary == 750
        assert calculator.get_taxes.call_count == 2

    def test_collaborators_are_shared(self, tax_calculator, validator):
        """The same collaborators back several employees."""
        first = Employee(1000, tax_calculator, validator)
        second = Employee(2000, tax_calculator, validator)

        assert first.tax_calculator is second.tax_calculator is tax_calculator
        assert first.validator is second.validator is validator
        assert second.net_salary == 1600


class TestEmployeeImmutability:
    """Employee exposes no way to change salary."""

    def test_salary_cannot_be_assigned(self, tax_calculator, validator):
        employee = Employee(1000, tax_calculator, validator)
        with pytest.raises(AttributeError):
            employee.salary = 2000
        assert employee.salary == 1000

    def test_private_state_cannot_be_assigned(self, tax_calculator, validator):
        employee = Employee(1000, tax_calculator, validator)
        with pytest.raises(AttributeError):
            employee._salary = -5
        assert employee.salary == 1000

    def test_new_attributes_rejected(self, tax_calculator, validator):
        employee = Employee(1000, tax_calculator, validator)
        with pytest.raises(AttributeError):
            employee.bonus = 10

    def test_attributes_cannot_be_deleted(self, tax_calculator, validator):
        employee = Employee(1000, tax_calculator, validator)
        with pytest.raises(AttributeError):
            del employee._salary

    def test_collaborator_properties_are_documented(self):
        assert Employee.tax_calculator.__doc__
        assert Employee.validator.__doc__

    def test_repr(self, tax_calculator, validator):
        assert repr(Employee(1000, tax_calculator, validator)) == "Employee(salary=1000)"


class TestSalaryType:
    """One Salary alias serves the whole package."""

    def test_modules_share_the_alias(self):
        for module in (
            entities,
            coupled_employee,
            payroll_service,
            tax_calculator_module,
            validators,
        ):
            assert module.Salary is types.Salary
