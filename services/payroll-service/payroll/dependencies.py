"""
Shared dependencies for the application.

Provides the process-wide collaborator instances. Validators and tax
calculators are stateless, so one instance serves every employee.
"""

from typing import Optional

from .config import get_settings
from .logging_config import setup_logging
from .services.payroll_service import PayrollService
from .services.tax_calculator import ITaxCalculator, build_tax_calculator
from .validators import EmployeeValidator, ISalaryValidator

_employee_validator: Optional[ISalaryValidator] = None
_tax_calculator: Optional[ITaxCalculator] = None
_payroll_service: Optional[PayrollService] = None


def configure() -> None:
    """
    Apply logging settings at startup.

    Reads LOG_LEVEL, LOG_JSON and SERVICE_NAME from the current settings.
    """
    settings = get_settings()
    setup_logging(
        log_level=settings.LOG_LEVEL,
        service_name=settings.SERVICE_NAME,
        use_json=settings.LOG_JSON,
    )


def get_employee_validator() -> ISalaryValidator:
    """Get the shared salary validator."""
    global _employee_validator
    if _employee_validator is None:
        _employee_validator = EmployeeValidator()
    return _employee_validator


def get_tax_calculator() -> ITaxCalculator:
    """
    Get the shared tax calculator.

    Built from the TAX_RATE setting on first use.
    """
    global _tax_calculator
    if _tax_calculator is None:
        _tax_calculator = build_tax_calculator(get_settings().TAX_RATE)
    return _tax_calculator


def set_payroll_service(service: PayrollService) -> None:
    """
    Set the global payroll service instance.

    Lets callers and tests substitute their own collaborators.
    """
    global _payroll_service
    _payroll_service = service


def get_payroll_service() -> PayrollService:
    """Get the payroll service, wiring the shared collaborators on first use."""
    global _payroll_service
    if _payroll_service is None:
        configure()
        _payroll_service = PayrollService(
            tax_calculator=get_tax_calculator(),
            validator=get_employee_validator(),
        )
    return _payroll_service


def reset_dependencies() -> None:
    """Drop all shared instances so the next access rebuilds them."""
    global _employee_validator, _tax_calculator, _payroll_service
    _employee_validator = None
    _tax_calculator = None
    _payroll_service = None
