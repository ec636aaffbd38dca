"""
Service layer - tax strategies and payroll orchestration.
"""

from .payroll_service import PayrollService, PayrollSummary
from .tax_calculator import (
    DEFAULT_TAX_RATE,
    FlatRateTaxCalculator,
    ITaxCalculator,
    TaxCalculator,
    build_tax_calculator,
)

__all__ = [
    "DEFAULT_TAX_RATE",
    "FlatRateTaxCalculator",
    "ITaxCalculator",
    "PayrollService",
    "PayrollSummary",
    "TaxCalculator",
    "build_tax_calculator",
]
