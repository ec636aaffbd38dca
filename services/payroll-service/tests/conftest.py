"""
Test configuration and fixtures
"""

import logging
from pathlib import Path

import pytest
import structlog

from payroll.config import get_settings
from payroll.dependencies import reset_dependencies
from payroll.services.tax_calculator import FlatRateTaxCalculator, TaxCalculator
from payroll.validators import EmployeeValidator


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate every test from host settings, shared instances and logging setup."""
    for name in ("SERVICE_NAME", "LOG_LEVEL", "LOG_JSON", "TAX_RATE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(Path(__file__).parent)
    get_settings.cache_clear()
    reset_dependencies()
    yield
    get_settings.cache_clear()
    reset_dependencies()
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()
    logging.getLogger().setLevel(logging.WARNING)


@pytest.fixture
def validator():
    """Standard salary validator."""
    return EmployeeValidator()


@pytest.fixture
def tax_calculator():
    """Standard 20% tax calculator."""
    return TaxCalculator()


@pytest.fixture
def high_rate_calculator():
    """Alternative 30% tax strategy."""
    return FlatRateTaxCalculator(0.3)
