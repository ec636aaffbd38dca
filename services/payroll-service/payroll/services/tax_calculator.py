"""
Tax calculator interface and flat-rate implementations.

Employee only depends on ITaxCalculator, so other tax strategies (for
example per-jurisdiction rates) can be swapped in without changing it.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional

from ..domain.exceptions import ValidationException
from ..domain.types import Salary

DEFAULT_TAX_RATE = 0.2


class ITaxCalculator(ABC):
    """
    Abstract tax strategy.

    Implementations must be pure: the same salary always yields the
    same tax, and no state is kept between calls.
    """

    @abstractmethod
    def get_taxes(self, salary: Salary) -> Salary:
        """
        Compute the tax owed on a gross salary.

        Args:
            salary: Gross salary

        Returns:
            Tax amount, in the same numeric family as the salary
        """
        pass


class FlatRateTaxCalculator(ITaxCalculator):
    """
    Taxes every salary at a single fixed rate.

    Decimal salaries are taxed with a Decimal rate so money values never
    pass through float arithmetic.
    """

    def __init__(self, rate: float):
        """
        Initialize calculator.

        Args:
            rate: Tax rate between 0 and 1 inclusive

        Raises:
            ValidationException: If rate is outside [0, 1]
        """
        if isinstance(rate, bool) or not 0 <= rate <= 1:
            raise ValidationException("rate", rate, "Tax rate must be between 0 and 1")
        self._rate = rate
        self._decimal_rate = Decimal(str(rate))

    @property
    def rate(self) -> float:
        return self._rate

    def get_taxes(self, salary: Salary) -> Salary:
        if isinstance(salary, Decimal):
            return salary * self._decimal_rate
        return salary * self._rate

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rate={self._rate!r})"


class TaxCalculator(FlatRateTaxCalculator):
    """Standard flat-rate policy: 20% of gross salary."""

    def __init__(self):
        super().__init__(DEFAULT_TAX_RATE)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def build_tax_calculator(rate: Optional[float] = None) -> ITaxCalculator:
    """
    Create the tax calculator for a configured rate.

    Args:
        rate: Custom flat rate, or None for the standard calculator

    Returns:
        TaxCalculator when no rate is given, FlatRateTaxCalculator otherwise
    """
    if rate is None:
        return TaxCalculator()
    return FlatRateTaxCalculator(rate)
