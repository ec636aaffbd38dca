"""
Shared type aliases for the payroll domain.
"""

from decimal import Decimal
from typing import Union

Salary = Union[int, float, Decimal]
