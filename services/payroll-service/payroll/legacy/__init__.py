"""
Legacy payroll code kept for comparison with the decoupled domain layer.
"""

from .coupled_employee import CoupledEmployee

__all__ = ["CoupledEmployee"]
