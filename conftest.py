"""
Root conftest.py for the payroll project.

Lets pytest import service packages without an editable install by
adding each service directory under services/ to sys.path.
"""

import sys
from pathlib import Path


def pytest_configure(config):
    """
    Configure pytest to add service directories to sys.path.

    Each service keeps its import package directly inside its directory,
    e.g. services/payroll-service/payroll.
    """
    root_dir = Path(__file__).parent

    for service_path in sorted((root_dir / "services").iterdir()):
        if service_path.is_dir() and str(service_path) not in sys.path:
            sys.path.insert(0, str(service_path))
