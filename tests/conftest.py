"""
Shared pytest setup: makes the checkout importable as ``banghay`` without an
install and registers the ``regression`` marker used by the golden paradigm tables.
"""

import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


def pytest_configure(config):
    config.addinivalue_line("markers", "regression: golden paradigm tables that guard against unintended changes")
