import os
import sys

import pytest

# Ensure project root is on sys.path before imports
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import logging_config  # noqa: E402


# Define pytest markers for test categories
def pytest_configure(config):
    """
    Register custom markers to avoid pytest warnings.
    """
    config.addinivalue_line("markers", "unit: mark a test as a unit test")
    config.addinivalue_line("markers", "integration: mark a test as an integration test")
    config.addinivalue_line("markers", "config: mark a test as a config test")
    config.addinivalue_line("markers", "cli: mark a test as a command-line test")


@pytest.fixture
def clean_logging():
    """Let a test call setup_logging and undo it afterwards."""
    logging_config.reset_logging()
    yield
    logging_config.reset_logging()


@pytest.fixture
def sample_clients():
    return [
        {"id": 1, "fullName": "Rahul Sharma", "tier": "platinum"},
        {"id": 2, "fullName": "Priya Patel", "tier": "Gold"},
        {"id": 3, "fullName": "Amit Kumar", "tier": "silver"},
        {"id": 4, "fullName": "Neha Singh", "tier": None},
    ]
