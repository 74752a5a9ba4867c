"""
Test Configuration and Fixtures

Environment setup MUST happen before any application import: the logging
config reads TEST_LOG_DIR and settings at import time.
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('DEPLOY_ENV', 'test')


_early_setup_test_environment()

import pytest  # noqa: E402


@pytest.fixture
def buyer_email() -> str:
    return 'a@example.com'


@pytest.fixture
def another_buyer_email() -> str:
    return 'b@example.com'
