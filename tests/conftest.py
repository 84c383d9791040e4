"""Test configuration for pytest."""

import logging
import os

import pytest


@pytest.fixture(autouse=True)
def configure_test_logging():
    """Configure logging for tests to be minimal."""
    os.environ['FIELDGUARD_LOG_LEVEL'] = 'WARNING'
    logging.getLogger().setLevel(logging.WARNING)
