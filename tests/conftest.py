"""
Pytest configuration for tests at the root level.

This module contains pytest fixtures and configuration for testing components.
"""

import pytest

from pitboss.blackjack.decision_logger import decision_logger


# Reset the decision logger before each test
@pytest.fixture(scope="function", autouse=True)
def reset_decision_logger():
    """Clear the global decision logger before and after each test."""
    decision_logger.clear()
    decision_logger.keep_history = True
    yield
    decision_logger.clear()
