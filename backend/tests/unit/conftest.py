"""Unit test configuration.

Isolates unit tests from integration test setup.
Unit tests should not depend on app.py or external services.
"""

import pytest

from infrastructure.user.in_memory_user_repository import InMemoryUserRepository


@pytest.fixture
def repository():
    """Create fresh in-memory repository for each test."""
    return InMemoryUserRepository()
