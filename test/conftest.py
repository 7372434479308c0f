"""
Test Configuration and Fixtures

- Log output goes to test/test_log instead of the project log directory
- Seating fixtures live in test/service/seating/conftest.py
"""

# =============================================================================
# Environment setup MUST happen before importing application modules, the
# logging config reads TEST_LOG_DIR at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('DEPLOY_ENV', 'test')


_early_setup_test_environment()

import pytest  # noqa: E402

from src.service.seating.domain.user_entity import User  # noqa: E402


@pytest.fixture
def buyer_user() -> User:
    return User(id='user-1', username='Test Buyer', email='buyer@test.com')


@pytest.fixture
def another_buyer_user() -> User:
    return User(id='user-2', username='Another Buyer', email='buyer2@test.com')
