"""
Test Configuration and Fixtures

This module provides:
- Environment setup (SQLite database file, log backend for email) before app imports
- The TestClient fixture running the test lifespan
- Helpers to register, promote and log in customers through the API

Architecture:
- Unit tests (test/**/unit/): Mock every port, never touch the client or database
- Integration tests: Real SQLite database recreated for each test
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read once at import time by src.platform.config.core_setting
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    test_db_dir = Path(tempfile.mkdtemp(prefix='movie_ticket_test_'))
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{test_db_dir / "test.db"}'

    # Create test log directory
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ['SECRET_KEY'] = 'test_secret_key'
    os.environ['EMAIL_BACKEND'] = 'log'
    os.environ['NOTIFICATION_BACKOFF_SECONDS'] = '0.01'
    os.environ['AUTH_COOKIE_SECURE'] = 'false'


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.di import container  # noqa: E402
from test.util_constant import (  # noqa: E402
    ADMIN_EMAIL,
    ADMIN_FIRST_NAME,
    CUSTOMER_EMAIL,
    CUSTOMER_FIRST_NAME,
    DEFAULT_PASSWORD,
)
from test.utils import create_admin, create_customer, login  # noqa: E402


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Fresh app lifespan (and fresh tables) for every integration test"""
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    container.reset_singletons()


@pytest.fixture
def admin_user(client: TestClient) -> dict[str, Any]:
    return create_admin(client, ADMIN_EMAIL, DEFAULT_PASSWORD, ADMIN_FIRST_NAME)


@pytest.fixture
def customer_user(client: TestClient) -> dict[str, Any]:
    return create_customer(client, CUSTOMER_EMAIL, DEFAULT_PASSWORD, CUSTOMER_FIRST_NAME)


@pytest.fixture
def admin_client(client: TestClient, admin_user: dict[str, Any]) -> TestClient:
    login(client, ADMIN_EMAIL, DEFAULT_PASSWORD)
    return client


@pytest.fixture
def customer_client(client: TestClient, customer_user: dict[str, Any]) -> TestClient:
    login(client, CUSTOMER_EMAIL, DEFAULT_PASSWORD)
    return client
