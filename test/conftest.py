"""
Test Configuration and Fixtures

- Environment is set up before any application module is imported, so
  settings pick up the in-memory SQLite URL and the test log directory
- Unit tests (test/**/unit/) construct use cases with mocks and never start the app
- API tests get a fresh app (and a fresh database) per test via the client fixture
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    os.environ['DATABASE_URL'] = 'sqlite+aiosqlite:///:memory:'
    os.environ['DEPLOY_ENV'] = 'test'
    os.environ.setdefault('SECRET_KEY', 'test_secret_key')

    # Create test log directory
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from test.shared.utils import create_user, login_user  # noqa: E402
from test.test_constants import DEFAULT_PASSWORD, TEST_EMAIL, TEST_FULL_NAME  # noqa: E402


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def passenger_user(client: TestClient) -> dict[str, Any]:
    return create_user(client, TEST_EMAIL, DEFAULT_PASSWORD, TEST_FULL_NAME)


@pytest.fixture
def logged_in_client(client: TestClient, passenger_user: dict[str, Any]) -> TestClient:
    login_user(client, TEST_EMAIL, DEFAULT_PASSWORD)
    return client
