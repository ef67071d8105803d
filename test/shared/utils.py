from typing import Any, Dict, Optional

from fastapi.testclient import TestClient

from src.platform.constant.route_constant import SCHEDULE_CREATE, USER_CREATE, USER_LOGIN
from test.test_constants import DEFAULT_SCHEDULE_REQUEST


def assert_response_status(response, expected_status: int, message: str | None = None):
    response_text = getattr(response, 'text', getattr(response, 'content', 'N/A'))
    assert response.status_code == expected_status, (
        message or f'Expected {expected_status}, got {response.status_code}: {response_text}'
    )


def create_user(
    client: TestClient,
    email: str,
    password: str,
    full_name: str,
    phone: Optional[str] = None,
) -> Dict[str, Any]:
    user_data = {'email': email, 'password': password, 'fullName': full_name}
    if phone is not None:
        user_data['phone'] = phone
    response = client.post(USER_CREATE, json=user_data)
    assert_response_status(response, 201, 'Failed to create user')
    return response.json()


def login_user(client: TestClient, email: str, password: str) -> Any:
    """Login and keep the auth cookie on the client."""
    login_response = client.post(USER_LOGIN, json={'email': email, 'password': password})
    assert_response_status(login_response, 200, f'Login failed: {login_response.text}')
    return login_response


def create_schedule(client: TestClient, **overrides: Any) -> Dict[str, Any]:
    payload = {**DEFAULT_SCHEDULE_REQUEST, **overrides}
    response = client.post(SCHEDULE_CREATE, json=payload)
    assert_response_status(response, 201, f'Failed to create schedule: {response.text}')
    return response.json()
