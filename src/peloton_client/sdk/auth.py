"""
Peloton authentication SDK functions.

Login, session check, and manual token handling.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from peloton_client.sdk.client import ApiResponse, PelotonClient
from peloton_client.sdk.errors import PelotonAuthError
from peloton_client.sdk.types import SESSION_COOKIE_NAME, Zone

logger = logging.getLogger(__name__)


@dataclass
class LoginResponse(ApiResponse):
    """Login response plus the session cookie and user id taken from it."""
    session_cookie: Optional[str] = None
    user_id: Optional[str] = None


def authenticate(
    client: PelotonClient,
    username: str,
    password: str,
    user_agent: Optional[str] = None,
    timeout: Optional[float] = None,
) -> LoginResponse:
    """
    Authenticate with Peloton.

    POST auth/login

    Args:
        client: PelotonClient instance
        username: Peloton username or email
        password: Peloton password
        user_agent: Replaces the client's User-Agent once logged in
        timeout: Seconds for this call (client default if None)

    Returns:
        LoginResponse; session_cookie is the value now sent as `cookie`

    Raises:
        ValueError: If credentials are missing
        PelotonAuthError: If the response lacks the session cookie or user_id
    """
    if not username or not password:
        raise ValueError("Missing credentials")

    response = client.make_request(
        "POST",
        Zone.AUTH,
        "/login",
        json_data={"username_or_email": username, "password": password},
        require_auth=False,
        timeout=timeout,
    )

    cookie_value = response.cookies.get(SESSION_COOKIE_NAME)
    if not cookie_value:
        raise PelotonAuthError(
            f"Login response (status={response.status}) did not set "
            f"the {SESSION_COOKIE_NAME} cookie"
        )
    data = response.data if isinstance(response.data, dict) else {}
    user_id = data.get("user_id")
    if not user_id:
        raise PelotonAuthError(f"Login response (status={response.status}) has no user_id")

    session_cookie = f"{SESSION_COOKIE_NAME}={cookie_value}"
    client.set_session(session_cookie, user_id=str(user_id))
    if user_agent:
        client.set_user_agent(user_agent)

    logger.info("Authenticated as Peloton user %s", user_id)

    return LoginResponse(
        status=response.status,
        headers=response.headers,
        cookies=response.cookies,
        data=response.data,
        session_cookie=session_cookie,
        user_id=str(user_id),
    )


def valid_session(client: PelotonClient, timeout: Optional[float] = None) -> ApiResponse:
    """
    Ask the auth zone whether the stored session is still valid.

    GET auth/check_session

    Returns:
        The raw ApiResponse; the caller inspects status and data.
    """
    return client.make_request("GET", Zone.AUTH, "/check_session", timeout=timeout)


def set_token(client: PelotonClient, token: str, user_id: Optional[str] = None) -> None:
    """Use an existing session token (e.g. "peloton_session_id=...") as-is."""
    client.set_session(token, user_id=user_id)


def get_token(client: PelotonClient) -> Optional[str]:
    """Current session token, or None before login."""
    return client.session_token
