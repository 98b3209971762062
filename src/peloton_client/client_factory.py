"""
Client factory for the Peloton client.

Builds ready-to-use clients from a stored session token or from the
environment.

Environment variables:
- PELOTON_SESSION_TOKEN: cookie value ("peloton_session_id=...") to reuse
- PELOTON_USER_ID: user the token belongs to (optional)
- PELOTON_USERNAME / PELOTON_PASSWORD: used when no token is set
- PELOTON_USER_AGENT: overrides the default browser User-Agent
- PELOTON_TIMEOUT: per-request timeout in seconds
- PELOTON_BASE_URL: API host (default https://api.onepeloton.com)
"""

import logging
import os
from typing import Mapping, Optional

from peloton_client.sdk import auth as sdk_auth
from peloton_client.sdk.client import PelotonClient
from peloton_client.sdk.types import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


def create_client_from_token(
    token: str, user_id: Optional[str] = None, **client_kwargs
) -> PelotonClient:
    """
    Create a Peloton client from a previously obtained session token.

    Args:
        token: Value from get_token() / LoginResponse.session_cookie
        user_id: Default subject for user-scoped calls

    Returns:
        Logged-in PelotonClient instance
    """
    client = PelotonClient(**client_kwargs)
    sdk_auth.set_token(client, token, user_id=user_id)
    return client


def client_kwargs_from_env(environ: Mapping[str, str]) -> dict:
    """PelotonClient constructor arguments taken from the environment."""
    timeout = environ.get("PELOTON_TIMEOUT")
    try:
        timeout = float(timeout) if timeout else DEFAULT_TIMEOUT
    except ValueError:
        raise ValueError(f"PELOTON_TIMEOUT must be a number of seconds, got {timeout!r}")
    return {
        "user_agent": environ.get("PELOTON_USER_AGENT") or None,
        "base_url": environ.get("PELOTON_BASE_URL") or DEFAULT_BASE_URL,
        "timeout": timeout,
    }


def create_client_from_env(environ: Optional[Mapping[str, str]] = None) -> PelotonClient:
    """
    Create a logged-in client from PELOTON_* environment variables.

    A session token takes precedence over username/password; with
    credentials, this performs a login request.

    Raises:
        ValueError: If neither a token nor full credentials are set
    """
    environ = os.environ if environ is None else environ
    kwargs = client_kwargs_from_env(environ)

    token = environ.get("PELOTON_SESSION_TOKEN")
    if token:
        logger.debug("Using session token from PELOTON_SESSION_TOKEN")
        return create_client_from_token(token, user_id=environ.get("PELOTON_USER_ID") or None, **kwargs)

    username = environ.get("PELOTON_USERNAME")
    password = environ.get("PELOTON_PASSWORD")
    if not username or not password:
        raise ValueError(
            "No Peloton session. Set PELOTON_SESSION_TOKEN or "
            "PELOTON_USERNAME and PELOTON_PASSWORD."
        )

    client = PelotonClient(**kwargs)
    sdk_auth.authenticate(client, username, password)
    return client
