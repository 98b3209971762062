"""
Peloton Low-Level SDK.

Thin wrapper over the private Peloton HTTP API.
Each function maps 1:1 to a Peloton endpoint and returns the decoded body.
"""

from peloton_client.sdk.client import ApiResponse, PelotonClient, SessionState
from peloton_client.sdk.errors import (
    NotAuthenticatedError,
    PelotonAuthError,
    PelotonDecodeError,
    PelotonError,
)
from peloton_client.sdk.types import (
    DEFAULT_BASE_URL,
    DEFAULT_USER_AGENT,
    SESSION_COOKIE_NAME,
    Zone,
)

__all__ = [
    "ApiResponse",
    "PelotonClient",
    "SessionState",
    "NotAuthenticatedError",
    "PelotonAuthError",
    "PelotonDecodeError",
    "PelotonError",
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "SESSION_COOKIE_NAME",
    "Zone",
]
