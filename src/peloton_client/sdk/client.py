"""
Peloton HTTP Client.

Handles HTTP transport, session state, zone routing, and response decoding.
All endpoint-specific logic lives in the sibling modules (auth, users, etc.).
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import requests

from peloton_client.sdk.errors import NotAuthenticatedError, PelotonDecodeError
from peloton_client.sdk.types import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    Zone,
)

logger = logging.getLogger(__name__)


@dataclass
class SessionState:
    """Credentials and identity carried by one client."""
    session_token: Optional[str] = None
    user_id: Optional[str] = None
    user_agent: str = DEFAULT_USER_AGENT

    @property
    def logged_in(self) -> bool:
        return self.session_token is not None


@dataclass
class ApiResponse:
    """Decoded response: HTTP status, headers, cookies set, and JSON body."""
    status: int
    headers: Dict[str, str] = field(default_factory=dict)
    cookies: Dict[str, str] = field(default_factory=dict)
    data: Any = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class PelotonClient:
    """
    Peloton HTTP transport.

    Owns the session state and a single requests.Session used for both GET
    and POST. Endpoint calls are in sibling modules (sdk.auth, sdk.users, ...).
    """

    def __init__(
        self,
        user_agent: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self._state = SessionState(user_agent=user_agent or DEFAULT_USER_AGENT)
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    @property
    def session_token(self) -> Optional[str]:
        return self._state.session_token

    @property
    def user_id(self) -> Optional[str]:
        return self._state.user_id

    @property
    def user_agent(self) -> str:
        return self._state.user_agent

    @property
    def is_logged_in(self) -> bool:
        return self._state.logged_in

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    def url_for(self, zone: Zone, path: str) -> str:
        """Full URL for a path in the given zone, e.g. (API, "/me")."""
        return f"{self._base_url}/{zone.value}{path}"

    def verify_logged_in(self) -> None:
        """Raise NotAuthenticatedError unless a session token is set."""
        if not self._state.logged_in:
            raise NotAuthenticatedError()

    def resolve_user_id(self, user_id: Optional[str] = None) -> str:
        """Explicit user id, else the one stored on the session."""
        resolved = user_id or self._state.user_id
        if not resolved:
            raise ValueError(
                "No user_id given and none stored on the session. "
                "Pass user_id or log in with authenticate()."
            )
        return resolved

    @staticmethod
    def require_id(name: str, value: Optional[str]) -> str:
        """Raise ValueError for a missing path id (workout_id, ride_id, ...)."""
        if not value:
            raise ValueError(f"{name} is required")
        return value

    def make_request(
        self,
        method: str,
        zone: Zone,
        path: str,
        params: Dict = None,
        json_data: Dict = None,
        require_auth: bool = True,
        timeout: Optional[float] = None,
    ) -> ApiResponse:
        """
        Make an API request and decode its JSON body.

        Args:
            method: HTTP method (GET/POST)
            zone: Zone.AUTH or Zone.API
            path: Resource path inside the zone (e.g. "/me")
            params: Query parameters; None values are left out
            json_data: JSON body data
            require_auth: Whether authentication is required; also whether
                the session cookie is sent
            timeout: Per-call timeout in seconds (client default if None)

        Returns:
            ApiResponse. Non-2xx statuses are returned, not raised.

        Raises:
            NotAuthenticatedError: If not logged in but auth required
            PelotonDecodeError: If the body is not valid JSON
            requests.RequestException: On transport failure
        """
        headers = {"User-Agent": self._state.user_agent}
        if require_auth:
            self.verify_logged_in()
            headers["cookie"] = self._state.session_token
        if json_data is not None:
            headers["Content-Type"] = "application/json"

        url = self.url_for(zone, path)
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        response = self._session.request(
            method.upper(),
            url,
            headers=headers,
            params=params or None,
            json=json_data,
            timeout=timeout if timeout is not None else self._timeout,
        )
        logger.debug("%s %s -> %s", method.upper(), url, response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise PelotonDecodeError(
                f"Invalid JSON in response to {method.upper()} {path} "
                f"(status={response.status_code}): {e}"
            ) from e

        if not 200 <= response.status_code < 300:
            logger.debug("Passing through %s body from %s", response.status_code, path)

        return ApiResponse(
            status=response.status_code,
            headers=dict(response.headers),
            cookies=response.cookies.get_dict(),
            data=data,
        )

    def get(self, path: str, params: Dict = None, timeout: Optional[float] = None) -> Any:
        """Authenticated GET in the api zone; returns the decoded body only."""
        return self.make_request("GET", Zone.API, path, params=params, timeout=timeout).data

    # ── Session mutation ─────────────────────────────────────────────────

    def set_session(self, token: str, user_id: Optional[str] = None) -> None:
        """Store a session token (and optionally the user it belongs to)."""
        self._state.session_token = token
        if user_id is not None:
            self._state.user_id = user_id

    def set_user_agent(self, user_agent: str) -> None:
        self._state.user_agent = user_agent

    def close(self) -> None:
        """Release pooled connections."""
        self._session.close()

    def __enter__(self) -> "PelotonClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
