"""
Peloton facade.

Binds one PelotonClient (one identity) and exposes every SDK operation as
a method. Create one per account:

    peloton = Peloton()
    peloton.authenticate("me@example.com", "secret")
    history = peloton.workouts(limit=20)
"""

from typing import Any, Dict, Optional

from peloton_client.sdk import auth as sdk_auth
from peloton_client.sdk import rides as sdk_rides
from peloton_client.sdk import users as sdk_users
from peloton_client.sdk import workouts as sdk_workouts
from peloton_client.sdk.client import ApiResponse, PelotonClient


class Peloton:
    """All Peloton operations for a single session."""

    def __init__(self, client: Optional[PelotonClient] = None, **client_kwargs):
        self._client = client or PelotonClient(**client_kwargs)

    @property
    def client(self) -> PelotonClient:
        return self._client

    @property
    def logged_in(self) -> bool:
        return self._client.is_logged_in

    # ── Session ──────────────────────────────────────────────────────────
    # Every network call takes an optional per-call `timeout` in seconds.

    def authenticate(
        self,
        username: str,
        password: str,
        user_agent: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> sdk_auth.LoginResponse:
        return sdk_auth.authenticate(
            self._client, username, password, user_agent=user_agent, timeout=timeout
        )

    def valid_session(self, timeout: Optional[float] = None) -> ApiResponse:
        return sdk_auth.valid_session(self._client, timeout=timeout)

    def set_token(self, token: str, user_id: Optional[str] = None) -> None:
        sdk_auth.set_token(self._client, token, user_id=user_id)

    def get_token(self) -> Optional[str]:
        return sdk_auth.get_token(self._client)

    # ── Users ────────────────────────────────────────────────────────────

    def me(self, timeout: Optional[float] = None) -> Dict[str, Any]:
        return sdk_users.me(self._client, timeout=timeout)

    def user(self, user_id: Optional[str] = None, timeout: Optional[float] = None) -> Dict[str, Any]:
        return sdk_users.user(self._client, user_id=user_id, timeout=timeout)

    def followers(
        self,
        user_id: Optional[str] = None,
        limit: Optional[int] = None,
        page: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> Dict[str, Any]:
        return sdk_users.followers(
            self._client, user_id=user_id, limit=limit, page=page, timeout=timeout
        )

    def following(
        self,
        user_id: Optional[str] = None,
        limit: Optional[int] = None,
        page: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> Dict[str, Any]:
        return sdk_users.following(
            self._client, user_id=user_id, limit=limit, page=page, timeout=timeout
        )

    # ── Workouts ─────────────────────────────────────────────────────────

    def workouts(self, user_id: Optional[str] = None, **options) -> Dict[str, Any]:
        """Options: joins, limit, page, from_, to, stats_from, stats_to, timeout."""
        return sdk_workouts.workouts(self._client, user_id=user_id, **options)

    def workout(
        self, workout_id: str, joins: Optional[str] = None, timeout: Optional[float] = None
    ) -> Dict[str, Any]:
        return sdk_workouts.workout(self._client, workout_id, joins=joins, timeout=timeout)

    def workout_performance_graph(
        self, workout_id: str, every_n: Optional[int] = None, timeout: Optional[float] = None
    ) -> Dict[str, Any]:
        return sdk_workouts.workout_performance_graph(
            self._client, workout_id, every_n=every_n, timeout=timeout
        )

    # ── Rides ────────────────────────────────────────────────────────────

    def ride(self, ride_id: str, timeout: Optional[float] = None) -> Dict[str, Any]:
        return sdk_rides.ride(self._client, ride_id, timeout=timeout)

    def ride_friends(
        self,
        ride_id: str,
        joins: Optional[str] = None,
        limit: Optional[int] = None,
        page: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> Dict[str, Any]:
        return sdk_rides.ride_friends(
            self._client, ride_id, joins=joins, limit=limit, page=page, timeout=timeout
        )

    def ride_details(self, ride_id: str, timeout: Optional[float] = None) -> Dict[str, Any]:
        return sdk_rides.ride_details(self._client, ride_id, timeout=timeout)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "Peloton":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
