"""
Python client for the Peloton private API.

Authenticates a user, keeps the session cookie, and wraps the profile,
social graph, workout and ride endpoints.

This uses a non-public API that could change without notice.

Layers:
    sdk          - one function per endpoint, raw decoded bodies
    Peloton      - facade binding one client / identity
    model        - optional typed views over response bodies
"""

from peloton_client.client_factory import create_client_from_env, create_client_from_token
from peloton_client.model import (
    FollowList,
    PerformanceGraph,
    Ride,
    RideDetails,
    RideFriends,
    UserProfile,
    Workout,
    WorkoutList,
)
from peloton_client.peloton import Peloton
from peloton_client.sdk.auth import LoginResponse
from peloton_client.sdk.client import ApiResponse, PelotonClient
from peloton_client.sdk.errors import (
    NotAuthenticatedError,
    PelotonAuthError,
    PelotonDecodeError,
    PelotonError,
)

__all__ = [
    "Peloton",
    "PelotonClient",
    "ApiResponse",
    "LoginResponse",
    "create_client_from_env",
    "create_client_from_token",
    # Errors
    "PelotonError", "NotAuthenticatedError", "PelotonAuthError", "PelotonDecodeError",
    # Models
    "UserProfile", "FollowList", "WorkoutList", "Workout",
    "PerformanceGraph", "Ride", "RideDetails", "RideFriends",
]
