"""
Peloton API types, enums, and constants.

All Peloton-specific hosts, cookie names, and default query values live here.
"""

from enum import Enum


DEFAULT_BASE_URL = "https://api.onepeloton.com"

# Name of the cookie the auth zone sets on a successful login
SESSION_COOKIE_NAME = "peloton_session_id"

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/89.0.4389.90 Safari/537.36"
)

# Seconds; applied to every request unless overridden per call
DEFAULT_TIMEOUT = 30.0


class Zone(Enum):
    """Path prefix of the two logical hosts served under the API domain."""
    AUTH = "auth"
    API = "api"


# Pagination defaults
DEFAULT_LIMIT = 10
DEFAULT_PAGE = 0

# Default `joins` per endpoint (which sub-resources get embedded)
WORKOUTS_JOINS = "ride"
WORKOUT_JOINS = "user"
RIDE_FRIENDS_JOINS = "user"

# Performance graph sampling: one point every N seconds
DEFAULT_EVERY_N = 5
