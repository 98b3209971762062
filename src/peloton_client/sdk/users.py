"""
Peloton user and social graph SDK functions.
"""

from typing import Any, Dict, Optional

from peloton_client.sdk.client import PelotonClient
from peloton_client.sdk.types import DEFAULT_LIMIT, DEFAULT_PAGE


def me(client: PelotonClient, timeout: Optional[float] = None) -> Dict[str, Any]:
    """
    Get the full profile of the authenticated user.

    GET api/me

    Returns:
        {id, username, email, total_workouts, total_followers, ...}
    """
    client.verify_logged_in()
    return client.get("/me", timeout=timeout)


def user(
    client: PelotonClient, user_id: Optional[str] = None, timeout: Optional[float] = None
) -> Dict[str, Any]:
    """
    Get a user's profile.

    GET api/user/{user_id}

    Returns the limited public profile for other users, the full profile
    when user_id is the authenticated user (the default).
    """
    client.verify_logged_in()
    user_id = client.resolve_user_id(user_id)
    return client.get(f"/user/{user_id}", timeout=timeout)


def followers(
    client: PelotonClient,
    user_id: Optional[str] = None,
    limit: Optional[int] = None,
    page: Optional[int] = None,
    timeout: Optional[float] = None,
) -> Dict[str, Any]:
    """
    Users following user_id.

    GET api/user/{user_id}/followers

    Returns:
        {data: [{id, username, ...}], total, page, limit, count, page_count, ...}
    """
    return _follow_list(client, "followers", user_id, limit, page, timeout)


def following(
    client: PelotonClient,
    user_id: Optional[str] = None,
    limit: Optional[int] = None,
    page: Optional[int] = None,
    timeout: Optional[float] = None,
) -> Dict[str, Any]:
    """
    Users followed by user_id.

    GET api/user/{user_id}/following
    """
    return _follow_list(client, "following", user_id, limit, page, timeout)


def _follow_list(client, direction, user_id, limit, page, timeout) -> Dict[str, Any]:
    client.verify_logged_in()
    user_id = client.resolve_user_id(user_id)
    params = {
        "limit": DEFAULT_LIMIT if limit is None else limit,
        "page": DEFAULT_PAGE if page is None else page,
    }
    return client.get(f"/user/{user_id}/{direction}", params=params, timeout=timeout)
