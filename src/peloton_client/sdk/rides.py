"""
Peloton ride (class) SDK functions.

A ride is the class a workout was taken against; ids come from a
workout's `ride.id` or `peloton.ride_id`.
"""

from typing import Any, Dict, Optional

from peloton_client.sdk.client import PelotonClient
from peloton_client.sdk.types import DEFAULT_LIMIT, DEFAULT_PAGE, RIDE_FRIENDS_JOINS


def ride(client: PelotonClient, ride_id: str, timeout: Optional[float] = None) -> Dict[str, Any]:
    """
    GET api/ride/{ride_id}

    Returns:
        {id, title, description, duration, instructor_id, fitness_discipline, ...}
    """
    client.verify_logged_in()
    client.require_id("ride_id", ride_id)
    return client.get(f"/ride/{ride_id}", timeout=timeout)


def ride_friends(
    client: PelotonClient,
    ride_id: str,
    joins: Optional[str] = None,
    limit: Optional[int] = None,
    page: Optional[int] = None,
    timeout: Optional[float] = None,
) -> Dict[str, Any]:
    """
    Recent workouts on this ride by users the authenticated user follows.

    GET api/ride/{ride_id}/recent_following_workouts
    """
    client.verify_logged_in()
    client.require_id("ride_id", ride_id)
    params = {
        "joins": joins or RIDE_FRIENDS_JOINS,
        "limit": DEFAULT_LIMIT if limit is None else limit,
        "page": DEFAULT_PAGE if page is None else page,
    }
    return client.get(f"/ride/{ride_id}/recent_following_workouts", params=params, timeout=timeout)


def ride_details(client: PelotonClient, ride_id: str, timeout: Optional[float] = None) -> Dict[str, Any]:
    """
    GET api/ride/{ride_id}/details

    Returns:
        {ride, playlist, class_types, segments, averages, ...}
    """
    client.verify_logged_in()
    client.require_id("ride_id", ride_id)
    return client.get(f"/ride/{ride_id}/details", timeout=timeout)
