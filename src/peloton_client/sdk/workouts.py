"""
Peloton workout SDK functions.
"""

from typing import Any, Dict, Optional

from peloton_client.sdk.client import PelotonClient
from peloton_client.sdk.types import (
    DEFAULT_EVERY_N,
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    WORKOUT_JOINS,
    WORKOUTS_JOINS,
)


def workouts(
    client: PelotonClient,
    user_id: Optional[str] = None,
    joins: Optional[str] = None,
    limit: Optional[int] = None,
    page: Optional[int] = None,
    from_: Optional[str] = None,
    to: Optional[str] = None,
    stats_from: Optional[str] = None,
    stats_to: Optional[str] = None,
    timeout: Optional[float] = None,
) -> Dict[str, Any]:
    """
    Paginated workout history of a user (the authenticated one by default).

    GET api/user/{user_id}/workouts

    Args:
        joins: Embedded sub-resources (default "ride")
        limit: Page size (default 10)
        page: Zero-based page number (default 0)
        from_, to: Optional created-at window, sent as `from` / `to`
        stats_from, stats_to: Optional window for the aggregate stats
        timeout: Seconds for this call (client default if None)

    Returns:
        {data: [{id, status, fitness_discipline, ride, ...}], total, page,
         limit, count, page_count, show_next, show_previous, ...}
    """
    client.verify_logged_in()
    user_id = client.resolve_user_id(user_id)
    params = {
        "joins": joins or WORKOUTS_JOINS,
        "limit": DEFAULT_LIMIT if limit is None else limit,
        "page": DEFAULT_PAGE if page is None else page,
        "from": from_,
        "to": to,
        "stats_from": stats_from,
        "stats_to": stats_to,
    }
    return client.get(f"/user/{user_id}/workouts", params=params, timeout=timeout)


def workout(
    client: PelotonClient,
    workout_id: str,
    joins: Optional[str] = None,
    timeout: Optional[float] = None,
) -> Dict[str, Any]:
    """
    Details of a single workout.

    GET api/workout/{workout_id}

    Returns:
        {id, status, fitness_discipline, start_time, end_time, user, ride, ...}
    """
    client.verify_logged_in()
    client.require_id("workout_id", workout_id)
    return client.get(
        f"/workout/{workout_id}", params={"joins": joins or WORKOUT_JOINS}, timeout=timeout,
    )


def workout_performance_graph(
    client: PelotonClient,
    workout_id: str,
    every_n: Optional[int] = None,
    timeout: Optional[float] = None,
) -> Dict[str, Any]:
    """
    Metric time series of a workout, sampled every `every_n` seconds.

    GET api/workout/{workout_id}/performance_graph

    Returns:
        {duration, seconds_since_pedaling_start, metrics: [{slug, values, ...}],
         summaries, average_summaries, segment_list, ...}
    """
    client.verify_logged_in()
    client.require_id("workout_id", workout_id)
    params = {"every_n": every_n or DEFAULT_EVERY_N}
    return client.get(f"/workout/{workout_id}/performance_graph", params=params, timeout=timeout)
