"""
Typed views over Peloton response bodies.

The SDK returns bodies untouched; these dataclasses are opt-in for callers
that want checked fields, e.g. ``Workout.from_dict(peloton.workout(wid))``.
Only the fields callers commonly need are lifted out, everything else stays
reachable through ``raw``. Validation checks presence and JSON type only.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from peloton_client.sdk.errors import PelotonDecodeError


_MISSING = object()


def _field(d: dict, key: str, types, label: str, required: bool = False, default=None):
    """Fetch d[key] and check its JSON type.

    Raises:
        PelotonDecodeError: If a required field is absent, or a present
            non-null field has the wrong type.
    """
    value = d.get(key, _MISSING)
    if value is _MISSING or value is None:
        if required:
            raise PelotonDecodeError(f"{label}: missing required field '{key}'", field=key)
        return default
    if not isinstance(value, types):
        expected = " or ".join(t.__name__ for t in (types if isinstance(types, tuple) else (types,)))
        raise PelotonDecodeError(
            f"{label}.{key}: expected {expected}, got {type(value).__name__}",
            field=key,
        )
    return value


def _body(d: Any, label: str) -> dict:
    if not isinstance(d, dict):
        raise PelotonDecodeError(f"{label}: expected a JSON object, got {type(d).__name__}")
    return d


_ID = (str, int)
_NUMBER = (int, float)


@dataclass
class UserProfile:
    """A user as returned by /me (full) or /user/{id} (public subset)."""
    id: str
    username: Optional[str] = None
    location: Optional[str] = None
    is_private: Optional[bool] = None
    total_workouts: Optional[int] = None
    total_followers: Optional[int] = None
    total_following: Optional[int] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, d: dict) -> "UserProfile":
        d = _body(d, "user")
        return cls(
            id=str(_field(d, "id", _ID, "user", required=True)),
            username=_field(d, "username", str, "user"),
            location=_field(d, "location", str, "user"),
            is_private=_field(d, "is_profile_private", bool, "user"),
            total_workouts=_field(d, "total_workouts", int, "user"),
            total_followers=_field(d, "total_followers", int, "user"),
            total_following=_field(d, "total_following", int, "user"),
            raw=d,
        )


@dataclass
class PagedList:
    """Common envelope of the paginated list endpoints.

    Items in ``data`` are left as plain dicts.
    """
    data: List[Dict[str, Any]]
    total: Optional[int] = None
    page: Optional[int] = None
    limit: Optional[int] = None
    count: Optional[int] = None
    page_count: Optional[int] = None
    show_next: Optional[bool] = None
    show_previous: Optional[bool] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    _label = "list"

    @classmethod
    def from_dict(cls, d: dict):
        label = cls._label
        d = _body(d, label)
        return cls(
            data=_field(d, "data", list, label, required=True),
            total=_field(d, "total", int, label),
            page=_field(d, "page", int, label),
            limit=_field(d, "limit", int, label),
            count=_field(d, "count", int, label),
            page_count=_field(d, "page_count", int, label),
            show_next=_field(d, "show_next", bool, label),
            show_previous=_field(d, "show_previous", bool, label),
            raw=d,
        )

    @property
    def has_next(self) -> bool:
        if self.show_next is not None:
            return self.show_next
        if self.page is not None and self.page_count is not None:
            return self.page + 1 < self.page_count
        return False


class FollowList(PagedList):
    """/user/{id}/followers and /user/{id}/following."""
    _label = "follow_list"


class WorkoutList(PagedList):
    """/user/{id}/workouts."""
    _label = "workout_list"


class RideFriends(PagedList):
    """/ride/{id}/recent_following_workouts."""
    _label = "ride_friends"


@dataclass
class Workout:
    id: str
    status: Optional[str] = None
    fitness_discipline: Optional[str] = None
    created_at: Optional[int] = None
    start_time: Optional[int] = None
    end_time: Optional[int] = None
    total_work: Optional[float] = None
    ride: Optional[Dict[str, Any]] = None
    user: Optional[Dict[str, Any]] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, d: dict) -> "Workout":
        d = _body(d, "workout")
        return cls(
            id=str(_field(d, "id", _ID, "workout", required=True)),
            status=_field(d, "status", str, "workout"),
            fitness_discipline=_field(d, "fitness_discipline", str, "workout"),
            created_at=_field(d, "created_at", int, "workout"),
            start_time=_field(d, "start_time", int, "workout"),
            end_time=_field(d, "end_time", int, "workout"),
            total_work=_field(d, "total_work", _NUMBER, "workout"),
            ride=_field(d, "ride", dict, "workout"),
            user=_field(d, "user", dict, "workout"),
            raw=d,
        )

    @property
    def duration_seconds(self) -> Optional[int]:
        if self.start_time is None or self.end_time is None:
            return None
        return self.end_time - self.start_time


@dataclass
class PerformanceGraph:
    metrics: List[Dict[str, Any]]
    duration: Optional[int] = None
    seconds_since_pedaling_start: List[int] = field(default_factory=list)
    summaries: List[Dict[str, Any]] = field(default_factory=list)
    average_summaries: List[Dict[str, Any]] = field(default_factory=list)
    segment_list: List[Dict[str, Any]] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, d: dict) -> "PerformanceGraph":
        label = "performance_graph"
        d = _body(d, label)
        return cls(
            metrics=_field(d, "metrics", list, label, required=True),
            duration=_field(d, "duration", int, label),
            seconds_since_pedaling_start=_field(d, "seconds_since_pedaling_start", list, label, default=[]),
            summaries=_field(d, "summaries", list, label, default=[]),
            average_summaries=_field(d, "average_summaries", list, label, default=[]),
            segment_list=_field(d, "segment_list", list, label, default=[]),
            raw=d,
        )

    def metric(self, slug: str) -> Optional[Dict[str, Any]]:
        """The metric series with the given slug ("output", "heart_rate", ...)."""
        for m in self.metrics:
            if isinstance(m, dict) and m.get("slug") == slug:
                return m
        return None


@dataclass
class Ride:
    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    duration: Optional[int] = None
    instructor_id: Optional[str] = None
    fitness_discipline: Optional[str] = None
    difficulty_estimate: Optional[float] = None
    original_air_time: Optional[int] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, d: dict) -> "Ride":
        d = _body(d, "ride")
        return cls(
            id=str(_field(d, "id", _ID, "ride", required=True)),
            title=_field(d, "title", str, "ride"),
            description=_field(d, "description", str, "ride"),
            duration=_field(d, "duration", int, "ride"),
            instructor_id=_field(d, "instructor_id", str, "ride"),
            fitness_discipline=_field(d, "fitness_discipline", str, "ride"),
            difficulty_estimate=_field(d, "difficulty_estimate", _NUMBER, "ride"),
            original_air_time=_field(d, "original_air_time", int, "ride"),
            raw=d,
        )


@dataclass
class RideDetails:
    ride: Ride
    playlist: Optional[Dict[str, Any]] = None
    class_types: List[Dict[str, Any]] = field(default_factory=list)
    segments: Optional[Dict[str, Any]] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, d: dict) -> "RideDetails":
        label = "ride_details"
        d = _body(d, label)
        return cls(
            ride=Ride.from_dict(_field(d, "ride", dict, label, required=True)),
            playlist=_field(d, "playlist", dict, label),
            class_types=_field(d, "class_types", list, label, default=[]),
            segments=_field(d, "segments", dict, label),
            raw=d,
        )
