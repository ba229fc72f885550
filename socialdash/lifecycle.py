"""
Post lifecycle rules.

Every mutation of a post passes through ``validate`` before it is committed.
The rules are pure: no database, no clock, no I/O. Form handlers can call
them directly for early feedback.

States:
    draft ──► scheduled ──► published
      └──────────────────────▲

Any transition between the three states is allowed; what matters is that the
resulting post is consistent with its state.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from .errors import (
    EmptyContentError,
    InvalidStatsError,
    MissingScheduleError,
    UnknownPlatformError,
    UnknownStatusError,
    ValidationError,
)


class PostStatus(Enum):
    """Lifecycle states of a post"""
    DRAFT = "draft"
    SCHEDULED = "scheduled"
    PUBLISHED = "published"


class PlatformName(Enum):
    """Platforms a post can target"""
    FACEBOOK = "facebook"
    INSTAGRAM = "instagram"


STATUSES = frozenset(s.value for s in PostStatus)
PLATFORMS = frozenset(p.value for p in PlatformName)
STAT_FIELDS = ("likes", "comments", "shares")


def _field(candidate: Any, name: str) -> Any:
    if isinstance(candidate, Mapping):
        return candidate.get(name)
    return getattr(candidate, name, None)


def _enum_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse a schedule timestamp.

    Accepts datetimes and ISO-8601 strings (a trailing ``Z`` is read as UTC).
    Naive values are taken to be UTC; aware values are converted to UTC.
    Returns None for anything unparseable.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _validate_stats(stats: Any) -> None:
    if stats is None:
        return

    for name in STAT_FIELDS:
        value = _field(stats, name)
        if value is None:
            raise InvalidStatsError(f"stats.{name} is required when stats are present")
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise InvalidStatsError(f"stats.{name} must be a non-negative integer", value=value)


def validate(candidate: Any) -> None:
    """
    Check a candidate post against the lifecycle rules.

    ``candidate`` may be any object or mapping exposing ``content``,
    ``status``, ``platform``, ``scheduled_at`` and optionally ``stats``.
    Raises a ``ValidationError`` subclass on the first broken rule.
    """
    content = _field(candidate, "content")
    if not isinstance(content, str) or not content.strip():
        raise EmptyContentError("Post content cannot be empty")

    status = _enum_value(_field(candidate, "status"))
    if status not in STATUSES:
        raise UnknownStatusError(
            f"Unknown status '{status}'",
            allowed=sorted(STATUSES),
        )

    # scheduled_at is only meaningful for scheduled posts; past dates are allowed
    if status == PostStatus.SCHEDULED.value and parse_timestamp(_field(candidate, "scheduled_at")) is None:
        raise MissingScheduleError("Scheduled posts need a valid scheduled_at timestamp")

    platform = _enum_value(_field(candidate, "platform"))
    if platform not in PLATFORMS:
        raise UnknownPlatformError(
            f"Unknown platform '{platform}'",
            allowed=sorted(PLATFORMS),
        )

    _validate_stats(_field(candidate, "stats"))


def is_valid(candidate: Any) -> bool:
    try:
        validate(candidate)
    except ValidationError:
        return False
    return True


def normalize(fields: Dict[str, Any], clear_stale_schedule: bool = True) -> Dict[str, Any]:
    """
    Return a copy of ``fields`` ready to be stored.

    Enum members become their values and ``scheduled_at`` is parsed. When the
    resulting status is not ``scheduled`` and ``clear_stale_schedule`` is set,
    ``scheduled_at`` is dropped so the post leaves the calendar.
    """
    normalized = dict(fields)
    for key in ("status", "platform"):
        if key in normalized:
            normalized[key] = _enum_value(normalized[key])

    if "scheduled_at" in normalized:
        normalized["scheduled_at"] = parse_timestamp(normalized["scheduled_at"])

    if clear_stale_schedule and normalized.get("status") != PostStatus.SCHEDULED.value:
        normalized["scheduled_at"] = None

    return normalized
