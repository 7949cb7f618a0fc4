# Twitter Ads API Client
# File: utils.py
# Version: v2

"""Value coercion and query-string helpers shared across the client."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Iterable, List, Mapping, Optional, Tuple
from urllib.parse import urlencode

_TRUE_STRINGS = {"true", "1", "yes"}
_FALSE_STRINGS = {"false", "0", "no"}


def to_bool(value: Any) -> Optional[bool]:
    """Coerce an API boolean representation, or return None if unrecognised."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    return None


def parse_time(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp as sent by the API (``...Z`` included)."""
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    if text.endswith("Z") or text.endswith("z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def format_time(value: datetime) -> str:
    """ISO-8601 with whole seconds; UTC is written with a ``Z`` suffix."""
    text = value.isoformat(timespec="seconds")
    if value.tzinfo is not None and value.utcoffset() == timedelta(0):
        text = text[: -len("+00:00")] + "Z"
    return text


def to_time(value: datetime, granularity: Optional[str] = None) -> str:
    """Format ``value`` after flooring it to the stats granularity.

    HOUR drops minutes and seconds, DAY drops the time of day, anything
    else (TOTAL, None) formats the value unchanged.
    """
    unit = (granularity or "").upper()
    if unit == "HOUR":
        value = value.replace(minute=0, second=0, microsecond=0)
    elif unit == "DAY":
        value = value.replace(hour=0, minute=0, second=0, microsecond=0)
    return format_time(value)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def flatten_value(value: Any) -> str:
    """Render one query parameter value the way the Ads API expects."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return format_time(value)
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(flatten_value(item) for item in value)
    return str(value)


def flatten_params(params: Optional[Mapping[str, Any]]) -> List[Tuple[str, str]]:
    """Turn a params mapping into ordered string pairs, dropping None values."""
    if not params:
        return []
    return [
        (str(key), flatten_value(value))
        for key, value in params.items()
        if value is not None
    ]


def encode_params(params: Optional[Mapping[str, Any]]) -> str:
    """URL-encode params; comma-joined sequences become ``a%2Cb``."""
    return urlencode(flatten_params(params))


def join_ids(ids: Iterable[Any]) -> str:
    return ",".join(str(i) for i in ids)
