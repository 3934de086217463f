"""Parameter helpers for aiowithings."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime, time, timezone
from typing import Any

from .const import EPOCH_DATE_PARAMS, YMD_DATE_PARAMS


def to_epoch(value: Any) -> Any:
    """Convert a date or datetime to Unix epoch seconds.

    Naive datetimes and plain dates are taken as UTC. Anything else is
    returned unchanged.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return int(value.timestamp())
    if isinstance(value, date):
        return int(datetime.combine(value, time.min, tzinfo=timezone.utc).timestamp())
    return value


def to_ymd(value: Any) -> Any:
    """Convert a date or datetime to YYYY-MM-DD."""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return value


def normalize_date_params(params: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of params with date values in their wire format.

    Keys in EPOCH_DATE_PARAMS become epoch seconds, keys in YMD_DATE_PARAMS
    become YYYY-MM-DD strings. Other keys are left alone.
    """
    normalized = dict(params)
    for key, value in normalized.items():
        if key in EPOCH_DATE_PARAMS:
            normalized[key] = to_epoch(value)
        elif key in YMD_DATE_PARAMS:
            normalized[key] = to_ymd(value)
    return normalized
