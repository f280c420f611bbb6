# readings.py
# Collapse a reading history to the latest value of every parameter.
from collections import namedtuple
from datetime import date, datetime, time, timezone
from typing import Any, Dict, Iterable

Reading = namedtuple("Reading", ["parameter_key", "value", "timestamp"])

_KEY_FIELDS = ("parameterKey", "parameter_key", "type", "param")
_TIME_FIELDS = ("timestamp", "created_at", "createdAt")


def _first(obj: Any, names) -> Any:
    for name in names:
        if isinstance(obj, dict):
            value = obj.get(name)
        else:
            value = getattr(obj, name, None)
        if value is not None:
            return value
    return None


def as_reading(obj: Any) -> Reading:
    """Accept a Reading, a dict from the persistence layer or a Measurement row."""
    if isinstance(obj, Reading):
        return obj
    key = _first(obj, _KEY_FIELDS)
    key = getattr(key, "value", key)
    value = obj.get("value") if isinstance(obj, dict) else getattr(obj, "value", None)
    return Reading(key, value, _first(obj, _TIME_FIELDS))


def _as_datetime(ts):
    # ISO strings and plain dates join datetimes on one UTC timeline
    if isinstance(ts, str):
        ts = datetime.fromisoformat(ts.strip().replace("Z", "+00:00"))
    elif isinstance(ts, date) and not isinstance(ts, datetime):
        ts = datetime.combine(ts, time.min)
    if isinstance(ts, datetime) and ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts


def _sort_key(reading: Reading):
    ts = _as_datetime(reading.timestamp)
    # undated readings go first
    if ts is None:
        return (0, 0.0)
    if isinstance(ts, datetime):
        return (1, ts.timestamp())
    return (1, float(ts))


def latest_values(readings: Iterable[Any]) -> Dict[str, Any]:
    """Return {parameter key: latest value}.

    Readings are sorted by timestamp ascending (stable, so equal timestamps
    keep their input order) and the last value per key wins. Keys appear in
    the order they first show up in the sorted history. Timestamps may be
    datetimes, dates, ISO-8601 strings or epoch seconds; naive values are
    taken as UTC.
    """
    ordered = sorted((as_reading(r) for r in readings), key=_sort_key)
    latest: Dict[str, Any] = {}
    for reading in ordered:
        if reading.parameter_key is None:
            continue
        latest[str(reading.parameter_key)] = reading.value
    return latest
