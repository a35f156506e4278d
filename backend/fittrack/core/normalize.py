"""
Field normalization for loosely typed store documents.

Nothing here raises on malformed input: unresolvable timestamps become
``None`` and unparseable numbers become 0.
"""
import math
from datetime import datetime, timezone
from typing import Any, Mapping, Optional


def _seconds_field(raw: Any) -> Any:
    """Return the seconds-since-epoch field of a timestamp wrapper, if any."""
    if isinstance(raw, Mapping):
        for key in ("seconds", "_seconds"):
            if raw.get(key) is not None:
                return raw[key]
        return None
    if isinstance(raw, (datetime, str, int, float)):
        return None
    return getattr(raw, "seconds", None)


def _from_epoch_ms(value: float) -> Optional[datetime]:
    try:
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def normalize_timestamp(raw: Any) -> Optional[datetime]:
    """
    Resolve a raw ``createdAt`` value to an aware UTC datetime.

    Precedence:
    1. a seconds-since-epoch field (mapping key or attribute)
    2. a datetime (naive values are taken as UTC)
    3. a number, as epoch milliseconds
    4. a string, as an ISO-8601 date

    Returns:
        datetime in UTC, or None if the value cannot be resolved
    """
    if raw is None or isinstance(raw, bool):
        return None

    seconds = _seconds_field(raw)
    if seconds is not None:
        try:
            return _from_epoch_ms(float(seconds) * 1000)
        except (TypeError, ValueError):
            return None

    if isinstance(raw, datetime):
        if raw.tzinfo is None:
            return raw.replace(tzinfo=timezone.utc)
        return raw.astimezone(timezone.utc)

    if isinstance(raw, (int, float)):
        return _from_epoch_ms(raw)

    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            return None
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)

    return None


def _finite(number: Any) -> float:
    try:
        return number if math.isfinite(number) else 0
    except OverflowError:
        return 0


def to_number(value: Any) -> float:
    """
    Coerce a numeric field; missing, unparseable or non-finite values
    (NaN, infinities, numbers beyond float range) count as 0.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return _finite(value)
    if isinstance(value, str):
        try:
            return _finite(int(value))
        except ValueError:
            pass
        try:
            return _finite(float(value))
        except ValueError:
            return 0
    return 0


def month_key(moment: datetime) -> str:
    """Monthly bucket key, ``YYYY-MM``."""
    return f"{moment.year:04d}-{moment.month:02d}"

