"""Date parsing shared by every date-based ledger query.

One rule parses stored ``transaction_date`` values and caller-supplied bounds
alike, so comparisons are always between values produced the same way.
Parsing fails closed: anything that cannot be read as a calendar date yields
``None`` and callers treat that as "never matches".
"""

from __future__ import annotations

from datetime import UTC, date, datetime, time

# Tried after ISO 8601; the date part may be followed by a space and a time.
_FALLBACK_DATE_FORMATS = ("%Y/%m/%d", "%m/%d/%Y")


def _naive_utc(dt: datetime) -> datetime:
    # Aware values are normalized to UTC so they compare with naive ones.
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(UTC).replace(tzinfo=None)


def parse_transaction_date(value: object) -> datetime | None:
    """Parse ``value`` into a naive ``datetime`` or return ``None``.

    Accepted inputs:

    - ``datetime`` (aware values converted to UTC) and ``date`` (midnight);
    - ISO 8601 strings, e.g. ``2019-01-05``, ``2019-01-05T10:30:00``,
      ``2019-01-05 10:30``, ``2019-01-05T10:30:00Z``;
    - ``YYYY/MM/DD`` and ``MM/DD/YYYY``, optionally followed by a space and an
      ISO time (``HH:MM[:SS]``).
    """

    if isinstance(value, datetime):
        return _naive_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        return None

    s = value.strip()
    if not s:
        return None

    try:
        return _naive_utc(datetime.fromisoformat(s))
    except ValueError:
        pass

    date_part, _, time_part = s.partition(" ")
    for fmt in _FALLBACK_DATE_FORMATS:
        try:
            parsed = datetime.strptime(date_part, fmt)
        except ValueError:
            continue
        time_part = time_part.strip()
        if not time_part:
            return parsed
        try:
            clock = time.fromisoformat(time_part)
        except ValueError:
            return None
        return _naive_utc(datetime.combine(parsed.date(), clock))
    return None


__all__ = ["parse_transaction_date"]
