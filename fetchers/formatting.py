"""Normalisation of the date and pay strings job boards print."""

from __future__ import annotations

import datetime as dt
import re
from typing import Optional

DATE_FORMAT = "%Y-%m-%d"

_ELAPSED_UNITS = {
    "hour": "hours",
    "hours": "hours",
    "day": "days",
    "days": "days",
    "week": "weeks",
    "weeks": "weeks",
}
_SHORT_RE = re.compile(r"^(\d+)\s*([dwm])")


def _today(today: Optional[dt.date]) -> dt.datetime:
    if today is None:
        return dt.datetime.now()
    if isinstance(today, dt.datetime):
        return today
    return dt.datetime(today.year, today.month, today.day)


def date_from_elapsed(time_elapsed: str, today: Optional[dt.date] = None) -> str:
    """Turn "3 days" / "1 week" / "2 months" into an ISO date relative to today.

    Anything unrecognised resolves to today.
    """
    now = _today(today)
    parts = time_elapsed.split()
    if len(parts) < 2:
        return now.strftime(DATE_FORMAT)
    try:
        amount = int(parts[0])
    except ValueError:
        return now.strftime(DATE_FORMAT)

    unit = parts[1].lower()
    if unit in _ELAPSED_UNITS:
        delta = dt.timedelta(**{_ELAPSED_UNITS[unit]: amount})
    elif unit == "month":
        delta = dt.timedelta(days=31)
    elif unit == "months":
        delta = dt.timedelta(days=amount * 30)
    else:
        return now.strftime(DATE_FORMAT)
    return (now - delta).strftime(DATE_FORMAT)


def date_from_short(time_elapsed: str, today: Optional[dt.date] = None) -> str:
    """Turn "1d" / "2w" / "3m" into an ISO date; "today" and the like give today."""
    now = _today(today)
    match = _SHORT_RE.match(time_elapsed.strip().lower())
    if not match:
        return now.strftime(DATE_FORMAT)
    amount, unit = int(match.group(1)), match.group(2)
    if unit == "d":
        delta = dt.timedelta(days=amount)
    elif unit == "w":
        delta = dt.timedelta(weeks=amount)
    else:
        delta = dt.timedelta(days=amount * 30)
    return (now - delta).strftime(DATE_FORMAT)


def format_range_remuneration(text: str, strip: str = "$", lowercase: bool = False) -> str:
    """Normalise "a-b" pay ranges to "$a - $b"; other shapes give an empty string."""
    for marker in strip:
        text = text.replace(marker, "")
    parts = [p.strip() for p in text.split("-")]
    if len(parts) != 2:
        return ""
    formatted = f"${parts[0]} - ${parts[1]}"
    return formatted.lower() if lowercase else formatted
