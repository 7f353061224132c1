"""Date expressions - absolute dates, relative offsets, and age filters.

Pure functions, no clock access: every caller passes the reference date.
"""

import re
from datetime import date, datetime, timedelta

from .errors import InvalidDate, InvalidDuration

DATE_FORMAT = "%Y/%m/%d"

# Months and years are fixed-length approximations.
UNIT_DAYS = {"d": 1, "w": 7, "m": 30, "y": 365}

_ABSOLUTE = re.compile(r"^([0-9]{4})([-/])([0-9]{2})\2([0-9]{2})$")
_RELATIVE = re.compile(r"^\+([0-9]+)([dwmy])$")


def _parse_offset(token: str) -> int | None:
    """Day count for '+N<unit>', or None when the token doesn't match."""
    m = _RELATIVE.match(token.strip())
    if not m:
        return None
    value = int(m.group(1))
    if value <= 0:
        return None
    return value * UNIT_DAYS[m.group(2)]


def parse_absolute_date(token: str) -> date:
    """Parse YYYY-MM-DD or YYYY/MM/DD into a real calendar date."""
    m = _ABSOLUTE.match(token.strip())
    if not m:
        raise InvalidDate(token)
    try:
        return date(int(m.group(1)), int(m.group(3)), int(m.group(4)))
    except ValueError:
        raise InvalidDate(token) from None


def resolve_date(token: str, reference_date: date) -> date:
    """
    Resolve a due date expression.

    Absolute: "2025-12-25" or "2025/12/25".
    Relative: "+3d", "+2w", "+1m", "+1y", counted forward from reference_date.
    """
    stripped = token.strip()
    if stripped.startswith("+"):
        days = _parse_offset(stripped)
        if days is None:
            raise InvalidDate(token)
        try:
            return reference_date + timedelta(days=days)
        except OverflowError:
            raise InvalidDate(token) from None
    return parse_absolute_date(stripped)


def parse_duration(token: str) -> int:
    """Parse an age filter ("+1d", "+2w", "+3m", "+1y") into days."""
    days = _parse_offset(token)
    if days is None:
        raise InvalidDuration(token)
    return days


def format_date(value: date) -> str:
    """Canonical yyyy/mm/dd form used for storage and display."""
    return value.strftime(DATE_FORMAT)


def parse_stored_date(value: str) -> date:
    """Parse a yyyy/mm/dd date as written by format_date."""
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError):
        raise InvalidDate(str(value)) from None
