"""Date parsing utilities."""
import re
from datetime import date, datetime
from typing import Optional

_MONTH_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def parse_date(s: str) -> date:
    """
    Parse a date string into a date object.

    Supports:
    - Calendar date: "2024-01-02"
    - ISO timestamp with "Z" suffix: "2024-01-02T09:10:00Z"
    - ISO timestamp with offset: "2024-01-02T09:10:00+07:00"
    - Space-separated: "2024-01-02 09:10:00"

    Timestamps are reduced to their calendar date as written, without
    converting between time zones.

    Raises:
        ValueError: If the string cannot be parsed
    """
    if not s or not s.strip():
        raise ValueError("Empty date string")

    s = s.strip()

    try:
        return date.fromisoformat(s)
    except ValueError:
        pass

    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    if " " in s and "T" not in s:
        s = s.replace(" ", "T")

    try:
        return datetime.fromisoformat(s).date()
    except ValueError:
        raise ValueError(f"Unable to parse date: {s}. Expected ISO format (e.g. '2024-01-02')")


def format_date(d: date) -> str:
    """Format a date the way the backend expects it (YYYY-MM-DD)."""
    return d.strftime("%Y-%m-%d")


def current_month(today: Optional[date] = None) -> str:
    """Return the month of `today` (default: now) as YYYY-MM."""
    return (today or date.today()).strftime("%Y-%m")


def is_valid_month(month: str) -> bool:
    """Check a YYYY-MM month string."""
    return bool(month) and _MONTH_RE.match(month) is not None
