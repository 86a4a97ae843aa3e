from __future__ import annotations

from datetime import date, datetime

from .constants import DATE_FORMAT


def parse_visit_date(raw: str) -> date:
    """Parse a ``YYYY-MM-DD`` string, falling back to ``date.min`` so bad dates sort first."""
    try:
        return datetime.strptime(raw.strip(), DATE_FORMAT).date()
    except ValueError:
        return date.min


def format_visit_date(when: date) -> str:
    # isoformat keeps the zero-padded year for date.min, unlike strftime("%Y") on glibc.
    return when.isoformat()
