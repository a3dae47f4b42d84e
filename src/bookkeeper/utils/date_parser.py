"""Date parsing utilities."""

import re
from datetime import date

from dateutil.parser import isoparse

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_iso_date(value: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` string into a date object.

    Only calendar dates in extended ISO form are accepted; datetimes, basic
    form ("20240115") and impossible dates ("2024-13-01") are rejected.

    Args:
        value: Date string

    Returns:
        Date object

    Raises:
        ValueError: If the string is not a valid ISO calendar date
    """
    if not isinstance(value, str):
        raise ValueError(f"Not a date string: {value!r}")

    value = value.strip()
    if not _ISO_DATE.match(value):
        raise ValueError(f"Date must be in YYYY-MM-DD format: '{value}'")

    return isoparse(value).date()
