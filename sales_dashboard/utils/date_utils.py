"""Date manipulation utilities"""

import calendar
from datetime import date, datetime
from typing import Optional

from sales_dashboard.domain.exceptions import InvalidQueryError

# "january" -> 1, "jan" -> 1, ...
_MONTH_LOOKUP = {name.lower(): i for i, name in enumerate(calendar.month_name) if name}
_MONTH_LOOKUP.update({abbr.lower(): i for i, abbr in enumerate(calendar.month_abbr) if abbr})


def parse_month(value: Optional[str]) -> Optional[int]:
    """
    Parse a month query value.

    Accepts a number 1-12 or an English month name/abbreviation in any case.
    Missing or blank input means "all months" and returns None.

    Raises:
        InvalidQueryError: Value is not a recognizable month
    """
    if value is None or not value.strip():
        return None

    text = value.strip()
    if text.isascii() and text.isdigit():
        month = int(text)
        validate_month(month)
        return month

    month = _MONTH_LOOKUP.get(text.lower())
    if month is None:
        raise InvalidQueryError(f"Unrecognized month: {text!r}")
    return month


def validate_month(month: Optional[int]) -> None:
    """Raise InvalidQueryError unless month is None or 1-12"""
    if month is not None and not 1 <= month <= 12:
        raise InvalidQueryError(f"month must be between 1 and 12, got {month}")


def parse_sale_date(value: str) -> date:
    """
    Parse a dateOfSale value into a calendar date.

    Timestamps keep the offset they carry, so "2021-11-27T20:29:54+05:30"
    is a sale on 2021-11-27. Plain ISO dates are accepted as-is.
    """
    if "T" not in value and len(value) == 10:
        return date.fromisoformat(value)
    # Python < 3.11 does not accept the "Z" suffix
    return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
