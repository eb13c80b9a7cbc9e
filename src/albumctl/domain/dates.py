"""Localized (DD/MM/YYYY) date parsing with calendar validation.

The pattern only bounds digit ranges (day 1-31, month 1-12). Month
lengths and leap years are enforced by the canonicalization check: the
date is built by rolling overflowing days into the next month, then its
components are compared back against the input.
"""

from __future__ import annotations

import re
from datetime import MINYEAR, date, timedelta
from typing import Any

LOCALIZED_DATE_PATTERN: re.Pattern[str] = re.compile(
    r"(0?[1-9]|[12][0-9]|3[01])/(0?[1-9]|1[0-2])/([0-9]{4})"
)


def _rolled_date(year: int, month: int, day: int) -> date:
    """Build a date, letting days past the end of *month* spill forward.

    ``_rolled_date(2019, 2, 29)`` is 1 March 2019.
    """
    return date(year, month, 1) + timedelta(days=day - 1)


def parse_localized_date(text: Any) -> date | None:
    """Parse a ``DD/MM/YYYY`` string into a :class:`datetime.date`.

    Day and month may omit their leading zero; the year is exactly four
    digits. Returns None when the text does not match the pattern or does
    not name a real calendar day (``31/02/2020``, ``29/02/2019``).

    Examples:
        >>> parse_localized_date("25/12/2020")
        datetime.date(2020, 12, 25)
        >>> parse_localized_date("31/04/2021") is None
        True
    """
    if not isinstance(text, str):
        return None

    match = LOCALIZED_DATE_PATTERN.fullmatch(text)
    if match is None:
        return None

    day, month, year = (int(part) for part in match.groups())
    if year < MINYEAR:
        return None

    parsed = _rolled_date(year, month, day)
    if (parsed.year, parsed.month, parsed.day) != (year, month, day):
        return None
    return parsed
