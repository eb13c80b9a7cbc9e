"""Album record field rules — title, artist name, release year.

Every check is total: any Python object may be passed and the answer is
a plain bool. Invalid input never raises.
"""

from __future__ import annotations

import math
from datetime import date
from typing import Any

TITLE_MAX_LENGTH = 100
ARTIST_MAX_LENGTH = 50
MIN_RELEASE_YEAR = 1900

# Characters that make a title or name blank when nothing else is present.
# Narrower than str.strip(): the C0 separators \x1c-\x1f and NEL (\x85)
# are text here, while the byte order mark \ufeff is whitespace.
BLANK_CHARS = (
    "\t\n\v\f\r \xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005"
    "\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def _is_bounded_text(value: Any, max_length: int) -> bool:
    """Non-blank ``str`` whose untrimmed length is at most *max_length*."""
    if not isinstance(value, str):
        return False
    return bool(value.strip(BLANK_CHARS)) and len(value) <= max_length


def is_valid_album_title(title: Any, *, max_length: int = TITLE_MAX_LENGTH) -> bool:
    """Check that *title* is a non-blank string of at most 100 characters.

    Whitespace-only titles are rejected, but surrounding whitespace still
    counts toward the length cap. See ``BLANK_CHARS`` for what counts as
    whitespace.

    Examples:
        >>> is_valid_album_title("Abbey Road")
        True
        >>> is_valid_album_title("   ")
        False
    """
    return _is_bounded_text(title, max_length)


def is_valid_artist_name(name: Any, *, max_length: int = ARTIST_MAX_LENGTH) -> bool:
    """Check that *name* is a non-blank string of at most 50 characters."""
    return _is_bounded_text(name, max_length)


def is_valid_release_year(
    year: Any,
    *,
    today: date | None = None,
    min_year: int = MIN_RELEASE_YEAR,
) -> bool:
    """Check that *year* is a whole number between 1900 and the current year.

    The upper bound is read from the wall clock on every call, so a year
    that is rejected today becomes valid once the calendar catches up.
    Pass *today* to pin the clock.

    Floats are accepted only when they carry no fractional part
    (``2020.0`` is fine, ``2020.5``, NaN and infinities are not).
    Booleans and numeric strings are rejected.
    """
    if isinstance(year, bool):
        return False
    if isinstance(year, float):
        if not math.isfinite(year) or not year.is_integer():
            return False
    elif not isinstance(year, int):
        return False

    current_year = (today or date.today()).year
    return min_year <= year <= current_year
