"""Identifier recognisers — canonical GUID text and IPv6 addresses.

Both are full-string matches: leading or trailing characters (including
a trailing newline) make the input invalid.
"""

from __future__ import annotations

import re
from typing import Any

GUID_PATTERN: re.Pattern[str] = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[1-5][0-9a-fA-F]{3}-[89abAB][0-9a-fA-F]{3}-[0-9a-fA-F]{12}"
)

# IPv6 grammar, one alternative per textual form.
_HEX = r"[0-9a-fA-F]{1,4}"
_OCTET = r"(?:25[0-5]|(?:2[0-4]|1?[0-9])?[0-9])"
_IPV4 = rf"(?:{_OCTET}\.){{3}}{_OCTET}"

_IPV6_FORMS = (
    rf"(?:{_HEX}:){{7}}(?:{_HEX}|:)",  # 1:2:3:4:5:6:7:8  1:2:3:4:5:6:7::
    rf"(?:{_HEX}:){{1,7}}:",  # 1::  1:2:3:4:5:6:7::
    rf"(?:{_HEX}:){{1,6}}:{_HEX}",  # 1::8  1:2:3:4:5:6::8
    rf"(?:{_HEX}:){{1,5}}(?::{_HEX}){{1,2}}",  # 1::7:8  1:2:3:4:5::7:8
    rf"(?:{_HEX}:){{1,4}}(?::{_HEX}){{1,3}}",  # 1::6:7:8
    rf"(?:{_HEX}:){{1,3}}(?::{_HEX}){{1,4}}",  # 1::5:6:7:8
    rf"(?:{_HEX}:){{1,2}}(?::{_HEX}){{1,5}}",  # 1::4:5:6:7:8
    rf"{_HEX}:(?::{_HEX}){{1,6}}",  # 1::3:4:5:6:7:8
    rf":(?:(?::{_HEX}){{1,7}}|:)",  # ::2:3:4:5:6:7:8  ::8  ::
    r"fe80:(?::[0-9a-fA-F]{0,4}){0,4}%[0-9a-zA-Z]+",  # fe80::7:8%eth0
    rf"::(?:ffff(?::0{{1,4}})?:)?{_IPV4}",  # ::255.255.255.255  ::ffff:0:1.2.3.4
    rf"(?:{_HEX}:){{1,4}}:{_IPV4}",  # 2001:db8:3:4::192.0.2.33
)

IPV6_PATTERN: re.Pattern[str] = re.compile("|".join(f"(?:{form})" for form in _IPV6_FORMS))


def is_valid_guid(text: Any) -> bool:
    """Check for the canonical 8-4-4-4-12 GUID form (versions 1-5).

    The first digit of the third group is the version nibble (1-5) and
    the first digit of the fourth group is the variant nibble (8, 9, a, b).
    """
    if not isinstance(text, str):
        return False
    return GUID_PATTERN.fullmatch(text) is not None


def is_valid_ipv6(text: Any) -> bool:
    """Check whether *text* is an IPv6 address in textual form.

    Accepts the full eight-group form, a single ``::`` compression,
    the unspecified address ``::``, link-local addresses with a zone
    index (``fe80::1%eth0``) and IPv4-mapped or embedded tails
    (``::ffff:192.0.2.1``). Seven groups without compression, nine
    groups and bare dotted IPv4 are rejected.
    """
    if not isinstance(text, str):
        return False
    return IPV6_PATTERN.fullmatch(text) is not None
