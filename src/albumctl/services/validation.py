"""ValidationService — album field checks wrapped in ServiceResult.

Each method runs one domain validator and reports the outcome as a
ServiceResult so the CLI (or any other front end) can render it and
pick an exit status. ``validate_album`` is the record gate used before
an album is accepted into the catalog: it checks every field and
reports all failures at once.
"""

from __future__ import annotations

import logging
import re
from datetime import date
from typing import Any

from albumctl.config.models import LimitsConfig
from albumctl.domain.album import (
    BLANK_CHARS,
    is_valid_album_title,
    is_valid_artist_name,
    is_valid_release_year,
)
from albumctl.domain.dates import parse_localized_date
from albumctl.domain.identifiers import is_valid_guid, is_valid_ipv6
from albumctl.services.result import ServiceError, ServiceResult
from albumctl.services.telemetry import traced

logger = logging.getLogger(__name__)

# Plain ASCII decimals, optionally signed, with an optional fraction.
_NUMERIC_TEXT = re.compile(r"[+-]?[0-9]+(?:\.[0-9]+)?")


def _coerce_year(year: Any) -> Any:
    """Turn CLI text into a number; anything else passes through untouched."""
    if not isinstance(year, str):
        return year
    text = year.strip()
    if _NUMERIC_TEXT.fullmatch(text) is None:
        return year
    return float(text) if "." in text else int(text)


def _invalid(op: str, code: str, message: str, data: dict[str, Any]) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        data=data,
        error=ServiceError(code=code, message=message, detail={"value": data.get("value")}),
    )


class ValidationService:
    """Run album catalog validators against configured limits.

    Usage::

        svc = ValidationService(settings.limits)
        result = svc.check_title("Abbey Road")
        assert result.ok
    """

    def __init__(self, limits: LimitsConfig | None = None, *, today: date | None = None) -> None:
        self._limits = limits or LimitsConfig()
        self._today = today

    @traced
    def check_title(self, title: Any) -> ServiceResult:
        """Validate an album title."""
        op = "check_title"
        data: dict[str, Any] = {"value": title}
        if not is_valid_album_title(title, max_length=self._limits.title_max_length):
            data["valid"] = False
            logger.debug("Rejected album title: %r", title)
            return _invalid(
                op,
                "INVALID_TITLE",
                f"Title must be non-blank and at most {self._limits.title_max_length} characters",
                data,
            )
        data["valid"] = True
        warnings: list[str] = []
        if title != title.strip(BLANK_CHARS):
            warnings.append("Title has leading or trailing whitespace")
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    @traced
    def check_artist(self, name: Any) -> ServiceResult:
        """Validate an artist name."""
        op = "check_artist"
        data: dict[str, Any] = {"value": name}
        if not is_valid_artist_name(name, max_length=self._limits.artist_max_length):
            data["valid"] = False
            logger.debug("Rejected artist name: %r", name)
            return _invalid(
                op,
                "INVALID_ARTIST",
                f"Artist name must be non-blank and at most "
                f"{self._limits.artist_max_length} characters",
                data,
            )
        data["valid"] = True
        warnings: list[str] = []
        if name != name.strip(BLANK_CHARS):
            warnings.append("Artist name has leading or trailing whitespace")
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    @traced
    def check_year(self, year: Any) -> ServiceResult:
        """Validate a release year. Numeric text (from the CLI) is accepted."""
        op = "check_year"
        data: dict[str, Any] = {"value": year}
        valid = is_valid_release_year(
            _coerce_year(year),
            today=self._today,
            min_year=self._limits.min_release_year,
        )
        data["valid"] = valid
        if not valid:
            current_year = (self._today or date.today()).year
            logger.debug("Rejected release year: %r", year)
            return _invalid(
                op,
                "INVALID_YEAR",
                f"Release year must be a whole number between "
                f"{self._limits.min_release_year} and {current_year}",
                data,
            )
        return ServiceResult(ok=True, op=op, data=data)

    @traced
    def parse_date(self, text: Any) -> ServiceResult:
        """Parse a DD/MM/YYYY date; the ISO form is returned in ``data["date"]``."""
        op = "parse_date"
        parsed = parse_localized_date(text)
        data: dict[str, Any] = {
            "value": text,
            "valid": parsed is not None,
            "date": parsed.isoformat() if parsed else None,
        }
        if parsed is None:
            logger.debug("Rejected date: %r", text)
            return _invalid(
                op,
                "INVALID_DATE",
                "Date must be a real calendar day written as DD/MM/YYYY",
                data,
            )
        return ServiceResult(ok=True, op=op, data=data)

    @traced
    def check_guid(self, text: Any) -> ServiceResult:
        """Validate canonical GUID text."""
        op = "check_guid"
        valid = is_valid_guid(text)
        data: dict[str, Any] = {"value": text, "valid": valid}
        if not valid:
            return _invalid(op, "INVALID_GUID", "Not a canonical version 1-5 GUID", data)
        return ServiceResult(ok=True, op=op, data=data)

    @traced
    def check_ipv6(self, text: Any) -> ServiceResult:
        """Validate an IPv6 address."""
        op = "check_ipv6"
        valid = is_valid_ipv6(text)
        data: dict[str, Any] = {"value": text, "valid": valid}
        if not valid:
            return _invalid(op, "INVALID_IPV6", "Not a valid IPv6 address", data)
        return ServiceResult(ok=True, op=op, data=data)

    @traced
    def validate_album(self, *, title: Any, artist: Any, year: Any) -> ServiceResult:
        """Check every field of an album record and report all failures."""
        op = "validate_album"
        checks = (
            ("title", self.check_title, title),
            ("artist", self.check_artist, artist),
            ("year", self.check_year, year),
        )
        invalid_fields: list[str] = []
        messages: list[str] = []
        warnings: list[str] = []
        for field_name, check, value in checks:
            result = check(value)
            warnings.extend(result.warnings)
            if not result.ok:
                invalid_fields.append(field_name)
                if result.error:
                    messages.append(result.error.message)

        data: dict[str, Any] = {
            "title": title,
            "artist": artist,
            "year": year,
            "valid": not invalid_fields,
            "invalid_fields": invalid_fields,
        }
        if invalid_fields:
            logger.debug("Album record rejected: %s", ", ".join(invalid_fields))
            return ServiceResult(
                ok=False,
                op=op,
                data=data,
                warnings=warnings,
                error=ServiceError(
                    code="VALIDATION_FAILED",
                    message="; ".join(messages),
                    detail={"invalid_fields": invalid_fields},
                ),
            )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)
