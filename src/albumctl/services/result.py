"""ServiceResult and ServiceError — the contract between services and the CLI.

INVARIANT: Every ValidationService method returns ServiceResult.
The CLI renders it; invalid input is ``ok=False``, never an exception.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the input passed validation.
        op: Name of the operation (e.g. ``"check_title"``).
        data: Operation payload, present on success and failure.
        warnings: Non-fatal observations about the input.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry spans).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
