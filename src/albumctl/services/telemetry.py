"""Operation tracing for ValidationService methods.

``@traced`` marks a method as a named operation. Log lines emitted during
the call carry ``op=<method name>``. With ``--verbose`` the call is also
timed: a traced call made from inside another one becomes a child span,
and the outermost call returns its span tree in
``ServiceResult.meta["telemetry"]``.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from albumctl.config.logging import bound_operation
from albumctl.services.result import ServiceResult

_verbose_enabled: ContextVar[bool] = ContextVar("_verbose_enabled", default=False)
_current_span: ContextVar[Span | None] = ContextVar("_current_span", default=None)


@dataclass
class Span:
    """Timing for one operation and the operations it called."""

    name: str
    children: list[Span] = field(default_factory=list)
    start_time: float = field(default_factory=time.perf_counter)
    end_time: float | None = None
    annotations: dict[str, Any] = field(default_factory=dict)

    @property
    def duration_ms(self) -> float:
        if self.end_time is None:
            return 0.0
        return (self.end_time - self.start_time) * 1000

    def end(self) -> None:
        self.end_time = time.perf_counter()

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "name": self.name,
            "duration_ms": round(self.duration_ms, 2),
        }
        if self.annotations:
            result["annotations"] = self.annotations
        if self.children:
            result["children"] = [c.to_dict() for c in self.children]
        return result


def _log_span(span: Span) -> None:
    structlog.get_logger("albumctl.telemetry").debug(
        "span.complete",
        duration_ms=round(span.duration_ms, 2),
        children=len(span.children),
        **span.annotations,
    )


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Run *func* as an operation named after it, timed when telemetry is on."""
    op = func.__name__

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        with bound_operation(op):
            if not _verbose_enabled.get():
                return func(*args, **kwargs)

            parent = _current_span.get()
            span = Span(name=op)
            if parent is not None:
                parent.children.append(span)
            token = _current_span.set(span)
            try:
                result = func(*args, **kwargs)
            finally:
                span.end()
                _current_span.reset(token)

            if isinstance(result, ServiceResult):
                span.annotate("ok", result.ok)
            _log_span(span)
            if parent is None and isinstance(result, ServiceResult):
                meta = {**(result.meta or {}), "telemetry": span.to_dict()}
                return result.model_copy(update={"meta": meta})  # type: ignore[return-value]
            return result

    return wrapper


def enable_telemetry() -> None:
    """Turn on span timing (``--verbose``)."""
    _verbose_enabled.set(True)


def disable_telemetry() -> None:
    _verbose_enabled.set(False)
