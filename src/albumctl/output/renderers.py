"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`; every
ValidationService op has an entry in ``_OP_RENDERERS``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from albumctl.output.console import create_console, get_output, style_for_validity

if TYPE_CHECKING:
    from rich.console import Console

    from albumctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS[result.op]
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="album.ok")
    op = Text(f"  {result.op}", style="album.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}:", style="album.key")
    if key == "valid":
        v = Text(str(value), style=style_for_validity(bool(value)))
    elif key == "value":
        v = Text(repr(value) if isinstance(value, str) else str(value), style="album.value")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(console: Console, span: dict[str, Any], *, indent: int) -> None:
    pad = " " * indent
    console.print(f"{pad}{span['name']}  {span['duration_ms']}ms")
    for child in span.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 2)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="album.error")
    op = Text(f"  {result.op}", style="album.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")
    if verbose:
        _render_meta(console, result)


# ── Op renderers ──────────────────────────────────────────────────────


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render single-value checks (title, artist, year, guid, ipv6, date)."""
    _status_line(console, result)
    for key in ("value", "date", "valid"):
        if key in result.data and result.data[key] is not None:
            _field(console, key, result.data[key])
    if verbose:
        _render_meta(console, result)


def _render_album(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render an album record as a field/value table."""
    _status_line(console, result)
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Field", style="album.key")
    table.add_column("Value", style="album.value")
    table.add_column("Valid")
    invalid = set(result.data.get("invalid_fields", []))
    for key in ("title", "artist", "year"):
        ok = key not in invalid
        table.add_row(
            key,
            str(result.data.get(key)),
            Text("yes" if ok else "no", style=style_for_validity(ok)),
        )
    console.print(table)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "check_title": _render_check,
    "check_artist": _render_check,
    "check_year": _render_check,
    "parse_date": _render_check,
    "check_guid": _render_check,
    "check_ipv6": _render_check,
    "validate_album": _render_album,
}
