"""Operation-specific Rich renderers for AppResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from formfield.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from formfield.apps.result import AppResult

_MASKED_FIELDS = frozenset({"password"})


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: AppResult, *, verbose: bool = False) -> str:
    """Render an AppResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: AppResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: AppResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="ff.ok")
    op = Text(f"  {result.op}", style="ff.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value pair."""
    k = Text(f"  {key}: ", style="ff.key")
    console.print(k, Text(str(value)), sep="", end="")
    console.print()


def _display_value(row: dict[str, Any]) -> str:
    value = row.get("value")
    if row.get("name") in _MASKED_FIELDS and value:
        return "*" * len(str(value))
    if isinstance(value, bool):
        return "yes" if value else "no"
    return str(value)


def _form_table(rows: list[dict[str, Any]], *, verbose: bool = False) -> Table:
    """Build a Rich Table with one row per form field."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Field", style="ff.label", no_wrap=True)
    table.add_column("Value")
    table.add_column("Status", no_wrap=True)
    table.add_column("Error")
    if verbose:
        table.add_column("Touched", style="dim")

    for row in rows:
        if row.get("disabled"):
            status = Text("disabled", style="ff.disabled")
        elif row.get("valid"):
            status = Text("valid", style="ff.valid")
        else:
            status = Text("invalid", style="ff.invalid")
        cells: list[Any] = [
            str(row.get("label", row.get("name", ""))),
            _display_value(row),
            status,
            Text(row.get("error") or "", style="ff.invalid"),
        ]
        if verbose:
            cells.append("yes" if row.get("touched") else "no")
        table.add_row(*cells)

    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: AppResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="ff.error")
    op = Text(f"  {result.op}", style="ff.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    rows = result.data.get("fields")
    if rows:
        console.print()
        console.print(_form_table(rows, verbose=verbose))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Form renderers ────────────────────────────────────────────────────


def _render_form(result: AppResult, console: Console, *, verbose: bool = False) -> None:
    """Render a successful form submission as a field table."""
    _status_line(console, result)
    rows = result.data.get("fields", [])
    submitted = len(result.data.get("values", {}))
    _field(console, "submitted", f"{submitted}/{len(rows)} fields")
    console.print()
    console.print(_form_table(rows, verbose=verbose))


def _render_check(result: AppResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "format", d.get("format", ""))
    _field(console, "value", repr(d.get("value", "")))


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: AppResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "signup": _render_form,
    "survey": _render_form,
    "check": _render_check,
}
