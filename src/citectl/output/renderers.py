"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers
are dispatched by ``result.op`` in :func:`render_result`; unknown ops
fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from citectl.output.console import create_console, get_output, style_for_severity
from citectl.output.lines import render_citation_payload

if TYPE_CHECKING:
    from rich.console import Console

    from citectl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    ``evaluate`` prints only the citation lines (possibly nothing).
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"

    if result.op == "evaluate":
        return "\n".join(render_citation_payload(c) for c in result.data.get("citations", []))

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item.get("name", "")) for item in items if isinstance(item, dict))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "cite.ok"), (f"  {result.op}", "cite.op")))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    style = "cite.name" if key in ("issuer", "citee", "name") else ""
    console.print(Text.assemble((f"  {key}: ", "cite.key"), (str(value), style)))


def _citation_table(citations: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Law", no_wrap=True)
    table.add_column("Severity")
    table.add_column("Location")
    table.add_column("Date", style="dim")
    for c in citations:
        severity = str(c.get("severity", ""))
        table.add_row(
            str(c.get("law", "")),
            Text(severity, style=style_for_severity(severity)),
            str(c.get("location", "")),
            str(c.get("date", "")),
        )
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "cite.error"), (f"  {result.op}", "cite.op"), f" - {msg}")
    )

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_evaluate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Status line, then one sentence per citation."""
    d = result.data
    citations: list[dict[str, Any]] = d.get("citations", [])
    _status_line(console, result)

    if verbose:
        _field(console, "issuer", d.get("issuer", ""))
        _field(console, "citee", d.get("citee", {}).get("name", ""))
        incident = d.get("incident", {})
        _field(
            console,
            "incident",
            f"{incident.get('incident_speed')} in a {incident.get('speed_limit')} "
            f"at {incident.get('location') or '(unknown)'}",
        )
        _field(console, "date", d.get("date", ""))

    if not citations:
        console.print(Text("  No citations issued.", style="dim"))
        return

    for c in citations:
        style = style_for_severity(c.get("severity", ""))
        console.print(Text(render_citation_payload(c), style=style))

    if verbose:
        console.print()
        console.print(_citation_table(citations))


def _render_laws(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    items: list[dict[str, Any]] = result.data.get("items", [])
    if not items:
        console.print(Text("  No laws enabled.", style="dim"))
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Law", style="cite.name", no_wrap=True)
    table.add_column("Class")
    if verbose:
        table.add_column("Parameters", style="dim")
    for idx, item in enumerate(items, start=1):
        row = [str(idx), str(item.get("name", "")), str(item.get("class", ""))]
        if verbose:
            params = {k: v for k, v in item.items() if k not in ("name", "class")}
            row.append(", ".join(f"{k}={v}" for k, v in params.items()))
        table.add_row(*row)
    console.print(table)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    "evaluate": _render_evaluate,
    "list_laws": _render_laws,
}
