"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table
from rich.text import Text

from needful.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from needful.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
        if result.op == "lint_contract" and result.data:
            _render_lint(result, console, verbose=verbose)

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
    label = Text("OK", style="needful.ok")
    op = Text(f"  {result.op}", style="needful.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="needful.key")
    if key == "type":
        v = Text(str(value), style="needful.type")
    elif isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":"), default=str))
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="needful.error")
    op = Text(f"  {result.op}", style="needful.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Contract renderers ────────────────────────────────────────────────


def _render_describe(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a resolved contract as a parameter table."""
    d = result.data
    _status_line(console, result)
    _field(console, "type", d.get("type", "?"))

    if not d.get("has_contract"):
        console.print("  accepts any parameters (no contract declared)")
        return
    if d.get("no_parameters"):
        console.print("  accepts no parameters")
        return

    defaults = d.get("defaults", {})
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Parameter", style="needful.name", no_wrap=True)
    table.add_column("Required")
    table.add_column("Default")
    for name in d.get("accepted", []):
        if name in defaults:
            table.add_row(name, "no", Text(repr(defaults[name]), style="needful.default"))
        else:
            table.add_row(name, Text("yes", style="needful.required"), "")
    console.print(table)

    if verbose:
        console.print(Text("  chain:", style="dim"))
        for entry in d.get("chain", []):
            declared = "(no parameters)" if entry.get("no_parameters") else ""
            names = ", ".join(entry.get("declared", []))
            console.print(Text(f"    {entry.get('type')}: {names}{declared}"))


def _render_construct(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the reconciled parameters of a successful construction."""
    d = result.data
    _status_line(console, result)
    _field(console, "type", d.get("type", "?"))
    defaulted = set(d.get("defaulted", []))
    for name, value in d.get("parameters", {}).items():
        suffix = " (default)" if name in defaulted else ""
        console.print(Text(f"  {name} = {value!r}{suffix}"))


def _render_lint(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render lint issues grouped by category."""
    issues = result.data.get("issues", [])
    count = result.data.get("count", len(issues))

    if count == 0:
        console.print("[needful.ok]OK[/needful.ok]  No issues found.")
        return

    severity_styles = {"error": "needful.error", "warning": "needful.warning"}

    by_category: dict[str, list[dict[str, Any]]] = {}
    for issue in issues:
        cat = str(issue.get("category", "unknown"))
        by_category.setdefault(cat, []).append(issue)

    for cat, cat_issues in by_category.items():
        console.print(f"\n[bold]{cat}[/bold]")
        for issue in cat_issues:
            sev = str(issue.get("severity", "warning"))
            style = severity_styles.get(sev, "")
            prefix = f"[{style}]{sev}[/{style}]" if style else sev
            owner = escape(f"[{issue.get('type', '?')}]")
            console.print(f"  {prefix} {owner}: {escape(str(issue.get('message', '')))}")

    errors = result.data.get("error_count", 0)
    warnings = result.data.get("warning_count", count - errors)
    console.print(f"\n{errors} errors, {warnings} warnings")


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "describe_contract": _render_describe,
    "construct": _render_construct,
    "lint_contract": _render_lint,
}
