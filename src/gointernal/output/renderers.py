"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a StringIO-backed Rich Console; the caller gets
the text back from :func:`render_result`. Renderers are dispatched by
``result.op`` and unknown ops fall through to a key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from gointernal.output.console import create_console, get_output, style_for_severity

if TYPE_CHECKING:
    from rich.console import Console

    from gointernal.services.result import ServiceResult


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

    Checks print one ``path:line:column`` per violation and nothing when
    clean; explain prints ``allowed``/``denied``.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "check":
        return "\n".join(
            f"{i['path']}:{i['line']}:{i['column']}" for i in result.data.get("issues", [])
        )
    if result.op == "explain":
        return "allowed" if result.data.get("allowed") else "denied"

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item.get("id", "")) for item in items if isinstance(item, dict))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "gi.ok"), (f"  {result.op}", "gi.op")))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    console.print(Text.assemble((f"  {key}: ", "gi.key"), str(value)))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block, including the telemetry span tree."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        if key == "telemetry":
            _render_telemetry_tree(console, value, indent=4)
        else:
            console.print(Text(f"    {key}: {value}"))


def _render_telemetry_tree(console: Console, span: dict[str, Any], indent: int = 4) -> None:
    """Render a span tree with color-coded timing."""
    duration = span.get("duration_ms", 0.0)
    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = Text(" " * indent)
    line.append(f"{duration:>8.2f}ms", style=style)
    line.append(f"  {span.get('name', '?')}")
    annotations = span.get("annotations") or {}
    if annotations:
        line.append("  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")")
    console.print(line)

    for child in span.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(Text.assemble(("ERROR", "gi.error"), (f"  {result.op}", "gi.op"), " — ", msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for key, value in err.detail.items():
            console.print(Text(f"    {key}: {value}"))


# ── Check renderer ────────────────────────────────────────────────────


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render violations grouped by file, eslint-style."""
    d = result.data
    issues: list[dict[str, Any]] = d.get("issues", [])
    files = d.get("files_checked", 0)
    imports = d.get("imports_checked", 0)

    if not issues:
        console.print(
            Text.assemble(
                ("OK", "gi.ok"),
                f"  No boundary violations in {files} files ({imports} imports).",
            )
        )
        if verbose:
            _render_meta(console, result)
        return

    by_path: dict[str, list[dict[str, Any]]] = {}
    for issue in issues:
        by_path.setdefault(str(issue.get("path", "?")), []).append(issue)

    for path, path_issues in by_path.items():
        console.print(Text(path, style="gi.path"))
        for issue in path_issues:
            severity = str(issue.get("severity", "error"))
            line = Text("  ")
            line.append(f"{issue.get('line', 0)}:{issue.get('column', 0)}", style="gi.position")
            line.append("  ")
            line.append(severity, style=style_for_severity(severity))
            line.append(f"  {issue.get('message', '')}  ")
            line.append(str(issue.get("specifier", "")), style="gi.specifier")
            console.print(line)
            if verbose:
                detail = Text("      ")
                detail.append(str(issue.get("reason", "")), style="gi.reason")
                detail.append(f"  -> {issue.get('target', '')}")
                console.print(detail)
        console.print()

    errors = d.get("error_count", 0)
    warnings = d.get("warning_count", 0)
    console.print(f"{errors} errors, {warnings} warnings in {files} files ({imports} imports)")
    if verbose:
        _render_meta(console, result)


# ── Explain renderer ──────────────────────────────────────────────────


def _render_explain(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a single decision with its intermediate values."""
    d = result.data
    if d.get("allowed"):
        console.print(Text.assemble(("ALLOWED", "gi.ok"), "  ", (str(d["reason"]), "gi.reason")))
    else:
        console.print(
            Text.assemble(("DENIED", "gi.error"), "  ", (str(d["reason"]), "gi.reason"))
        )
        _field(console, "message", d.get("message", ""))

    for key in ("importer", "importer_dir", "specifier", "target", "internal_dir", "module_root"):
        if d.get(key) is not None:
            _field(console, key, d[key])
    if verbose:
        _field(console, "internal_name", d.get("internal_name"))
        _field(console, "max_submodule_depth", d.get("max_submodule_depth"))
        _render_meta(console, result)


# ── Plugin list renderer ──────────────────────────────────────────────


def _render_plugins(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Plugin")
    for item in items:
        table.add_row(str(item.get("id", "")))
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} plugins")


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "check": _render_check,
    "explain": _render_explain,
    "list_plugins": _render_plugins,
}
