"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer. Note content
is always wrapped in :class:`~rich.text.Text` so ``[[wikilinks]]`` are
never read as Rich markup.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from wikinote.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from wikinote.services.result import ServiceResult


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

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    notes = result.data.get("notes")
    if isinstance(notes, list):
        return "\n".join(str(note.get("path", "")) for note in notes)
    if "title" in result.data:
        return str(result.data["title"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    console.print(Text("OK", style="wn.ok"), Text(f"  {result.op}", style="wn.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="wn.key")
    if key == "path":
        v = Text(str(value), style="wn.path")
    elif key == "title":
        v = Text(str(value), style="wn.title")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _link_text(link: dict[str, Any]) -> str:
    label = link.get("label")
    return f"[[{link['target']}|{label}]]" if label else f"[[{link['target']}]]"


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="wn.error")
    op = Text(f"  {result.op}", style="wn.op")
    console.print(label, op, Text(" — "), Text(msg), sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Note renderers ────────────────────────────────────────────────────


def _render_note(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render parse_note results as a panel."""
    d = result.data
    body = Text()
    body.append("path: ", style="wn.key")
    body.append(str(d.get("path", "")), style="wn.path")

    tags = d.get("tags", [])
    if tags:
        body.append("\ntags: ", style="wn.key")
        body.append(", ".join(f"#{tag}" for tag in tags), style="wn.tag")

    links = d.get("links", [])
    if links:
        body.append("\nlinks: ", style="wn.key")
        body.append(", ".join(_link_text(link) for link in links), style="wn.link")

    for key, value in d.get("metadata", {}).items():
        body.append(f"\n{key}: ", style="wn.key")
        body.append(_json.dumps(value, ensure_ascii=False) if isinstance(value, list) else str(value))

    content = d.get("content", "")
    if verbose and content:
        body.append("\n\n")
        body.append(content.strip())

    title = Text(str(d.get("title", "Untitled")), style="wn.title")
    console.print(Panel(body, title=title, border_style="dim", expand=False))


def _render_tree(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render parse_tree results as a table of notes."""
    notes = result.data.get("notes", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Title", style="wn.title")
    table.add_column("Tags", justify="right")
    table.add_column("Links", justify="right")
    if verbose:
        table.add_column("Path", style="wn.path")

    for note in notes:
        row = [
            Text(str(note.get("title", ""))),
            str(len(note.get("tags", []))),
            str(len(note.get("links", []))),
        ]
        if verbose:
            row.append(Text(str(note.get("path", ""))))
        table.add_row(*row)

    console.print(table)
    console.print(f"\n{result.data.get('count', len(notes))} notes")

    for err in result.data.get("errors", []):
        console.print(
            Text("  error", style="wn.error"),
            Text(f" {err.get('path')}: {err.get('error')}"),
            sep="",
        )


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":"), ensure_ascii=False))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "parse_note": _render_note,
    "parse_tree": _render_tree,
}
