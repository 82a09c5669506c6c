"""Operation-specific Rich renderers for ServiceResult.

Renderers write to a StringIO-backed Console and are dispatched by
``result.op`` in :func:`render_result`. Unknown ops fall back to a
generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from graphedit.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from graphedit.services.result import ServiceResult


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
    """Minimal output for ``--quiet``: IDs for listings, a status line otherwise."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if result.op == "show":
        return "\n".join(str(n["id"]) for n in data.get("nodes", []))
    if result.op == "path":
        return " ".join(str(s["id"]) for s in data.get("steps", []))
    if "id" in data:
        return str(data["id"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _fmt_number(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="ge.ok"), Text(f"  {result.op}", style="ge.op"))


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="ge.key")
    if key == "id" or key.endswith("_id"):
        v = Text(str(value), style="ge.id")
    elif key == "label":
        v = Text(str(value), style="ge.label")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block, including the telemetry span tree."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_span(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    line = f"{' ' * indent}{span.get('duration_ms', 0.0):>8.2f}ms  {span.get('name', '?')}"
    annotations = span.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line, style="dim")
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)


def _warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text("  warning: ", style="ge.warning"), Text(warning), sep="")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="ge.error"),
        Text(f"  {result.op}", style="ge.op"),
        Text(" — "),
        Text(msg),
        sep="",
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_show(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the node and edge collections as two tables."""
    nodes = result.data.get("nodes", [])
    edges = result.data.get("edges", [])

    node_table = Table(title="Nodes", show_header=True, pad_edge=False, expand=False)
    node_table.add_column("ID", style="ge.id", no_wrap=True)
    node_table.add_column("Label", style="ge.label")
    node_table.add_column("X", justify="right")
    node_table.add_column("Y", justify="right")
    if verbose:
        node_table.add_column("Type", style="dim")
    for node in nodes:
        row = [str(node["id"]), str(node["label"]), _fmt_number(node["x"]), _fmt_number(node["y"])]
        if verbose:
            row.append(str(node.get("type", "")))
        node_table.add_row(*row)
    console.print(node_table)

    if edges:
        edge_table = Table(title="Edges", show_header=True, pad_edge=False, expand=False)
        edge_table.add_column("ID", style="ge.id", no_wrap=True)
        edge_table.add_column("Source")
        edge_table.add_column("Target")
        edge_table.add_column("Weight", style="ge.weight", justify="right")
        for edge in edges:
            edge_table.add_row(
                str(edge["id"]),
                str(edge["source"]),
                str(edge["target"]),
                _fmt_number(edge.get("weight")),
            )
        console.print(edge_table)

    console.print(f"\n{len(nodes)} nodes, {len(edges)} edges")
    if verbose:
        _render_meta(console, result)


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("id", "label", "source", "target", "x", "y"):
        if key in result.data:
            _field(console, key, result.data[key])
    if "position" in result.data:
        pos = result.data["position"]
        _field(console, "position", f"({_fmt_number(pos['x'])}, {_fmt_number(pos['y'])})")
    if "weight" in result.data:
        _field(console, "weight", _fmt_number(result.data["weight"]))
    _warnings(console, result)
    if verbose:
        _render_meta(console, result)


def _render_search(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    match = result.data.get("match")
    if match is None:
        console.print("Search cleared.")
        return
    console.print(
        Text("Found ", style="ge.ok"),
        Text(str(match["id"]), style="ge.id"),
        Text(f" ({match['label']})"),
        sep="",
    )
    if verbose:
        _render_meta(console, result)


def _render_path(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a shortest path as a chain plus its total weight."""
    steps = result.data.get("steps", [])
    chain = Text()
    for i, step in enumerate(steps):
        if i:
            chain.append(" → ")
        chain.append(str(step["id"]), style="ge.id")
        chain.append(f" ({step['label']})")
    console.print(chain)
    console.print(f"\nDistance: {_fmt_number(result.data.get('distance'))}")
    console.print(f"Hops: {result.data.get('length', 0)}")
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line plus all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            value = json.dumps(value, separators=(",", ":"))
        _field(console, key, value)
    _warnings(console, result)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "show": _render_show,
    "add_node": _render_mutation,
    "move_node": _render_mutation,
    "connect": _render_mutation,
    "set_edge_weight": _render_mutation,
    "search": _render_search,
    "path": _render_path,
}
