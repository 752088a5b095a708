"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from tzchain.output.console import create_console, get_output, style_for_offset

if TYPE_CHECKING:
    from rich.console import Console

    from tzchain.services.result import ServiceResult


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
    """Bare value output for ``--quiet``, suitable for shell substitution."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if result.op in ("diff", "diff_multi"):
        return str(data["diff"])
    if result.op == "offset":
        return str(data["offset"])
    if result.op == "project":
        return str(data["instant"])
    if result.op == "default_zone":
        return data["zone"] or "floating"
    if result.op == "list_zones":
        return "\n".join(item["id"] for item in data["items"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    line = Text("OK", style="tz.ok")
    line.append(f"  {result.op}", style="tz.op")
    console.print(line)


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    if isinstance(value, (dict, list)):
        value = _json.dumps(value, separators=(",", ":"))
    if not style and (key == "zone" or key.startswith("zone_") or key == "viewing_zone"):
        style = "tz.zone"
    line = Text(f"  {key}: ", style="tz.key")
    line.append(str(value), style=style)
    console.print(line)


def _unit(data: dict[str, Any]) -> str:
    return "h" if data.get("format") == "hours" else "s"


def _relation(value: int) -> str:
    if value > 0:
        return "ahead of"
    if value < 0:
        return "behind"
    return "level with"


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    code = f" [{err.code}]" if err else ""
    line = Text("ERROR", style="tz.error")
    line.append(f"  {result.op}{code}", style="tz.op")
    line.append(f" — {msg}")
    console.print(line)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_default_zone(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    zone = result.data.get("zone")
    if zone:
        _field(console, "zone", zone)
    else:
        _field(console, "zone", "(floating — no default zone configured)", style="tz.even")


def _render_offset(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "zone", data["zone"])
    _field(console, "at", data["at"])
    value = data["offset"]
    _field(console, "offset", f"{value}{_unit(data)}", style=style_for_offset(value))
    _field(console, "label", data["label"])


def _render_diff(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    value = data["diff"]
    _status_line(console, result)
    sentence = Text("  ")
    sentence.append(data["zone_a"], style="tz.zone")
    sentence.append(f" is {_relation(value)} ")
    sentence.append(data["zone_b"], style="tz.zone")
    console.print(sentence)
    _field(console, "diff", f"{value}{_unit(data)}", style=style_for_offset(value))
    _field(console, "at", data["at"])
    if verbose:
        _field(console, "label", data["label"])


def _render_diff_multi(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    value = data["diff"]
    _status_line(console, result)

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("#", justify="right", style="dim")
    table.add_column("Zone", style="tz.zone")
    for index, zone in enumerate(data["zones"], start=1):
        table.add_row(str(index), zone)
    console.print(table)

    _field(console, "direction", data["direction"])
    _field(console, "diff", f"{value}{_unit(data)}", style=style_for_offset(value))
    _field(console, "at", data["at"])


def _render_project(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "text", data["text"])
    _field(console, "zone", data["zone"])
    if data.get("viewing_zone"):
        _field(console, "viewing_zone", data["viewing_zone"])
    _field(console, "instant", data["instant"])
    _field(console, "timestamp", data["timestamp"])


def _render_list_zones(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for item in result.data["items"]:
        console.print(Text(f"  {item['id']}", style="tz.zone"))
    _field(console, "count", result.data["count"])


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "default_zone": _render_default_zone,
    "offset": _render_offset,
    "diff": _render_diff,
    "diff_multi": _render_diff_multi,
    "project": _render_project,
    "list_zones": _render_list_zones,
}
