"""Human/JSON/quiet rendering of a ServiceResult.

Human output goes through a Rich console; ``--json`` dumps the result
model; ``--quiet`` prints only the status line.
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.text import Text

from crateguard.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from crateguard.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags taken from the CLI."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return _status_text(result)

    console = create_console()
    if result.ok:
        _render_ok(result, console, verbose=settings.verbose)
    else:
        _render_error(result, console, verbose=settings.verbose)
    return get_output(console).rstrip("\n")


def _status_text(result: ServiceResult) -> str:
    if result.ok:
        return f"OK: {result.op}"
    msg = result.error.message if result.error else "Unknown error"
    return f"ERROR: {result.op} — {msg}"


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="cg.key")
    if key == "id" or key.endswith("_id") or key == "version":
        v = Text(str(value), style="cg.id")
    elif key == "name":
        v = Text(str(value), style="cg.name")
    elif isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_ok(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    console.print(Text("OK", style="cg.ok"), Text(f"  {result.op}", style="cg.op"), sep="")
    for key, value in result.data.items():
        # The full canonical payload is noise unless asked for.
        if key == "payload" and not verbose:
            continue
        _field(console, key, value)
    if verbose and result.meta:
        console.print(Text("  meta:", style="dim"))
        for k, v in result.meta.items():
            console.print(Text(f"    {k}: {v}"))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="cg.error"),
        Text(f"  {result.op}", style="cg.op"),
        Text(f" — {msg}"),
        sep="",
    )
    if err is None:
        return
    location = err.detail.get("location")
    if location:
        console.print(
            Text("  at: ", style="cg.key"), Text(str(location), style="cg.location"), sep=""
        )
    console.print(Text("  code: ", style="cg.key"), Text(err.code), sep="")
    if verbose and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))
