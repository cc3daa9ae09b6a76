"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich output) or machines
(--json). The formatter layer adapts ServiceResult to the requested
output mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from wikinote.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from wikinote.services.result import ServiceResult

# Ops whose human output is a single raw data field.
_RAW_OUTPUT_FIELDS: dict[str, str] = {
    "render_note": "html",
}


class OutputSettings(BaseModel):
    """Output mode flags taken from the CLI settings."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON mode dumps the whole result; quiet mode prints bare identifiers;
    otherwise Rich renders a human-readable view. Successful render
    results print their HTML unchanged in every non-JSON mode.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)

    raw_field = _RAW_OUTPUT_FIELDS.get(result.op)
    if result.ok and raw_field and raw_field in result.data:
        return str(result.data[raw_field]).rstrip("\n")

    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
