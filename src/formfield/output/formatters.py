"""Output mode selection for AppResult.

The CLI renders AppResult for humans (Rich tables and colors) or
machines (--json). ``--quiet`` reduces human output to a single line.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from formfield.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from formfield.apps.result import AppResult


@dataclass(frozen=True)
class OutputSettings:
    """Output flags taken from the root CLI group."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: AppResult, *, settings: OutputSettings | None = None) -> str:
    """Format an AppResult for display.

    JSON wins over quiet; quiet wins over the Rich renderer.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
