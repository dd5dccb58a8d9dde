"""CLI command for inspecting the detected resolution and constants."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from sizeconv.cli.common import format_number, make_detector, screen_dpi_option
from sizeconv.utils.constants import MM_PER_INCH, STANDARD_DPI


@click.command("info")
@screen_dpi_option
@click.pass_context
def info(ctx: click.Context, screen_dpi: float | None) -> None:
    """Show the current screen resolution and conversion constants."""
    console: Console = ctx.obj.get("console", Console())
    detector = make_detector(screen_dpi)
    snapshot = detector.info()
    result = detector.last_result

    table = Table(title="Resolution Info")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_column("Unit", style="dim")

    source = "measured" if result is not None and result.detected else "default"
    table.add_row("Current Resolution", format_number(snapshot["current"]), "dpi")
    table.add_row("Source", source, "—")
    if result is not None and result.reason:
        table.add_row("Detection Failure", result.reason, "—")
    table.add_row("Default Print Resolution", format_number(snapshot["default_print"]), "dpi")
    table.add_row("Points per Inch", format_number(snapshot["points_per_inch"]), "pt/in")
    table.add_row("Millimeters per Inch", format_number(MM_PER_INCH), "mm/in")
    for name, dpi in STANDARD_DPI.items():
        table.add_row(f"Standard ({name})", format_number(dpi), "dpi")
    console.print(table)
