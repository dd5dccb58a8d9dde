"""CLI command for print font size to screen pixel conversion."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from sizeconv.cli.common import format_number, make_detector, screen_dpi_option
from sizeconv.core.print_size import PrintSizeConverter
from sizeconv.utils.constants import PRINT_DPI
from sizeconv.utils.validation import ValidationError


@click.command("font")
@click.argument("sizes", nargs=-1, type=float, required=True)
@click.option(
    "--print-dpi", type=float, default=PRINT_DPI, show_default=True, help="Printer resolution [dpi]."
)
@screen_dpi_option
@click.pass_context
def font(
    ctx: click.Context,
    sizes: tuple[float, ...],
    print_dpi: float,
    screen_dpi: float | None,
) -> None:
    """Convert print font SIZES [pt] to on-screen pixel sizes."""
    console: Console = ctx.obj.get("console", Console())
    detector = make_detector(screen_dpi)
    converter = PrintSizeConverter(detector)

    try:
        pixels = converter.to_screen_pixels_batch(sizes, print_dpi)
    except ValidationError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    table = Table(title="Print Size → Screen Pixels")
    table.add_column("Print [pt]", style="cyan", justify="right")
    table.add_column("Screen [px]", style="green", justify="right")
    for size, px in zip(sizes, pixels):
        table.add_row(format_number(size), f"{px:.2f}")
    table.caption = (
        f"print {format_number(print_dpi)} dpi, screen {format_number(detector.detect())} dpi"
    )
    console.print(table)
