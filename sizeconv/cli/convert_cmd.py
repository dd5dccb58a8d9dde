"""CLI command for size conversion between mm, pt, px and other lengths."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from sizeconv.cli.common import format_number
from sizeconv.core.converter import SizeConverter
from sizeconv.utils.constants import MILLIMETER, SIZE_UNITS
from sizeconv.utils.units import length_from_mm, length_to_mm
from sizeconv.utils.validation import ValidationError


@click.command("convert")
@click.argument("values", nargs=-1, type=float, required=True)
@click.option(
    "--from",
    "from_unit",
    required=True,
    help="Source unit: mm, pt, px or any length unit (cm, inch, ...).",
)
@click.option(
    "--to",
    "to_unit",
    required=True,
    help="Target unit: mm, pt, px or any length unit (cm, inch, ...).",
)
@click.option("--dpi", type=float, default=None, help="Resolution [dpi]; detected when omitted.")
@click.option("--direct", is_flag=True, help="Keep fractional pixels instead of rounding up.")
@click.pass_context
def convert(
    ctx: click.Context,
    values: tuple[float, ...],
    from_unit: str,
    to_unit: str,
    dpi: float | None,
    direct: bool,
) -> None:
    """Convert VALUES from one size unit to another."""
    console: Console = ctx.obj.get("console", Console())
    converter = SizeConverter()

    # Lengths other than mm/pt/px travel through millimeters
    src = from_unit if from_unit in SIZE_UNITS else MILLIMETER
    dst = to_unit if to_unit in SIZE_UNITS else MILLIMETER

    try:
        inputs = [v if from_unit in SIZE_UNITS else length_to_mm(v, from_unit) for v in values]
        results = [converter.convert(v, src, dst, dpi, direct=direct) for v in inputs]
        if to_unit not in SIZE_UNITS:
            results = [length_from_mm(r, to_unit) for r in results]
    except ValidationError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    table = Table(title="Size Conversion")
    table.add_column(from_unit, style="cyan", justify="right")
    table.add_column(to_unit, style="green", justify="right")
    for value, result in zip(values, results):
        table.add_row(format_number(value), format_number(result))

    if "px" in (src, dst):
        used = dpi if dpi is not None else converter.resolve_resolution()
        table.caption = f"at {format_number(used)} dpi"
    console.print(table)
