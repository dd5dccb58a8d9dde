"""Helpers shared by the CLI commands."""

from __future__ import annotations

import click

from sizeconv.core.resolution import ResolutionDetector, default_detector, fixed_probe

screen_dpi_option = click.option(
    "--screen-dpi",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Screen resolution [dpi]; detected when omitted.",
)


def make_detector(screen_dpi: float | None) -> ResolutionDetector:
    """Return a detector pinned to *screen_dpi*, or the default detector."""
    if screen_dpi is None:
        return default_detector
    return ResolutionDetector(probe=fixed_probe(screen_dpi))


def format_number(value: float) -> str:
    if isinstance(value, int):
        return str(value)
    return f"{value:.6g}"
