"""SizeConv command-line interface.

Entry point for the ``sizeconv`` CLI tool.
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from sizeconv import __app_name__, __version__

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name=__app_name__)
@click.option("--verbose", "-v", is_flag=True, help="Show debug log output.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """SizeConv: millimeter / point / pixel conversion.

    Converts sizes at an explicit resolution, or at the resolution
    detected for the current display.
    """
    ctx.ensure_object(dict)
    ctx.obj["console"] = console
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


# Import and register sub-commands
from sizeconv.cli.convert_cmd import convert  # noqa: E402
from sizeconv.cli.font_cmd import font  # noqa: E402
from sizeconv.cli.info_cmd import info  # noqa: E402

cli.add_command(convert)
cli.add_command(font)
cli.add_command(info)


def main() -> None:
    """Convenience wrapper for entry-point scripts."""
    cli()
