"""SizeConv command-line interface package."""

from sizeconv.cli.main import cli, main

__all__ = ["cli", "main"]
