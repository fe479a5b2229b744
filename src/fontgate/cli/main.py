"""fontgate CLI entry point: Click group with subcommands."""

import click

from fontgate import __version__


@click.group()
@click.version_option(version=__version__, prog_name="fontgate")
def cli() -> None:
    """fontgate - gate web-font declarations behind a fonts-loaded class."""


# Import and register subcommands
from fontgate.cli.run import run  # noqa: E402
from fontgate.cli.inspect import inspect  # noqa: E402

cli.add_command(run)
cli.add_command(inspect)
