"""CLI command: fontgate run -- gate web fonts in a CSS file."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from fontgate.cli.options import config_option, family_option, read_stylesheet, resolve_config
from fontgate.stylesheet import stringify
from fontgate.transforms import FontsLoadedClassTransform, apply_transforms


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@family_option
@click.option("--class-name", default=None, help="Marker class (default: wf-loaded).")
@config_option
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the result here instead of stdout.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log each gated declaration.")
def run(
    cssfile: str,
    families: tuple[str, ...],
    class_name: str | None,
    config_path: str | None,
    output: str | None,
    verbose: bool,
) -> None:
    """Move web-font declarations in CSSFILE into rules gated by a marker class."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    config = resolve_config(config_path, families, class_name)
    if not config.families:
        click.echo("Warning: no font families configured; output is unchanged", err=True)

    root = read_stylesheet(cssfile)
    root = apply_transforms(root, [FontsLoadedClassTransform(config)])
    css = stringify(root)

    if output:
        Path(output).write_text(css, encoding="utf-8")
        click.echo(f"Wrote {output}", err=True)
    else:
        click.echo(css, nl=False)
