"""CLI command: fontgate inspect -- list font-family declarations."""

from __future__ import annotations

import click

from fontgate.cli.options import config_option, family_option, read_stylesheet, resolve_config
from fontgate.transforms.fonts_loaded import FONT_FAMILY, is_web_font


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@family_option
@config_option
def inspect(cssfile: str, families: tuple[str, ...], config_path: str | None) -> None:
    """List every font-family declaration in CSSFILE.

    Declarations that ``fontgate run`` would gate are marked with ``*``.
    """
    config = resolve_config(config_path, families)
    root = read_stylesheet(cssfile)

    total = 0
    gated = 0
    for rule in root.walk_rules():
        for decl in rule.declarations:
            if decl.prop != FONT_FAMILY:
                continue
            total += 1
            marker = " "
            if is_web_font(decl.value, config.families):
                gated += 1
                marker = "*"
            click.echo(f"{marker} {rule.selector}  {decl.value}")

    click.echo()
    click.echo(f"Summary: {total} font-family declaration(s), {gated} web font(s)")
