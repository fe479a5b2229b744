"""Options and config resolution shared by the CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from fontgate.config import ConfigError, FontsLoadedConfig, load_config
from fontgate.stylesheet import ParseError, Root, parse_css

family_option = click.option(
    "-f",
    "--family",
    "families",
    multiple=True,
    help="Font family to treat as a web font (repeatable).",
)
config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help='JSON options file, e.g. {"families": ["MyWebFont"], "className": "wf-loaded"}.',
)


def resolve_config(
    config_path: str | None, families: tuple[str, ...], class_name: str | None = None
) -> FontsLoadedConfig:
    """Load *config_path* (if any) and layer command-line options on top."""
    try:
        config = load_config(config_path) if config_path else FontsLoadedConfig()
    except ConfigError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(1)
    return config.merged(families=families, class_name=class_name)


def read_stylesheet(cssfile: str) -> Root:
    """Parse *cssfile*, exiting with status 1 if it is not readable CSS."""
    try:
        return parse_css(Path(cssfile).read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        click.echo(f"Parse error: {cssfile} is not valid UTF-8 ({exc.reason})", err=True)
        sys.exit(1)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
