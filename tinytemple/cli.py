"""Command-line interface for TinyTemple.

This module defines the ``tinytemple`` command using the Click framework.
It renders every template in the source directory and copies static files
into the output directory, reporting the elapsed time on success.
"""

from __future__ import annotations

from pathlib import Path

import click

from . import __version__
from .build import (
    DEFAULT_OUTPUT_DIR,
    DEFAULT_SOURCE_DIR,
    DEFAULT_STATIC_DIR,
    build_site,
)
from .config import DEFAULT_CONFIG_PATH
from .errors import FatalError
from .log import setup_logger
from .templates import DEFAULT_TEMPLATE_EXTENSION
from .utils import format_elapsed

_PATH = click.Path(path_type=Path)


@click.command()
@click.version_option(version=__version__, prog_name="tinytemple")
@click.option(
    "--sourcedir",
    type=_PATH,
    default=DEFAULT_SOURCE_DIR,
    show_default=True,
    help="Source directory for template files and content files.",
)
@click.option(
    "--staticdir",
    type=_PATH,
    default=DEFAULT_STATIC_DIR,
    show_default=True,
    help="Source directory for files which will be copied verbatim into the output.",
)
@click.option(
    "--outdir",
    type=_PATH,
    default=DEFAULT_OUTPUT_DIR,
    show_default=True,
    help="Output directory for rendered HTML.",
)
@click.option(
    "--config",
    "config_path",
    type=_PATH,
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="TOML (or YAML) configuration file.",
)
@click.option(
    "--template-ext",
    default=DEFAULT_TEMPLATE_EXTENSION,
    show_default=True,
    help="Extension identifying template files.",
)
@click.option("--strict", is_flag=True, help="Fail templates that use undefined variables")
@click.option("-v", "--verbose", is_flag=True, help="Log every written and copied file")
def cli(
    sourcedir: Path,
    staticdir: Path,
    outdir: Path,
    config_path: Path,
    template_ext: str,
    strict: bool,
    verbose: bool,
):
    """Render templates from TOML and Markdown source."""
    setup_logger(verbose)
    try:
        result = build_site(
            source_dir=sourcedir,
            static_dir=staticdir,
            output_dir=outdir,
            config_path=config_path,
            template_extension=template_ext,
            strict=strict,
        )
    except FatalError:
        click.echo(
            click.style("A fatal error has occurred.", fg="red", bold=True), err=True
        )
        raise SystemExit(1) from None
    click.echo(f"Finished. ({format_elapsed(result.elapsed)})")


def main():
    """Entry point for the CLI application."""
    cli()
