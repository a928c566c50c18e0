"""Command-line interface for huffcodec using Click command groups."""

from __future__ import annotations

from typing import NoReturn
import logging

import click
from huffcodec import __version__
from huffcodec.config import Config, LOG_LEVELS


@click.group()
@click.version_option(version=__version__)
@click.option(
    "log_level",
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=Config.DEFAULT_LOG_LEVEL,
    show_default=True,
    help="Logging verbosity",
)
def cli(log_level: str) -> None:
    """huffcodec: encode and decode text with a prefix codebook."""
    logging.basicConfig(level=log_level.upper(), format=Config.LOG_FORMAT)


# Register subcommands
from huffcodec.commands.encode import encode  # noqa: E402
from huffcodec.commands.decode import decode  # noqa: E402
from huffcodec.commands.inspect import inspect  # noqa: E402

cli.add_command(encode)
cli.add_command(decode)
cli.add_command(inspect)


def main() -> NoReturn:
    """Entry point for the CLI."""
    cli()
