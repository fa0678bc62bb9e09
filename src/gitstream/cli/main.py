"""gitstream CLI main entry point.

This module provides the main CLI interface for gitstream.
"""

import click

from gitstream import __version__
from gitstream.config import settings
from gitstream.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="gitstream")
@click.option(
    "--log-level",
    default=None,
    help="Logging level (overrides GITSTREAM_LOG_LEVEL).",
)
@click.option(
    "--log-format",
    type=click.Choice(["json", "console"]),
    default=None,
    help="Log format on stderr (overrides GITSTREAM_LOG_FORMAT).",
)
def cli(log_level: str | None, log_format: str | None) -> None:
    """gitstream - git history as newline-delimited JSON.

    Emits one record per changed file per commit, ready for columnar
    query engines.
    """
    configure_logging(
        log_level=log_level or settings.log_level,
        log_format=log_format or settings.log_format,
    )


# Import and register subcommands
from gitstream.cli.categorize import categorize  # noqa: E402
from gitstream.cli.transform import log, transform  # noqa: E402

cli.add_command(transform)
cli.add_command(log)
cli.add_command(categorize)
