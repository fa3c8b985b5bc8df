"""CLI entry point for juliancal."""

import click

from .julian import to_jd, from_jd
from .calendar import (
    day_of_year,
    from_day_of_year,
    days_in_month,
    weekday,
    leap,
)
from . import common as common
from ..logging import get_logger


# Create a logger for this module
logger = get_logger(__name__)


@click.group()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times: -v, -vv)",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging (equivalent to -vv)",
)
@click.option(
    "--quiet",
    is_flag=True,
    help="Suppress all logging except errors",
)
def cli(verbose: int, debug: bool, quiet: bool) -> None:
    """Julian Date and calendar conversions."""
    common.configure_logging(
        {
            "quiet": quiet,
            "debug": debug,
            "verbose": verbose,
        }
    )
    logger.debug("Debug logging enabled")


cli.add_command(to_jd)
cli.add_command(from_jd)
cli.add_command(day_of_year)
cli.add_command(from_day_of_year)
cli.add_command(days_in_month)
cli.add_command(weekday)
cli.add_command(leap)

if __name__ == "__main__":
    cli()
