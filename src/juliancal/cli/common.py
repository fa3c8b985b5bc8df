"""
Command-line interface utilities for juliancal.

This module provides logging configuration and argument helpers shared by
the juliancal commands.
"""

import logging
import sys
from typing import Any, Dict

import click

from ..dates.names import parse_month
from ..errors import CalendarError
from ..logging import get_logger, set_log_level

logger = get_logger(__name__)

# Lets negative years such as -4712 through as positional arguments
NEGATIVE_ARGS = {"ignore_unknown_options": True}


def configure_logging(args: Dict[str, Any]) -> None:
    """
    Configure logging based on command line arguments.

    Args:
        args: Parsed command line flags ("quiet", "debug", "verbose")
    """
    quiet = args.get("quiet", False)
    debug = args.get("debug", False)
    verbosity = args.get("verbose", 0)

    if quiet:
        log_level = logging.ERROR
    elif debug:
        log_level = logging.DEBUG
    else:
        # 0 -> WARNING, 1 -> INFO, 2+ -> DEBUG
        if verbosity == 0:
            log_level = logging.WARNING
        elif verbosity == 1:
            log_level = logging.INFO
        else:
            log_level = logging.DEBUG

    set_log_level(log_level)
    logger.debug(
        f"Logging configured with level {logging.getLevelName(log_level)}"
    )


class MonthType(click.ParamType):
    """Click parameter accepting a month number or English month name."""

    name = "month"

    def convert(self, value: Any, param: Any, ctx: Any) -> int:
        if isinstance(value, int):
            return value
        try:
            return int(parse_month(value))
        except CalendarError as e:
            self.fail(str(e), param, ctx)


MONTH = MonthType()


def fail(error: CalendarError) -> None:
    """Report a conversion error on stderr and exit with status 1."""
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)
