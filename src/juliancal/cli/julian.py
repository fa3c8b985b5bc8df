"""CLI commands for converting between calendar dates and Julian Dates."""

import json

import click

from ..dates.julian_calc import cal_to_julian_date, julian_date_to_cal
from ..dates.names import short_month_name
from ..errors import CalendarError
from ..logging import get_logger
from .common import MONTH, NEGATIVE_ARGS, fail

logger = get_logger(__name__)

OUTPUT_FORMATS = ["text", "json"]


@click.command("to-jd", context_settings=NEGATIVE_ARGS)
@click.argument("year", type=int)
@click.argument("month", type=MONTH)
@click.argument("day", type=float)
@click.option(
    "--format",
    type=click.Choice(OUTPUT_FORMATS),
    default="text",
    help="Output format. Defaults to 'text'.",
)
def to_jd(year: int, month: int, day: float, format: str) -> None:
    """Convert a calendar date to a Julian Date.

    YEAR uses astronomical numbering (1 BC is 0). DAY may be fractional,
    e.g. 1.5 for noon.

    Examples:

        juliancal to-jd 2000 1 1.5

        juliancal to-jd -1000 feb 29
    """
    logger.debug(f"Converting {year}-{month}-{day} to Julian Date")
    try:
        jd = cal_to_julian_date(year, month, day)
    except CalendarError as e:
        fail(e)

    if format == "json":
        click.echo(
            json.dumps({"year": year, "month": month, "day": day, "julian_date": jd})
        )
    else:
        click.echo(f"{jd:.6f}")


@click.command("from-jd", context_settings=NEGATIVE_ARGS)
@click.argument("jd", type=float)
@click.option(
    "--format",
    type=click.Choice(OUTPUT_FORMATS),
    default="text",
    help="Output format. Defaults to 'text'.",
)
def from_jd(jd: float, format: str) -> None:
    """Convert a Julian Date to a calendar date."""
    logger.debug(f"Converting Julian Date {jd} to calendar date")
    date = julian_date_to_cal(jd)

    if format == "json":
        click.echo(json.dumps({"julian_date": jd, **date._asdict()}))
    else:
        click.echo(f"{date.year} {short_month_name(date.month)} {date.day:.6f}")
