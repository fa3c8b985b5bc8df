"""CLI commands for calendar arithmetic."""

import click

from ..dates.day_of_year import cal_to_day_of_year, day_of_year_to_cal
from ..dates.names import month_name, weekday_name
from ..dates.rules import days_in_month as _days_in_month
from ..dates.rules import is_leap_year
from ..dates.weekday import day_of_week
from ..errors import CalendarError
from .common import MONTH, NEGATIVE_ARGS, fail


@click.command("day-of-year", context_settings=NEGATIVE_ARGS)
@click.argument("year", type=int)
@click.argument("month", type=MONTH)
@click.argument("day", type=float)
def day_of_year(year: int, month: int, day: float) -> None:
    """Print the day-of-year index of a date."""
    click.echo(cal_to_day_of_year(year, month, day))


@click.command("from-day-of-year", context_settings=NEGATIVE_ARGS)
@click.argument("year", type=int)
@click.argument("doy", type=int)
def from_day_of_year(year: int, doy: int) -> None:
    """Print the month and day for a day-of-year index."""
    try:
        result = day_of_year_to_cal(year, doy)
    except CalendarError as e:
        fail(e)
    click.echo(f"{month_name(result.month)} {result.day}")


@click.command("days-in-month", context_settings=NEGATIVE_ARGS)
@click.argument("year", type=int)
@click.argument("month", type=MONTH)
def days_in_month(year: int, month: int) -> None:
    """Print the number of days in a month."""
    try:
        click.echo(_days_in_month(year, month))
    except CalendarError as e:
        fail(e)


@click.command("weekday", context_settings=NEGATIVE_ARGS)
@click.argument("year", type=int)
@click.argument("month", type=MONTH)
@click.argument("day", type=float)
def weekday(year: int, month: int, day: float) -> None:
    """Print the day of the week of a date."""
    try:
        click.echo(weekday_name(day_of_week(year, month, day)))
    except CalendarError as e:
        fail(e)


@click.command("leap", context_settings=NEGATIVE_ARGS)
@click.argument("year", type=int)
def leap(year: int) -> None:
    """Print whether YEAR is a leap year."""
    click.echo("leap" if is_leap_year(year) else "common")
