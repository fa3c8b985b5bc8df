"""Calendar rules shared by the Julian and Gregorian calendars.

Years are astronomical (1 BC is year 0). Dates before 15 Oct 1582 follow
the Julian calendar, later dates the Gregorian calendar.
"""

from ..errors import InvalidDateError
from ..logging import get_logger
from .names import Month

logger = get_logger(__name__)

# First year whose leap rule is Gregorian
GREGORIAN_REFORM_YEAR = 1582

# 15 Oct 1582 is the first Gregorian day
GREGORIAN_START_MONTH = Month.OCT
GREGORIAN_START_DAY = 15

# 5 Oct 1582 .. 14 Oct 1582 were skipped by the reform
MISSING_DAYS_FIRST = 5
MISSING_DAYS_LAST = 14

DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_julian_leap_year(year: int) -> bool:
    return year % 4 == 0


def is_gregorian_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def is_leap_year(year: int) -> bool:
    """Return True if year is a leap year.

    Years before 1582 use the Julian rule; 1582 and later use the
    Gregorian rule (1582 as a whole counts as Gregorian here).

    Args:
        year: Astronomical year

    Returns:
        True for leap years
    """
    if year < GREGORIAN_REFORM_YEAR:
        return is_julian_leap_year(year)
    return is_gregorian_leap_year(year)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a calendar month.

    Args:
        year: Astronomical year
        month: Month index (1-12)

    Returns:
        Number of days (28-31)

    Raises:
        InvalidDateError: If month is outside 1-12
    """
    if month < Month.JAN or month > Month.DEC:
        logger.debug(f"Rejecting month {month} for year {year}")
        raise InvalidDateError(f"Month index out of range: {month}")

    days = DAYS_IN_MONTH[month - 1]
    if month == Month.FEB and is_leap_year(year):
        days += 1
    return days


def is_pre_gregorian_transition(year: int, month: int, day: float) -> bool:
    """Return True if the date falls before 15 Oct 1582.

    Within 1582 the comparison is made on day-of-year positions, so the
    month may also be one of the shifted values 13 or 14 used by the
    Julian Date algorithm.
    """
    if year > GREGORIAN_REFORM_YEAR:
        return False
    if year < GREGORIAN_REFORM_YEAR:
        return True

    # imported here, day_of_year depends on this module for the leap rule
    from .day_of_year import cal_to_day_of_year

    reform_doy = cal_to_day_of_year(
        GREGORIAN_REFORM_YEAR, GREGORIAN_START_MONTH, GREGORIAN_START_DAY
    )
    return cal_to_day_of_year(year, month, day) < reform_doy


def is_missing_gregorian_date(year: int, month: int, day: float) -> bool:
    """Return True for dates in [5 Oct 1582, 14 Oct 1582].

    These dates were dropped in the switch from the Julian to the Gregorian
    calendar and have no Julian Date.
    """
    return (
        year == GREGORIAN_REFORM_YEAR
        and month == Month.OCT
        and MISSING_DAYS_FIRST <= day <= MISSING_DAYS_LAST
    )
