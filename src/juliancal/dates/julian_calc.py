"""Julian date calculation module.

This module provides functions for converting between calendar dates and Julian
dates using the Meeus algorithm from "Astronomical Algorithms" (2nd ed., ch. 7).
Dates before 15 Oct 1582 are read as proleptic Julian calendar dates, later ones
as Gregorian. Years use astronomical numbering (1 BC = 0, 100 BC = -99).
"""

import math
from typing import NamedTuple

from ..errors import InvalidDateError
from ..logging import get_logger
from .rules import is_missing_gregorian_date, is_pre_gregorian_transition

logger = get_logger(__name__)

# Earliest year with a non-negative Julian Date (JD 0 is noon, 1 Jan 4713 BC)
MIN_YEAR = -4712

# Julian Day Number of 15 Oct 1582 (Gregorian), the first Gregorian day
GREGORIAN_START_JDN = 2299161


class CalendarDate(NamedTuple):
    year: int
    month: int
    day: float


def _gregorian_correction(year: int) -> int:
    """Century correction B for a Gregorian (March-based) year."""
    a = math.floor(year / 100)
    return 2 - a + math.floor(a / 4)


def cal_to_julian_date(year: int, month: int, day: float) -> float:
    """Convert a calendar date to a Julian Date.

    The fractional part of day is the elapsed fraction of the calendar day, so
    day 1.5 is noon on the 1st.

    Args:
        year: Astronomical year (>= -4712)
        month: Month (1-12)
        day: Day of month, may be fractional

    Returns:
        Julian Date (JD)

    Raises:
        InvalidDateError: If the date precedes JD 0 or falls in 5-14 Oct 1582
    """
    if year < MIN_YEAR:
        logger.debug(f"Rejecting year {year}, before {MIN_YEAR}")
        raise InvalidDateError(f"Year {year} is before the Julian Date epoch")
    if is_missing_gregorian_date(year, month, day):
        logger.debug(f"Rejecting skipped date {year}-{month}-{day}")
        raise InvalidDateError(
            f"{year}-{month:02d}-{day} falls in the Julian to Gregorian transition gap"
        )

    # Jan & Feb are months 13 & 14 of the previous year
    y, m = year, month
    if m < 3:
        y -= 1
        m += 12

    if is_pre_gregorian_transition(y, m, day):
        b = 0
    else:
        b = _gregorian_correction(y)

    # Meeus eq. 7.1
    return (
        math.floor(365.25 * (y + 4716))
        + math.floor(30.6001 * (m + 1))
        + day
        + b
        - 1524.5
    )


def julian_date_to_cal(jd: float) -> CalendarDate:
    """Convert a Julian Date to a calendar date.

    Implementation based on Meeus, p. 63. The JD is not validated; results for
    negative values are not meaningful.

    Args:
        jd: Julian Date

    Returns:
        CalendarDate with a fractional day
    """
    jd = jd + 0.5
    z = int(jd)
    f = jd - z

    if z < GREGORIAN_START_JDN:
        a = z
    else:
        alpha = math.floor((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - math.floor(alpha / 4)

    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)

    day = b - d - math.floor(30.6001 * e) + f
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715

    return CalendarDate(year, month, day)
