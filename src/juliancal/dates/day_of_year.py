"""Day-of-year conversions (Meeus, Astronomical Algorithms, ch. 7, pp. 65-66)."""

import math
from typing import NamedTuple

from ..errors import InvalidDateError
from ..logging import get_logger
from .rules import is_leap_year

logger = get_logger(__name__)


class MonthDay(NamedTuple):
    month: int
    day: int


def _leap_factor(year: int) -> int:
    return 1 if is_leap_year(year) else 2


def cal_to_day_of_year(year: int, month: int, day: float) -> int:
    """Return the day-of-year index of a calendar date.

    The result lies in [1, 365] ([1, 366] for leap years) for real calendar
    dates. Inputs are not range-checked, so a fractional day is truncated
    and out-of-range months extrapolate past December.

    Args:
        year: Astronomical year
        month: Month index
        day: Day of month, may be fractional

    Returns:
        Day of year
    """
    k = _leap_factor(year)
    return int((275 * month) // 9 - k * ((month + 9) // 12) + day - 30)


def day_of_year_to_cal(year: int, day_of_year: int) -> MonthDay:
    """Return the calendar month and day for a day-of-year index.

    Inverse of cal_to_day_of_year().

    Args:
        year: Astronomical year the index refers to
        day_of_year: Day of year in [1, 365] (leap: [1, 366])

    Returns:
        MonthDay(month, day)

    Raises:
        InvalidDateError: If day_of_year is outside the year
    """
    leap = is_leap_year(year)
    last_day = 366 if leap else 365
    if day_of_year < 1 or day_of_year > last_day:
        logger.debug(f"Rejecting day of year {day_of_year} for year {year}")
        raise InvalidDateError(
            f"Day of year {day_of_year} is outside [1, {last_day}] for year {year}"
        )

    k = 1 if leap else 2
    if day_of_year < 32:
        month = 1
    else:
        month = math.floor(9 * (k + day_of_year) / 275 + 0.98)

    day = day_of_year - (275 * month) // 9 + k * ((month + 9) // 12) + 30
    return MonthDay(month, day)
