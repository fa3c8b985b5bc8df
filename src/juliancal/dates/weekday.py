import math

from .julian_calc import cal_to_julian_date
from .names import Weekday


def day_of_week_jd(jd: float) -> Weekday:
    """Return the weekday of the civil day (midnight to midnight) containing jd."""
    # floor and Python's % keep the code in [0, 6] for JD < 0
    return Weekday((math.floor(jd + 0.5) + 1) % 7)


def day_of_week(year: int, month: int, day: float) -> Weekday:
    """Return the day of the week for a calendar date.

    Any time of day carried by a fractional day is ignored.

    Raises:
        InvalidDateError: If the date has no Julian Date
    """
    jd = cal_to_julian_date(year, month, int(day))
    return day_of_week_jd(jd)
