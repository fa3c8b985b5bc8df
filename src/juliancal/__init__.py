"""Calendar date and Julian Date conversions (Meeus, Astronomical Algorithms, ch. 7)."""

from .errors import (
    MeeusError,
    CalendarError,
    InvalidDateError,
    InvalidInputError,
    error_message,
)
from .dates import (
    Month,
    Weekday,
    short_month_name,
    month_name,
    weekday_name,
    is_leap_year,
    days_in_month,
    MonthDay,
    cal_to_day_of_year,
    day_of_year_to_cal,
    CalendarDate,
    cal_to_julian_date,
    julian_date_to_cal,
    day_of_week,
)

__all__ = [
    "MeeusError",
    "CalendarError",
    "InvalidDateError",
    "InvalidInputError",
    "error_message",
    "Month",
    "Weekday",
    "short_month_name",
    "month_name",
    "weekday_name",
    "is_leap_year",
    "days_in_month",
    "MonthDay",
    "cal_to_day_of_year",
    "day_of_year_to_cal",
    "CalendarDate",
    "cal_to_julian_date",
    "julian_date_to_cal",
    "day_of_week",
]
