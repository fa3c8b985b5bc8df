from .names import (
    Month,
    Weekday,
    short_month_name,
    month_name,
    weekday_name,
    parse_month,
)
from .rules import (
    is_leap_year,
    days_in_month,
    is_pre_gregorian_transition,
    is_missing_gregorian_date,
)
from .day_of_year import MonthDay, cal_to_day_of_year, day_of_year_to_cal
from .julian_calc import CalendarDate, cal_to_julian_date, julian_date_to_cal
from .weekday import day_of_week, day_of_week_jd

__all__ = [
    "Month",
    "Weekday",
    "short_month_name",
    "month_name",
    "weekday_name",
    "parse_month",
    "is_leap_year",
    "days_in_month",
    "is_pre_gregorian_transition",
    "is_missing_gregorian_date",
    "MonthDay",
    "cal_to_day_of_year",
    "day_of_year_to_cal",
    "CalendarDate",
    "cal_to_julian_date",
    "julian_date_to_cal",
    "day_of_week",
    "day_of_week_jd",
]
