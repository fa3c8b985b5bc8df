"""Month and weekday names (English)."""

from enum import IntEnum
from typing import Union

from ..errors import InvalidInputError


class Month(IntEnum):
    JAN = 1
    FEB = 2
    MAR = 3
    APR = 4
    MAY = 5
    JUN = 6
    JUL = 7
    AUG = 8
    SEP = 9
    OCT = 10
    NOV = 11
    DEC = 12


class Weekday(IntEnum):
    SUN = 0
    MON = 1
    TUE = 2
    WED = 3
    THU = 4
    FRI = 5
    SAT = 6


MONTH_NAMES_3LETTER = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

MONTH_NAMES = (
    "January", "February", "March",
    "April", "May", "June",
    "July", "August", "September",
    "October", "November", "December",
)

WEEKDAY_NAMES = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)

UNKNOWN_MONTH = "UNK"


def short_month_name(month: int) -> str:
    """Return the three-letter abbreviation for a month (1 -> "Jan").

    Out-of-range indexes give "UNK" rather than an error.
    """
    if month < Month.JAN or month > Month.DEC:
        return UNKNOWN_MONTH
    return MONTH_NAMES_3LETTER[month - 1]


def month_name(month: int) -> str:
    """Return the full English name of a month.

    Args:
        month: Month index (1-12)

    Returns:
        Month name, e.g. "October"

    Raises:
        InvalidInputError: If month is outside 1-12
    """
    if month < Month.JAN or month > Month.DEC:
        raise InvalidInputError(f"Month index out of range: {month}")
    return MONTH_NAMES[month - 1]


def weekday_name(weekday: int) -> str:
    """Return the full English name of a weekday (0 -> "Sunday")."""
    if weekday < Weekday.SUN or weekday > Weekday.SAT:
        raise InvalidInputError(f"Weekday index out of range: {weekday}")
    return WEEKDAY_NAMES[weekday]


def parse_month(value: Union[str, int]) -> Month:
    """Parse a month given as a number, abbreviation or full name.

    Args:
        value: e.g. 10, "10", "oct" or "October"

    Returns:
        Month enum member

    Raises:
        InvalidInputError: If the value does not name a month
    """
    text = str(value).strip()
    if text.isdigit():
        number = int(text)
        if Month.JAN <= number <= Month.DEC:
            return Month(number)
        raise InvalidInputError(f"Month index out of range: {number}")

    lowered = text.lower()
    for index, (short, full) in enumerate(zip(MONTH_NAMES_3LETTER, MONTH_NAMES)):
        if lowered in (short.lower(), full.lower()):
            return Month(index + 1)
    raise InvalidInputError(f"Unrecognized month: {value!r}")
