from enum import IntEnum


class MeeusError(IntEnum):
    """Error kinds reported by the calendar routines."""

    UNKNOWN = -2
    FAILURE = -1
    SUCCESS = 0
    NO_MEMORY = 1
    INVALID_INPUT = 2
    INVALID_DATE = 3


ERROR_MESSAGES = {
    MeeusError.SUCCESS: "Success",
    MeeusError.FAILURE: "Failure",
    MeeusError.NO_MEMORY: "Out of memory",
    MeeusError.INVALID_INPUT: "Invalid inputs",
    MeeusError.INVALID_DATE: "Invalid date",
}


def error_message(kind: MeeusError) -> str:
    """Return a human-readable description of an error kind.

    Args:
        kind: Error kind (or its integer code)

    Returns:
        Description string; unrecognised kinds map to the unknown-error text
    """
    return ERROR_MESSAGES.get(kind, "Unknown error condition")


class CalendarError(ValueError):
    """Base class for errors raised by calendar conversions."""

    kind = MeeusError.FAILURE

    def __init__(self, message: str = ""):
        super().__init__(message or error_message(self.kind))


class InvalidDateError(CalendarError):
    """Raised when a date has no valid representation."""

    kind = MeeusError.INVALID_DATE


class InvalidInputError(CalendarError):
    """Raised when a helper receives an argument it cannot resolve."""

    kind = MeeusError.INVALID_INPUT
