# calgrid/errors.py
from __future__ import annotations


class CalgridError(Exception):
    """Base class for calgrid failures at the I/O boundary."""


class CalendarFileError(CalgridError):
    """Raised when a calendar file cannot be opened or read."""


class CalendarValidationError(CalgridError, ValueError):
    """Raised when calendar text is not JSON or does not describe a list of events."""


__all__ = [
    "CalgridError",
    "CalendarFileError",
    "CalendarValidationError",
]
