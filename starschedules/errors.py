"""
starschedules.errors - Error types

Every failure raised by the library derives from ScheduleError so callers
can catch the whole family in one place.
"""

from typing import Any


class ScheduleError(Exception):
    """Base class for all starschedules errors"""


class InvalidArgument(ScheduleError, TypeError):
    """Constructor input is not a mapping"""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"Input param has to be a mapping, got {type(value).__name__}"
        )


class InvalidConfiguration(ScheduleError, ValueError):
    """Constructor mapping does not hold exactly three keys"""

    def __init__(self, keys):
        self.keys = sorted(str(key) for key in keys)
        super().__init__(
            f"Invalid number of keys found in the input mapping: {self.keys}"
        )


class InvalidDate(ScheduleError, ValueError):
    """One of year, month or day failed validation"""

    def __init__(self, field: str, value: Any):
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field} [{value}]")


class UndefinedChannel(ScheduleError, ValueError):
    """No channel key was given"""

    def __init__(self):
        super().__init__("Channel undefined")


class UnknownChannel(ScheduleError, ValueError):
    """Channel key is not in the registry"""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Invalid channel [{key}]")


class TransportError(ScheduleError):
    """HTTP request failed or returned a non-success status"""

    def __init__(self, url: str, reason: str = ""):
        self.url = url
        self.reason = reason
        message = f"Couldn't connect to [{url}]"
        if reason:
            message += f": {reason}"
        super().__init__(message)
