"""
Date validation module for starschedules

Validates the year, month and day a schedule is requested for.
"""

import re
from dataclasses import dataclass
from datetime import date
from typing import Any

from .errors import InvalidDate


class DateValidator:
    """Validates (year, month, day) triples"""

    # Validation patterns
    YEAR_PATTERN = re.compile(r"[0-9]{4}")
    MONTH_DAY_PATTERN = re.compile(r"[0-9]{1,2}")

    @classmethod
    def validate(cls, year: Any, month: Any, day: Any) -> None:
        """
        Validate a date triple, checking year, then month, then day

        No cross-field validation is done, so February 31 is accepted.

        Raises:
            InvalidDate: naming the first offending value
        """
        if not cls._matches(cls.YEAR_PATTERN, year) or int(year) <= 0:
            raise InvalidDate("year", year)

        if not cls._matches(cls.MONTH_DAY_PATTERN, month) or not 1 <= int(month) <= 12:
            raise InvalidDate("month", month)

        if not cls._matches(cls.MONTH_DAY_PATTERN, day) or not 1 <= int(day) <= 31:
            raise InvalidDate("day", day)

    @staticmethod
    def _matches(pattern, value: Any) -> bool:
        if value is None or isinstance(value, bool):
            return False
        return bool(pattern.fullmatch(str(value)))


@dataclass(frozen=True)
class ScheduleDate:
    """A validated schedule date"""

    year: int
    month: int
    day: int

    @classmethod
    def from_values(cls, year: Any, month: Any, day: Any) -> "ScheduleDate":
        DateValidator.validate(year, month, day)
        return cls(int(year), int(month), int(day))

    @classmethod
    def today(cls) -> "ScheduleDate":
        """Current local date"""
        today = date.today()
        return cls.from_values(today.year, today.month, today.day)

    @property
    def formatted(self) -> str:
        """Date as sent to the listings form: DD_MM_YYYY"""
        return "%02d_%02d_%04d" % (self.day, self.month, self.year)

    def __str__(self) -> str:
        return "%04d-%02d-%02d" % (self.year, self.month, self.day)
