"""Month-first date parsing used by US records."""

from __future__ import annotations

from .base import DATE_SEPARATOR, DateParsingStrategy, split_numeric


class UsDateParsing(DateParsingStrategy):
    """Read dates written as month/day/year."""

    def decompose(self, value: str, *, field: str) -> tuple[int, int, int]:
        month, day, year = split_numeric(value, DATE_SEPARATOR, 3, field=field)
        return year, month, day
