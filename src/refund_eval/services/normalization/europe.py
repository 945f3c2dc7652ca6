"""Day-first date parsing used by European records."""

from __future__ import annotations

from .base import DATE_SEPARATOR, DateParsingStrategy, split_numeric


class EuropeDateParsing(DateParsingStrategy):
    """Read dates written as day/month/year."""

    def decompose(self, value: str, *, field: str) -> tuple[int, int, int]:
        day, month, year = split_numeric(value, DATE_SEPARATOR, 3, field=field)
        return year, month, day
