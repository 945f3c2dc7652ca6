"""Factory for date parsing strategies based on record location."""

from __future__ import annotations

from ...models.domain import Location
from .base import DateParsingStrategy
from .europe import EuropeDateParsing
from .us import UsDateParsing


def get_strategy(location: Location) -> DateParsingStrategy:
    match location:
        case Location.US:
            return UsDateParsing()
        case Location.EUROPE:
            return EuropeDateParsing()
        case _:
            raise ValueError(f"No date parsing strategy for location '{location}'.")
