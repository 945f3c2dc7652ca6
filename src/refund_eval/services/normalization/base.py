"""Base classes for locale date parsing strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ...errors import MalformedDateInputError

DATE_SEPARATOR = "/"
TIME_SEPARATOR = ":"


def split_numeric(value: str, separator: str, parts: int, *, field: str) -> tuple[int, ...]:
    """Split ``value`` into exactly ``parts`` integer components."""

    pieces = value.strip().split(separator)
    if len(pieces) != parts:
        raise MalformedDateInputError(
            f"Expected {parts} '{separator}'-separated components in '{value}'",
            field=field,
        )
    if not all(piece.isascii() and piece.isdigit() for piece in pieces):
        raise MalformedDateInputError(f"Non-numeric component in '{value}'", field=field)
    return tuple(int(piece) for piece in pieces)


class DateParsingStrategy(ABC):
    """Contract for turning a locale date string into (year, month, day)."""

    @abstractmethod
    def decompose(self, value: str, *, field: str) -> tuple[int, int, int]:
        raise NotImplementedError
