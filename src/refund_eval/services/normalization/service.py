"""Normalization of raw customer records into absolute timestamps."""

from __future__ import annotations

from datetime import datetime

from ...errors import (
    InvalidSourceError,
    MalformedDateInputError,
    RecordEvaluationError,
    UnsupportedLocationError,
)
from ...models.domain import Location, NormalizedCustomerRecord, RawCustomerRecord, Source
from .base import TIME_SEPARATOR, DateParsingStrategy, split_numeric
from .dispatcher import get_strategy


def parse_location(value: str) -> Location:
    try:
        return Location(value.strip())
    except ValueError as exc:
        raise UnsupportedLocationError(f"Unsupported location '{value}'", field="Location") from exc


def parse_source(value: str) -> Source:
    """Validate a raw source string; ``web-app`` and ``web_app`` are accepted spellings."""

    normalized = value.strip().lower().replace("-", " ").replace("_", " ")
    try:
        return Source(normalized)
    except ValueError as exc:
        raise InvalidSourceError(f"Invalid source '{value}'", field="Source") from exc


def parse_timestamp(
    strategy: DateParsingStrategy,
    date_value: str,
    time_value: str | None,
    *,
    date_field: str,
    time_field: str | None = None,
) -> datetime:
    """Combine a locale date string and an optional ``HH:MM`` time into a naive datetime."""

    year, month, day = strategy.decompose(date_value, field=date_field)
    hour, minute = 0, 0
    if time_value is not None:
        hour, minute = split_numeric(time_value, TIME_SEPARATOR, 2, field=time_field or date_field)
    if not (0 <= hour < 24 and 0 <= minute < 60):
        raise MalformedDateInputError(f"'{time_value}' is not a valid time of day", field=time_field or date_field)
    try:
        return datetime(year, month, day, hour, minute)
    except (ValueError, OverflowError) as exc:
        raise MalformedDateInputError(f"'{date_value}' is not a valid date: {exc}", field=date_field) from exc


def normalize_record(record: RawCustomerRecord) -> NormalizedCustomerRecord:
    """Resolve a raw record's locale dates into a normalized record.

    Raises a :class:`RecordEvaluationError` subclass, tagged with the record
    name, when the location, source or any date/time field is unusable.
    """

    try:
        location = parse_location(record.location)
        source = parse_source(record.source)
        strategy = get_strategy(location)
        signup_at = parse_timestamp(strategy, record.signup_date, None, date_field="SignupDate")
        investment_at = parse_timestamp(
            strategy,
            record.investment_date,
            record.investment_time,
            date_field="InvestmentDate",
            time_field="InvestmentTime",
        )
        refund_at = parse_timestamp(
            strategy,
            record.refund_date,
            record.refund_time,
            date_field="RefundDate",
            time_field="RefundTime",
        )
    except RecordEvaluationError as exc:
        exc.for_record(record.name)
        raise

    return NormalizedCustomerRecord(
        name=record.name,
        location=location,
        source=source,
        signup_at=signup_at,
        investment_at=investment_at,
        refund_at=refund_at,
    )
