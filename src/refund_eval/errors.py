"""Per-record evaluation errors."""

from __future__ import annotations

from .models.domain import RecordFailure


class RecordEvaluationError(ValueError):
    """Raised when a single customer record cannot be evaluated."""

    def __init__(self, message: str, *, field: str, record_name: str | None = None) -> None:
        super().__init__(message)
        self.field = field
        self.record_name = record_name

    def for_record(self, record_name: str) -> "RecordEvaluationError":
        self.record_name = record_name
        return self

    def to_failure(self, record_name: str | None = None) -> RecordFailure:
        return RecordFailure(
            name=record_name or self.record_name or "",
            field=self.field,
            error_type=type(self).__name__,
            message=str(self),
        )


class InvalidSourceError(RecordEvaluationError):
    """Source is not one of the supported acquisition channels."""


class UnsupportedLocationError(RecordEvaluationError):
    """Location has no known date convention."""


class MalformedDateInputError(RecordEvaluationError):
    """A date or time string does not describe a valid wall-clock instant."""


class MalformedRecordError(RecordEvaluationError):
    """A record row is not an object or its name is missing."""


# Which error a missing or mistyped column in a data file row maps to.
FIELD_ERRORS: dict[str, type[RecordEvaluationError]] = {
    "Location": UnsupportedLocationError,
    "Source": InvalidSourceError,
    "SignupDate": MalformedDateInputError,
    "InvestmentDate": MalformedDateInputError,
    "InvestmentTime": MalformedDateInputError,
    "RefundDate": MalformedDateInputError,
    "RefundTime": MalformedDateInputError,
}
