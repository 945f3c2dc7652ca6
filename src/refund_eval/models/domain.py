"""Domain models for customer refund records."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Location(str, Enum):
    """Locale that decides how a record's dates are written."""

    US = "US"
    EUROPE = "Europe"


class Source(str, Enum):
    """Channel the customer was acquired through."""

    PHONE = "phone"
    WEB_APP = "web app"


@dataclass(frozen=True, slots=True)
class RawCustomerRecord:
    """A customer record as supplied, with locale-dependent date strings."""

    name: str
    location: str
    signup_date: str
    source: str
    investment_date: str
    investment_time: str
    refund_date: str
    refund_time: str


@dataclass(frozen=True, slots=True)
class NormalizedCustomerRecord:
    """A customer record with absolute wall-clock timestamps."""

    name: str
    location: Location
    source: Source
    signup_at: datetime
    investment_at: datetime
    refund_at: datetime


@dataclass(frozen=True, slots=True)
class EvaluationResult:
    """Outcome of applying the refund policy to a normalized record."""

    record: NormalizedCustomerRecord
    elapsed_hours: float
    refund_window_hours: int
    is_old_tos: bool
    is_eligible: bool

    @property
    def name(self) -> str:
        return self.record.name


@dataclass(frozen=True, slots=True)
class RecordFailure:
    """A record that was left out of the results, and why."""

    name: str
    field: str
    error_type: str
    message: str


@dataclass(frozen=True, slots=True)
class CustomerDataset:
    """Rows loaded from a customer file; rows that could not be read are kept as failures."""

    records: tuple[RawCustomerRecord, ...]
    failures: tuple[RecordFailure, ...] = ()
