"""Refund eligibility evaluation."""

from __future__ import annotations

from datetime import datetime

from ...models.domain import EvaluationResult, NormalizedCustomerRecord
from .policy import TOS_CUTOFF, is_old_tos, refund_window_hours

SECONDS_PER_HOUR = 3600


def elapsed_hours(investment_at: datetime, refund_at: datetime) -> float:
    """Hours from investment to refund; negative when the refund comes first."""

    return (refund_at - investment_at).total_seconds() / SECONDS_PER_HOUR


def evaluate_record(record: NormalizedCustomerRecord, *, cutoff: datetime = TOS_CUTOFF) -> EvaluationResult:
    hours = elapsed_hours(record.investment_at, record.refund_at)
    window = refund_window_hours(record.source, record.signup_at, cutoff)
    return EvaluationResult(
        record=record,
        elapsed_hours=hours,
        refund_window_hours=window,
        is_old_tos=is_old_tos(record.signup_at, cutoff),
        is_eligible=hours <= window,
    )
