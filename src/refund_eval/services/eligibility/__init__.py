"""Refund eligibility exports."""

from .policy import REFUND_WINDOW_HOURS, TOS_CUTOFF, is_old_tos, refund_window_hours
from .service import elapsed_hours, evaluate_record

__all__ = [
    "REFUND_WINDOW_HOURS",
    "TOS_CUTOFF",
    "elapsed_hours",
    "evaluate_record",
    "is_old_tos",
    "refund_window_hours",
]
