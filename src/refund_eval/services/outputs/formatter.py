"""Utilities to render evaluation results as display rows and CSV."""

from __future__ import annotations

import csv
import io
import math
from datetime import datetime
from typing import Sequence

from ...config import settings
from ...models.domain import EvaluationResult

DISPLAY_COLUMNS = [
    "Name",
    "Location",
    "Signup Date",
    "Source",
    "Investment Date",
    "Refund Date",
    "Refund Hours",
    "Refund Period",
    "TOS",
    "Request Status",
]


def format_timestamp(value: datetime, fmt: str | None = None) -> str:
    return value.strftime(fmt or settings.display_datetime_format)


def whole_hours(elapsed_hours: float) -> int:
    """Truncate toward zero, so 7h59m shows as 7 and -0.5h as 0."""

    return math.trunc(elapsed_hours)


def status_label(result: EvaluationResult) -> str:
    return "Valid" if result.is_eligible else "Invalid"


def tos_label(result: EvaluationResult) -> str:
    return "Old" if result.is_old_tos else "New"


def to_display_row(result: EvaluationResult, fmt: str | None = None) -> dict[str, str | int]:
    record = result.record
    return {
        "Name": record.name,
        "Location": record.location.value,
        "Signup Date": format_timestamp(record.signup_at, fmt),
        "Source": record.source.value,
        "Investment Date": format_timestamp(record.investment_at, fmt),
        "Refund Date": format_timestamp(record.refund_at, fmt),
        "Refund Hours": whole_hours(result.elapsed_hours),
        "Refund Period": result.refund_window_hours,
        "TOS": tos_label(result),
        "Request Status": status_label(result),
    }


def results_to_csv(results: Sequence[EvaluationResult], fmt: str | None = None) -> str:
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=DISPLAY_COLUMNS)
    writer.writeheader()
    for result in results:
        writer.writerow(to_display_row(result, fmt))
    return buffer.getvalue()
