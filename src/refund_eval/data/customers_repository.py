"""Data access helpers for loading customer refund records."""

from __future__ import annotations

import functools
import json
import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from ..config import settings
from ..errors import FIELD_ERRORS, MalformedRecordError, RecordEvaluationError
from ..models.domain import CustomerDataset, RawCustomerRecord, RecordFailure
from ..schemas.customers import CustomerRecordIn


def _row_name(row: Any, index: int) -> str:
    name = row.get("Name") if isinstance(row, dict) else None
    if isinstance(name, str) and name.strip():
        return name.strip()
    return f"row {index}"


def _row_error(exc: ValidationError) -> RecordEvaluationError:
    first = exc.errors()[0]
    field = str(first["loc"][0]) if first["loc"] else "record"
    error_cls = FIELD_ERRORS.get(field, MalformedRecordError)
    return error_cls(f"{field}: {first['msg']}", field=field)


def _parse_row(row: Any, index: int) -> RawCustomerRecord | RecordFailure:
    name = _row_name(row, index)
    if not isinstance(row, dict):
        error: RecordEvaluationError = MalformedRecordError("Record must be a JSON object", field="record")
    else:
        try:
            return CustomerRecordIn.model_validate(row).to_domain()
        except ValidationError as exc:
            error = _row_error(exc)
    logging.warning(f"Skipping row {index} ('{name}'): {error.field} - {error}")
    return error.to_failure(name)


@functools.lru_cache(maxsize=1)
def load_dataset(source: Optional[Path] = None) -> CustomerDataset:
    """Load customer records from the configured JSON file.

    Each row is validated on its own; unreadable rows become failures and the
    remaining rows are still returned.
    """

    json_path = source or settings.customer_file
    if not json_path.exists():
        raise FileNotFoundError(f"Customer file not found: {json_path}")

    with json_path.open(mode="r", encoding="utf-8-sig") as handle:
        payload = json.load(handle)
    if not isinstance(payload, list):
        raise ValueError(f"Customer file '{json_path}' must contain a JSON array of records.")

    records: list[RawCustomerRecord] = []
    failures: list[RecordFailure] = []
    for index, row in enumerate(payload):
        parsed = _parse_row(row, index)
        if isinstance(parsed, RecordFailure):
            failures.append(parsed)
        else:
            records.append(parsed)
    return CustomerDataset(records=tuple(records), failures=tuple(failures))


def set_active_customer_file(path: Path) -> None:
    """Update the active customer file and clear the record cache."""

    settings.customer_file = path
    load_dataset.cache_clear()
