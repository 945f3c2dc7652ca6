"""Batch evaluation of customer refund requests."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Sequence

from ..errors import RecordEvaluationError
from ..models.domain import CustomerDataset, EvaluationResult, RawCustomerRecord, RecordFailure
from .eligibility import TOS_CUTOFF, evaluate_record
from .normalization import normalize_record


@dataclass(slots=True)
class BatchResult:
    results: List[EvaluationResult] = field(default_factory=list)
    failures: List[RecordFailure] = field(default_factory=list)

    @property
    def valid_count(self) -> int:
        return sum(1 for result in self.results if result.is_eligible)

    @property
    def invalid_count(self) -> int:
        return len(self.results) - self.valid_count


def evaluate(record: RawCustomerRecord, *, cutoff: datetime = TOS_CUTOFF) -> EvaluationResult:
    """Normalize and evaluate one raw record."""

    return evaluate_record(normalize_record(record), cutoff=cutoff)


def evaluate_batch(records: Sequence[RawCustomerRecord], *, cutoff: datetime = TOS_CUTOFF) -> BatchResult:
    """Evaluate every record in order, collecting per-record failures instead of aborting."""

    batch = BatchResult()
    for record in records:
        try:
            batch.results.append(evaluate(record, cutoff=cutoff))
        except RecordEvaluationError as exc:
            logging.warning(f"Skipping record '{record.name}': {exc.field} - {exc}")
            batch.failures.append(exc.to_failure(record.name))

    logging.info(
        f"Evaluated {len(records)} records: {batch.valid_count} valid, "
        f"{batch.invalid_count} invalid, {len(batch.failures)} failed"
    )
    return batch


def evaluate_dataset(dataset: CustomerDataset, *, cutoff: datetime = TOS_CUTOFF) -> BatchResult:
    """Evaluate a loaded dataset; rows that failed to load are reported ahead of evaluation failures."""

    batch = evaluate_batch(dataset.records, cutoff=cutoff)
    batch.failures[:0] = dataset.failures
    return batch
