"""Refund evaluation endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Response, status

from ...data.customers_repository import load_dataset
from ...schemas.customers import (
    EvaluationRowModel,
    EvaluationsResponse,
    EvaluationTotals,
    RecordFailureModel,
)
from ...services.evaluation import BatchResult, evaluate_dataset
from ...services.outputs.formatter import (
    format_timestamp,
    results_to_csv,
    status_label,
    tos_label,
    whole_hours,
)

router = APIRouter(prefix="/evaluations", tags=["evaluations"])


def _run_batch() -> BatchResult:
    try:
        dataset = load_dataset()
    except FileNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Customer file is invalid: {exc}",
        ) from exc
    return evaluate_dataset(dataset)


@router.get("", response_model=EvaluationsResponse, status_code=status.HTTP_200_OK)
def list_evaluations() -> EvaluationsResponse:
    batch = _run_batch()
    items = [
        EvaluationRowModel(
            name=result.name,
            location=result.record.location.value,
            source=result.record.source.value,
            signup_at=format_timestamp(result.record.signup_at),
            investment_at=format_timestamp(result.record.investment_at),
            refund_at=format_timestamp(result.record.refund_at),
            elapsed_hours=result.elapsed_hours,
            refund_hours=whole_hours(result.elapsed_hours),
            refund_window_hours=result.refund_window_hours,
            tos=tos_label(result),
            is_eligible=result.is_eligible,
            status=status_label(result),
        )
        for result in batch.results
    ]
    failures = [
        RecordFailureModel(
            name=failure.name,
            field=failure.field,
            error_type=failure.error_type,
            message=failure.message,
        )
        for failure in batch.failures
    ]
    totals = EvaluationTotals(
        total=len(batch.results) + len(batch.failures),
        valid=batch.valid_count,
        invalid=batch.invalid_count,
        failed=len(batch.failures),
    )
    return EvaluationsResponse(items=items, failures=failures, totals=totals)


@router.get("/export", status_code=status.HTTP_200_OK)
def export_evaluations() -> Response:
    batch = _run_batch()
    return Response(
        content=results_to_csv(batch.results),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="refund_evaluations.csv"'},
    )
