"""Pydantic models for customer records and evaluation responses."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from ..models.domain import RawCustomerRecord


class CustomerRecordIn(BaseModel):
    """Shape of one entry in the customer data file."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    name: str = Field(alias="Name")
    location: str = Field(alias="Location")
    signup_date: str = Field(alias="SignupDate")
    source: str = Field(alias="Source")
    investment_date: str = Field(alias="InvestmentDate")
    investment_time: str = Field(alias="InvestmentTime")
    refund_date: str = Field(alias="RefundDate")
    refund_time: str = Field(alias="RefundTime")

    def to_domain(self) -> RawCustomerRecord:
        return RawCustomerRecord(**self.model_dump())


class EvaluationRowModel(BaseModel):
    name: str
    location: str
    source: str
    signup_at: str
    investment_at: str
    refund_at: str
    elapsed_hours: float
    refund_hours: int
    refund_window_hours: int
    tos: str
    is_eligible: bool
    status: str


class RecordFailureModel(BaseModel):
    name: str
    field: str
    error_type: str
    message: str


class EvaluationTotals(BaseModel):
    total: int
    valid: int
    invalid: int
    failed: int


class EvaluationsResponse(BaseModel):
    items: List[EvaluationRowModel]
    failures: List[RecordFailureModel]
    totals: EvaluationTotals
