"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from datetime import date
from typing import List, Literal, Optional

from age_of_money.domain.models import AgeOfMoneyReport


class TransactionSchema(BaseModel):
    """Single ledger transaction (income > 0, expense < 0)"""

    id: str = Field(..., min_length=1, description="Transaction identifier")
    date: date
    amount: int = Field(..., description="Signed amount in minor currency units")


class CalculateRequest(BaseModel):
    """Request body for POST /v1/age-of-money/calculate"""

    transactions: List[TransactionSchema]
    start_month: Optional[str] = Field(None, description="First report month, YYYY-MM")
    end_month: Optional[str] = Field(None, description="Last report month, YYYY-MM")
    window: Optional[int] = Field(None, ge=1, description="Expenses averaged into the current age")
    threshold: Optional[float] = Field(None, ge=0, description="Days of change before a trend is up/down")


class ReportRequest(BaseModel):
    """Request body for POST /v1/age-of-money/report"""

    user_id: str = Field(..., min_length=1, description="User identifier")
    start_month: Optional[str] = Field(None, description="First report month, YYYY-MM")
    end_month: Optional[str] = Field(None, description="Last report month, YYYY-MM")


class AgeEntrySchema(BaseModel):
    date: date
    age: int


class MonthlyPointSchema(BaseModel):
    date: str
    age_of_money: float


class ReportResponse(BaseModel):
    """Computed age of money report"""

    current_age: Optional[int]
    trend: Literal["up", "down", "stable"]
    insufficient_data: bool
    monthly_data: List[MonthlyPointSchema]
    ages: List[AgeEntrySchema]
    income_count: int
    expense_count: int
    snapshot_id: Optional[str] = None

    @classmethod
    def from_report(cls, report: AgeOfMoneyReport, snapshot_id: Optional[str] = None) -> "ReportResponse":
        return cls(
            current_age=report.current_age,
            trend=report.trend,
            insufficient_data=report.insufficient_data,
            monthly_data=[
                MonthlyPointSchema(date=p.date, age_of_money=p.age_of_money) for p in report.monthly_data
            ],
            ages=[AgeEntrySchema(date=a.date, age=a.age) for a in report.ages],
            income_count=report.income_count,
            expense_count=report.expense_count,
            snapshot_id=snapshot_id,
        )


class SnapshotResponse(BaseModel):
    """Response for GET /v1/age-of-money/snapshots/{snapshot_id}"""

    snapshot_id: str
    user_id: str
    current_age: Optional[int]
    trend: str
    insufficient_data: bool
    matched_count: int
    income_count: int
    expense_count: int
    monthly_data: List[MonthlyPointSchema]
    created_at: str


class HistoryItem(BaseModel):
    """Single snapshot in history"""

    snapshot_id: str
    current_age: Optional[int]
    trend: str
    insufficient_data: bool
    income_count: int
    expense_count: int
    created_at: str


class HistoryResponse(BaseModel):
    """Response for GET /v1/age-of-money/history"""

    user_id: str
    snapshots: List[HistoryItem]
