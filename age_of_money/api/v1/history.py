"""GET /v1/age-of-money/history - Fetch user's stored reports"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from age_of_money.api.v1.schemas import HistoryResponse, HistoryItem
from age_of_money.config import settings
from age_of_money.infrastructure.database.session import get_db
from age_of_money.infrastructure.database.repositories import SnapshotRepository

router = APIRouter()


@router.get("/age-of-money/history", response_model=HistoryResponse)
def get_report_history(
    user_id: str = Query(..., description="User identifier"),
    db: Session = Depends(get_db),
):
    """
    Retrieve recent age of money snapshots for a user, newest first.
    """
    snapshot_repo = SnapshotRepository(db)
    snapshots = snapshot_repo.get_snapshots_by_user(user_id, limit=settings.history_limit)

    history_items = [
        HistoryItem(
            snapshot_id=str(s.id),
            current_age=s.current_age,
            trend=s.trend,
            insufficient_data=s.insufficient_data,
            income_count=s.income_count,
            expense_count=s.expense_count,
            created_at=s.created_at.isoformat(),
        )
        for s in snapshots
    ]

    return HistoryResponse(user_id=user_id, snapshots=history_items)
