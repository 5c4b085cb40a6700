"""GET /v1/age-of-money/snapshots/{snapshot_id} - Fetch a stored report"""

import uuid
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from age_of_money.api.v1.schemas import SnapshotResponse, MonthlyPointSchema
from age_of_money.infrastructure.database.session import get_db
from age_of_money.infrastructure.database.repositories import SnapshotRepository

router = APIRouter()


@router.get("/age-of-money/snapshots/{snapshot_id}", response_model=SnapshotResponse)
def get_snapshot(snapshot_id: str, db: Session = Depends(get_db)):
    """
    Retrieve a stored report with its monthly series.

    Returns:
        Snapshot summary and monthly points in chronological order
    """
    try:
        snapshot_uuid = uuid.UUID(snapshot_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid snapshot ID format")

    snapshot_repo = SnapshotRepository(db)
    snapshot = snapshot_repo.get_snapshot_by_id(snapshot_uuid)

    if not snapshot:
        raise HTTPException(status_code=404, detail="Snapshot not found")

    monthly_data = [
        MonthlyPointSchema(date=month.label, age_of_money=month.age_of_money)
        for month in snapshot.months
    ]

    return SnapshotResponse(
        snapshot_id=str(snapshot.id),
        user_id=snapshot.user_id,
        current_age=snapshot.current_age,
        trend=snapshot.trend,
        insufficient_data=snapshot.insufficient_data,
        matched_count=snapshot.matched_count,
        income_count=snapshot.income_count,
        expense_count=snapshot.expense_count,
        monthly_data=monthly_data,
        created_at=snapshot.created_at.isoformat(),
    )
