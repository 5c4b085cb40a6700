"""Data access layer for age of money snapshots"""

import uuid
from typing import List, Optional
from sqlalchemy.orm import Session
from age_of_money.infrastructure.database.models import AgeOfMoneySnapshot, SnapshotMonth
from age_of_money.domain.models import AgeOfMoneyReport


class SnapshotRepository:
    """Repository for report snapshots"""

    def __init__(self, db: Session):
        self.db = db

    def create_snapshot(self, user_id: str, report: AgeOfMoneyReport) -> AgeOfMoneySnapshot:
        """Persist a report and its monthly series"""
        db_snapshot = AgeOfMoneySnapshot(
            user_id=user_id,
            current_age=report.current_age,
            trend=report.trend,
            insufficient_data=report.insufficient_data,
            income_count=report.income_count,
            expense_count=report.expense_count,
            matched_count=len(report.ages),
        )
        self.db.add(db_snapshot)
        self.db.flush()  # Get ID without committing

        for position, point in enumerate(report.monthly_data):
            self.db.add(
                SnapshotMonth(
                    snapshot_id=db_snapshot.id,
                    position=position,
                    label=point.date,
                    age_of_money=point.age_of_money,
                )
            )

        return db_snapshot

    def get_snapshots_by_user(self, user_id: str, limit: int = 10) -> List[AgeOfMoneySnapshot]:
        """Fetch recent snapshots for a user, newest first"""
        return (
            self.db.query(AgeOfMoneySnapshot)
            .filter(AgeOfMoneySnapshot.user_id == user_id)
            .order_by(AgeOfMoneySnapshot.created_at.desc(), AgeOfMoneySnapshot.id.desc())
            .limit(limit)
            .all()
        )

    def get_snapshot_by_id(self, snapshot_id: uuid.UUID) -> Optional[AgeOfMoneySnapshot]:
        """Fetch snapshot with its monthly series"""
        return (
            self.db.query(AgeOfMoneySnapshot)
            .filter(AgeOfMoneySnapshot.id == snapshot_id)
            .first()
        )
