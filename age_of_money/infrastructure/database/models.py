"""SQLAlchemy ORM models for persisted report snapshots"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, Boolean, Float, DateTime, Integer, ForeignKey, Text, Uuid
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func

Base = declarative_base()


class AgeOfMoneySnapshot(Base):
    """Age of money report computed for a user at a point in time"""

    __tablename__ = "age_of_money_snapshot"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    current_age = Column(Integer, nullable=True)  # NULL when no expense was matched
    trend = Column(Text, nullable=False)
    insufficient_data = Column(Boolean, nullable=False)
    income_count = Column(Integer, nullable=False)
    expense_count = Column(Integer, nullable=False)
    matched_count = Column(Integer, nullable=False)
    # Set client-side: SQLite CURRENT_TIMESTAMP only has one-second resolution
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )

    months = relationship(
        "SnapshotMonth",
        back_populates="snapshot",
        cascade="all, delete-orphan",
        order_by="SnapshotMonth.position",
    )


class SnapshotMonth(Base):
    """One point of the monthly series stored with a snapshot"""

    __tablename__ = "age_of_money_snapshot_month"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    snapshot_id = Column(Uuid, ForeignKey("age_of_money_snapshot.id", ondelete="CASCADE"), nullable=False)
    position = Column(Integer, nullable=False)
    label = Column(Text, nullable=False)
    age_of_money = Column(Float, nullable=False)

    snapshot = relationship("AgeOfMoneySnapshot", back_populates="months")
