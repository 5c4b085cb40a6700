"""Pytest fixtures for testing"""

import pytest
from datetime import date, timedelta
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from age_of_money.api.main import create_app
from age_of_money.infrastructure.database.models import Base
from age_of_money.infrastructure.database.session import get_db
from age_of_money.domain.models import Transaction


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def txn(transaction_id: str, day: str, amount: int) -> Transaction:
    """Shorthand for building a transaction from an ISO date"""
    return Transaction(transaction_id=transaction_id, date=date.fromisoformat(day), amount=amount)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def sample_transactions() -> list[Transaction]:
    """Three months of salary with weekly spending"""
    transactions = [
        txn("salary_jan", "2024-01-01", 300000),
        txn("salary_feb", "2024-02-01", 300000),
        txn("salary_mar", "2024-03-01", 300000),
    ]

    # $500 of groceries weekly, 12 weeks from Jan 8
    for week in range(12):
        transactions.append(
            Transaction(
                transaction_id=f"groceries_{week}",
                date=date(2024, 1, 8) + timedelta(weeks=week),
                amount=-50000,
            )
        )

    return transactions
