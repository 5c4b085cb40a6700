"""POST /v1/age-of-money/report - Ledger-backed age of money report"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from age_of_money.api.v1.schemas import ReportRequest, ReportResponse
from age_of_money.api.dependencies import get_ledger_client, get_request_id
from age_of_money.config import settings
from age_of_money.infrastructure.database.session import get_db
from age_of_money.infrastructure.database.repositories import SnapshotRepository
from age_of_money.infrastructure.clients.ledger import LedgerClient
from age_of_money.domain.reports import generate_report
from age_of_money.domain.exceptions import LedgerAPIError, InvalidReportRangeError
from age_of_money.utils.date_utils import month_end, parse_month
from age_of_money.infrastructure.observability.metrics import record_report, ledger_fetch_failures_counter
from age_of_money.infrastructure.observability.logging import log_report

router = APIRouter()


@router.post("/age-of-money/report", response_model=ReportResponse)
async def create_report(
    request_body: ReportRequest,
    request: Request,
    db: Session = Depends(get_db),
    ledger_client: LedgerClient = Depends(get_ledger_client),
):
    """
    Compute and store an age of money report for a user.

    Flow:
    1. Fetch the user's transactions from the ledger API
    2. FIFO-match, average and classify the trend
    3. Persist the report as a snapshot
    4. Return the report with its snapshot id
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        start = parse_month(request_body.start_month) if request_body.start_month else None
        end = month_end(parse_month(request_body.end_month)) if request_body.end_month else None

        # 1. Fetch transactions
        transactions = await ledger_client.get_transactions(request_body.user_id)

        # 2. Build report
        report = generate_report(
            transactions,
            start=start,
            end=end,
            count=settings.average_window,
            threshold=settings.trend_threshold,
        )

        # 3. Persist snapshot
        snapshot_repo = SnapshotRepository(db)
        db_snapshot = snapshot_repo.create_snapshot(request_body.user_id, report)
        db.commit()

        # Record metrics and logs
        duration_ms = (time.time() - start_time) * 1000
        record_report(report)
        log_report(request_id, request_body.user_id, report, duration_ms)

        return ReportResponse.from_report(report, snapshot_id=str(db_snapshot.id))

    except LedgerAPIError as e:
        ledger_fetch_failures_counter.inc()
        db.rollback()
        logging.error(f"Ledger API error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Ledger service unavailable")

    except InvalidReportRangeError as e:
        db.rollback()
        logging.warning(f"Invalid report range: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
