"""POST /v1/age-of-money/calculate - Stateless report from supplied transactions"""

import logging
from fastapi import APIRouter, HTTPException

from age_of_money.api.v1.schemas import CalculateRequest, ReportResponse
from age_of_money.config import settings
from age_of_money.domain.exceptions import InvalidReportRangeError
from age_of_money.domain.models import Transaction
from age_of_money.domain.reports import generate_report
from age_of_money.utils.date_utils import month_end, parse_month
from age_of_money.infrastructure.observability.metrics import record_report

router = APIRouter()


@router.post("/age-of-money/calculate", response_model=ReportResponse)
def calculate(request_body: CalculateRequest):
    """
    Compute an age of money report for the transactions in the request body.

    Nothing is fetched or persisted; useful for previews and what-if budgets.
    """
    transactions = [
        Transaction(transaction_id=t.id, date=t.date, amount=t.amount)
        for t in request_body.transactions
    ]

    try:
        start = parse_month(request_body.start_month) if request_body.start_month else None
        end = month_end(parse_month(request_body.end_month)) if request_body.end_month else None

        report = generate_report(
            transactions,
            start=start,
            end=end,
            count=request_body.window or settings.average_window,
            threshold=(
                request_body.threshold
                if request_body.threshold is not None
                else settings.trend_threshold
            ),
        )
    except InvalidReportRangeError as e:
        logging.warning(f"Invalid report range: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    record_report(report)
    return ReportResponse.from_report(report)
