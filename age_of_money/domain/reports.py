"""Monthly aggregation and report assembly on top of the matching engine"""

from datetime import date
from typing import List, Optional, Sequence, Tuple

from age_of_money.domain.age_of_money import (
    calculate_age_of_money,
    calculate_average_age,
    calculate_trend,
)
from age_of_money.domain.exceptions import InvalidReportRangeError
from age_of_money.domain.models import AgeEntry, AgeOfMoneyReport, MonthlyPoint, Transaction
from age_of_money.utils.date_utils import generate_month_range, month_end, month_label


def split_transactions(
    transactions: Sequence[Transaction],
) -> Tuple[List[Transaction], List[Transaction]]:
    """Split a mixed ledger into (income, expenses) by sign; zero amounts are dropped"""
    income = [t for t in transactions if t.amount > 0]
    expenses = [t for t in transactions if t.amount < 0]
    return income, expenses


def build_monthly_points(
    ages: Sequence[AgeEntry],
    start: date,
    end: date,
    count: int = 10,
) -> List[MonthlyPoint]:
    """
    Rolling average age as it stood at the end of each month.

    For every month from start to end, averages the last `count` ages dated
    on or before the month's final day. Months before the first matched
    expense have no average and are skipped.
    """
    if start > end:
        raise InvalidReportRangeError(f"Report start {start} is after end {end}")

    points = []
    for month in generate_month_range(start, end):
        cutoff = month_end(month)
        ages_so_far = [entry for entry in ages if entry.date <= cutoff]
        average = calculate_average_age(ages_so_far, count)
        if average is not None:
            points.append(MonthlyPoint(date=month_label(month), age_of_money=average))
    return points


def generate_report(
    transactions: Sequence[Transaction],
    start: Optional[date] = None,
    end: Optional[date] = None,
    count: int = 10,
    threshold: float = 2,
) -> AgeOfMoneyReport:
    """
    Main entry point: match a user's ledger and summarize it.

    Flow:
    1. Split transactions into income and expenses
    2. FIFO-match expenses to income
    3. Current age = trailing average over the last `count` expenses
    4. Monthly series over [start, end] (defaults to the matched expense span)
    5. Trend from the last two monthly points

    Raises:
        InvalidReportRangeError: If both start and end are given and start > end
    """
    if start is not None and end is not None and start > end:
        raise InvalidReportRangeError(f"Report start {start} is after end {end}")

    income, expenses = split_transactions(transactions)
    result = calculate_age_of_money(income, expenses)

    if result.ages:
        start = start or result.ages[0].date
        end = end or result.ages[-1].date

    # A defaulted bound can land on the wrong side of the caller's one: empty series
    monthly_data: List[MonthlyPoint] = []
    if start is not None and end is not None and start <= end:
        monthly_data = build_monthly_points(result.ages, start, end, count)

    return AgeOfMoneyReport(
        current_age=calculate_average_age(result.ages, count),
        trend=calculate_trend(monthly_data, threshold),
        insufficient_data=result.insufficient_data,
        monthly_data=monthly_data,
        ages=result.ages,
        income_count=len(income),
        expense_count=len(expenses),
    )
