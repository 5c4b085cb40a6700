"""Age of Money engine - FIFO matching of income to expenses"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional, Sequence

from age_of_money.domain.models import (
    AgeEntry,
    AgeOfMoneyResult,
    IncomeBucket,
    MonthlyPoint,
    Transaction,
    Trend,
)
from age_of_money.utils.date_utils import days_between

logger = logging.getLogger(__name__)


def calculate_age_of_money(
    income: List[Transaction],
    expenses: List[Transaction],
) -> AgeOfMoneyResult:
    """
    Match every expense against the oldest unspent income (FIFO).

    Requirements:
    - Both lists are sorted by date (stable), inputs are not mutated
    - Expense demand is abs(amount), drawn from buckets in date order
    - Age is attributed to the LAST bucket touched, so an expense spanning
      two incomes reports the age of the younger one
    - Once income runs out mid-expense, matching stops and the result is
      flagged insufficient; that expense gets no entry
    - A zero-amount expense spends nothing and gets no entry, so ages may be
      shorter than expenses even when income covers every expense

    Example:
        income   [Jan 1: 200, Jan 15: 300], expense [Feb 1: -400]
        200 from Jan 1, 200 from Jan 15 -> age = Feb 1 - Jan 15 = 17
    """
    if not expenses:
        return AgeOfMoneyResult(ages=[], insufficient_data=False)
    if not income:
        return AgeOfMoneyResult(ages=[], insufficient_data=True)

    sorted_income = sorted(income, key=lambda t: t.date)
    sorted_expenses = sorted(expenses, key=lambda t: t.date)

    # Non-positive income contributes an empty bucket
    buckets = [IncomeBucket(date=t.date, remaining=max(t.amount, 0)) for t in sorted_income]

    ages: List[AgeEntry] = []
    cursor = 0

    for expense in sorted_expenses:
        demand = abs(expense.amount)
        attributed_date = None

        while demand > 0:
            # Cursor only moves forward; exhausted buckets are never revisited
            while cursor < len(buckets) and buckets[cursor].remaining <= 0:
                cursor += 1

            if cursor >= len(buckets):
                logger.debug(
                    "Income exhausted",
                    extra={"expense_id": expense.transaction_id, "matched": len(ages)},
                )
                return AgeOfMoneyResult(ages=ages, insufficient_data=True)

            bucket = buckets[cursor]
            consumed = min(demand, bucket.remaining)
            bucket.remaining -= consumed
            demand -= consumed
            attributed_date = bucket.date

        # Zero-amount expenses spend nothing and are not aged
        if attributed_date is not None:
            ages.append(
                AgeEntry(date=expense.date, age=days_between(attributed_date, expense.date))
            )

    return AgeOfMoneyResult(ages=ages, insufficient_data=False)


def calculate_average_age(ages: Sequence[AgeEntry], count: int = 10) -> Optional[int]:
    """
    Average age of the most recent `count` entries, rounded half-up.

    Returns None when there is nothing to average (distinct from an age of 0).
    Python's round() is banker's rounding, so Decimal is used to get 10.5 -> 11.
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")
    if not ages:
        return None

    recent = ages[-count:]
    mean = Decimal(sum(entry.age for entry in recent)) / Decimal(len(recent))
    return int(mean.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def calculate_trend(points: Sequence[MonthlyPoint], threshold: float = 2) -> Trend:
    """
    Classify the change between the last two monthly points.

    Only points[-2] and points[-1] are consulted; callers supply them in
    chronological order. A change of exactly +/- threshold is stable.
    """
    if len(points) < 2:
        return "stable"

    diff = points[-1].age_of_money - points[-2].age_of_money

    if diff > threshold:
        return "up"
    elif diff < -threshold:
        return "down"
    else:
        return "stable"
