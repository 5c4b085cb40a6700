"""Unit tests for monthly aggregation and report assembly"""

import pytest
from datetime import date
from age_of_money.domain.models import AgeEntry, MonthlyPoint, Transaction
from age_of_money.domain.exceptions import InvalidReportRangeError
from age_of_money.domain.reports import build_monthly_points, generate_report, split_transactions


def test_split_transactions_by_sign():
    """Test income/expense split ignores zero amounts"""
    transactions = [
        Transaction(transaction_id="1", date=date(2024, 1, 1), amount=1000),
        Transaction(transaction_id="2", date=date(2024, 1, 2), amount=-300),
        Transaction(transaction_id="3", date=date(2024, 1, 3), amount=0),
    ]

    income, expenses = split_transactions(transactions)

    assert [t.transaction_id for t in income] == ["1"]
    assert [t.transaction_id for t in expenses] == ["2"]


def test_build_monthly_points_rolling_average():
    """Test each month averages ages up to its last day"""
    ages = [
        AgeEntry(date=date(2024, 1, 10), age=10),
        AgeEntry(date=date(2024, 1, 31), age=20),
        AgeEntry(date=date(2024, 2, 15), age=40),
    ]

    points = build_monthly_points(ages, date(2024, 1, 1), date(2024, 2, 29))

    assert points == [
        MonthlyPoint(date="Jan 2024", age_of_money=15),
        MonthlyPoint(date="Feb 2024", age_of_money=23),  # 70 / 3 = 23.3
    ]


def test_build_monthly_points_skips_months_without_data():
    """Test months before the first matched expense have no point"""
    ages = [AgeEntry(date=date(2024, 3, 5), age=12)]

    points = build_monthly_points(ages, date(2024, 1, 1), date(2024, 3, 31))

    assert points == [MonthlyPoint(date="Mar 2024", age_of_money=12)]


def test_build_monthly_points_respects_window():
    ages = [AgeEntry(date=date(2024, 1, d), age=d) for d in range(1, 6)]

    points = build_monthly_points(ages, date(2024, 1, 1), date(2024, 1, 31), count=2)

    assert points == [MonthlyPoint(date="Jan 2024", age_of_money=5)]  # (4 + 5) / 2 = 4.5


def test_build_monthly_points_invalid_range():
    with pytest.raises(InvalidReportRangeError):
        build_monthly_points([], date(2024, 3, 1), date(2024, 1, 1))


def test_generate_report_sample_history(sample_transactions: list[Transaction]):
    """Test full report over three months of salary and weekly groceries"""
    report = generate_report(sample_transactions)

    assert report.insufficient_data is False
    assert report.income_count == 3
    assert report.expense_count == 12
    assert [a.age for a in report.ages] == [7, 14, 21, 28, 35, 42, 18, 25, 32, 39, 46, 53]
    assert report.monthly_data == [
        MonthlyPoint(date="Jan 2024", age_of_money=18),  # 17.5
        MonthlyPoint(date="Feb 2024", age_of_money=24),  # 23.75
        MonthlyPoint(date="Mar 2024", age_of_money=34),  # last 10 -> 33.9
    ]
    assert report.current_age == 34
    assert report.trend == "up"


def test_generate_report_insufficient_income():
    """Test report flags spending beyond income"""
    transactions = [
        Transaction(transaction_id="1", date=date(2024, 1, 1), amount=100),
        Transaction(transaction_id="2", date=date(2024, 1, 15), amount=-500),
    ]

    report = generate_report(transactions)

    assert report.insufficient_data is True
    assert report.ages == []
    assert report.current_age is None
    assert report.monthly_data == []
    assert report.trend == "stable"


def test_generate_report_explicit_range():
    """Test explicit range extends the series past the last expense"""
    transactions = [
        Transaction(transaction_id="1", date=date(2024, 1, 1), amount=1000),
        Transaction(transaction_id="2", date=date(2024, 1, 11), amount=-100),
    ]

    report = generate_report(transactions, start=date(2023, 12, 1), end=date(2024, 2, 29))

    assert [p.date for p in report.monthly_data] == ["Jan 2024", "Feb 2024"]
    assert report.trend == "stable"


def test_generate_report_empty_ledger():
    report = generate_report([])

    assert report.current_age is None
    assert report.insufficient_data is False
    assert report.trend == "stable"


def test_generate_report_start_after_last_expense():
    """Test start past the matched span yields an empty series, not an error"""
    transactions = [
        Transaction(transaction_id="1", date=date(2024, 1, 1), amount=1000),
        Transaction(transaction_id="2", date=date(2024, 1, 11), amount=-100),
    ]

    report = generate_report(transactions, start=date(2024, 3, 1))

    assert report.monthly_data == []
    assert report.current_age == 10
    assert report.trend == "stable"


def test_generate_report_end_before_first_expense():
    """Test end before the matched span yields an empty series, not an error"""
    transactions = [
        Transaction(transaction_id="1", date=date(2024, 1, 1), amount=1000),
        Transaction(transaction_id="2", date=date(2024, 1, 11), amount=-100),
    ]

    report = generate_report(transactions, end=date(2023, 12, 31))

    assert report.monthly_data == []
    assert report.current_age == 10


def test_generate_report_inverted_explicit_range():
    """Test an inverted range supplied in full is rejected"""
    with pytest.raises(InvalidReportRangeError):
        generate_report([], start=date(2024, 3, 1), end=date(2024, 1, 31))
