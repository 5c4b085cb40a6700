"""Unit tests for calendar helpers"""

import pytest
from datetime import date
from age_of_money.domain.exceptions import InvalidReportRangeError
from age_of_money.utils.date_utils import (
    days_between,
    generate_month_range,
    month_end,
    month_label,
    parse_month,
)


def test_days_between_across_dst_change():
    """Test whole days across the March DST switch"""
    assert days_between(date(2024, 3, 1), date(2024, 3, 31)) == 30
    assert days_between(date(2024, 1, 15), date(2024, 1, 15)) == 0
    assert days_between(date(2024, 1, 15), date(2024, 1, 1)) == -14


def test_month_end_leap_year():
    assert month_end(date(2024, 2, 10)) == date(2024, 2, 29)
    assert month_end(date(2023, 2, 10)) == date(2023, 2, 28)
    assert month_end(date(2024, 12, 1)) == date(2024, 12, 31)


def test_generate_month_range_crosses_year():
    """Test range is inclusive and rolls over December"""
    months = generate_month_range(date(2023, 11, 20), date(2024, 2, 1))

    assert months == [date(2023, 11, 1), date(2023, 12, 1), date(2024, 1, 1), date(2024, 2, 1)]


def test_month_label():
    assert month_label(date(2024, 1, 31)) == "Jan 2024"


def test_parse_month():
    assert parse_month("2024-03") == date(2024, 3, 1)


@pytest.mark.parametrize("value", ["2024", "2024-13", "March 2024", ""])
def test_parse_month_invalid(value):
    with pytest.raises(InvalidReportRangeError):
        parse_month(value)
