"""Tests for date parser with relative dates."""

import pytest
from datetime import date, timedelta
from shopledger.utils.date_parser import parse_date, to_iso


def test_parse_absolute_date():
    """Test parsing absolute dates."""
    assert parse_date("2024-01-15") == date(2024, 1, 15)
    assert parse_date("January 15, 2024") == date(2024, 1, 15)


def test_parse_today():
    """Test parsing 'today'."""
    assert parse_date("today") == date.today()
    assert parse_date("  Today ") == date.today()


def test_parse_yesterday():
    """Test parsing 'yesterday'."""
    assert parse_date("yesterday") == date.today() - timedelta(days=1)


def test_parse_last_month():
    """Test parsing 'last month'."""
    result = parse_date("last month")
    today = date.today()
    if today.month == 1:
        expected = date(today.year - 1, 12, 1)
    else:
        expected = date(today.year, today.month - 1, 1)
    assert result == expected


def test_parse_this_week_is_monday():
    """Test parsing 'this week'."""
    result = parse_date("this week")
    assert result.weekday() == 0
    assert result <= date.today()


def test_parse_invalid():
    """Test parsing an invalid date."""
    with pytest.raises(ValueError):
        parse_date("gibberish")


def test_to_iso():
    """Dates are stored as ISO strings."""
    assert to_iso("15 Jan 2024") == "2024-01-15"
