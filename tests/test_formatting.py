from datetime import datetime, timedelta, timezone

import pytest

from walletview.modules.transactions import Direction
from walletview.presentation import (
    first_name,
    format_long_date,
    format_money,
    format_relative_time,
    format_signed_amount,
    format_transaction_time,
)

NOW = datetime(2026, 6, 15, 12, 0, tzinfo=timezone.utc)


def test_format_money_converts_minor_units():
    assert format_money(50000) == "₹500.00"


def test_format_money_uses_indian_grouping():
    assert format_money(12345678) == "₹1,23,456.78"


@pytest.mark.parametrize(
    "minor_units, expected",
    [(0, "₹0.00"), (5, "₹0.05"), (100, "₹1.00"), (99999, "₹999.99")],
)
def test_format_money_always_has_two_decimals(minor_units, expected):
    assert format_money(minor_units) == expected


def test_format_money_is_stable_across_calls():
    assert format_money(123456) == format_money(123456)


def test_format_money_other_locale():
    assert format_money(12345678, locale="en_US", currency="USD") == "$123,456.78"


def test_signed_amount_by_direction():
    assert format_signed_amount(10000, Direction.CREDIT, "Success") == "+₹100.00"
    assert format_signed_amount(10000, Direction.DEBIT, "success") == "-₹100.00"
    assert format_signed_amount(10000, Direction.DEBIT, "Failure") == "-₹100.00"


@pytest.mark.parametrize("status", ["pending", "Processing", "PENDING"])
def test_pending_amounts_have_no_sign(status):
    assert format_signed_amount(10000, Direction.CREDIT, status) == "₹100.00"


def test_transaction_time_same_day_shows_clock_time():
    # 10:00 UTC is 15:30 in Asia/Kolkata
    assert format_transaction_time(NOW - timedelta(hours=2), now=NOW).startswith("3:30")


def test_transaction_time_between_one_and_two_days_is_yesterday():
    assert format_transaction_time(NOW - timedelta(hours=24), now=NOW) == "Yesterday"
    assert format_transaction_time(NOW - timedelta(hours=47, minutes=59), now=NOW) == "Yesterday"


def test_transaction_time_older_same_year_omits_year():
    assert format_transaction_time(NOW - timedelta(days=5), now=NOW) == "10 Jun"


def test_transaction_time_older_previous_year_includes_year():
    ts = datetime(2025, 12, 20, 12, 0, tzinfo=timezone.utc)
    assert format_transaction_time(ts, now=NOW) == "20 Dec 2025"


@pytest.mark.parametrize(
    "age, expected",
    [
        (timedelta(minutes=30), "Just now"),
        (timedelta(minutes=90), "1h ago"),
        (timedelta(hours=23, minutes=59), "23h ago"),
        (timedelta(hours=47), "1d ago"),
        (timedelta(days=3, hours=5), "3d ago"),
    ],
)
def test_relative_time_buckets_floor(age, expected):
    assert format_relative_time(NOW - age, now=NOW) == expected


def test_relative_time_accepts_naive_timestamps_as_utc():
    naive = (NOW - timedelta(hours=5)).replace(tzinfo=None)
    assert format_relative_time(naive, now=NOW) == "5h ago"


def test_long_date_for_dashboard_header():
    assert format_long_date(NOW) == "Monday, 15 June 2026"


@pytest.mark.parametrize(
    "name, expected",
    [("Asha Rao", "Asha"), ("Ravi", "Ravi"), (None, "User"), ("   ", "User")],
)
def test_first_name(name, expected):
    assert first_name(name) == expected
