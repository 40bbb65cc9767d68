"""Locale-aware formatting of money and timestamps for the rendered pages.

Amounts arrive as integer minor units (paise for INR) and are only
converted to major units here.  Locale data comes from Babel, so ``en_IN``
gets lakh grouping (``1,23,456.78``) without any hand-rolled rules.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from decimal import Decimal
from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo

from babel import Locale
from babel.dates import format_date, format_time
from babel.numbers import format_decimal, get_currency_symbol

from walletview.modules.transactions.models import PENDING_STATUSES, Direction
from walletview.modules.transactions.normalizer import as_utc

DEFAULT_LOCALE = "en_IN"
DEFAULT_CURRENCY = "INR"
DEFAULT_TIMEZONE = "Asia/Kolkata"

MINOR_UNITS_PER_MAJOR = 100

CLOCK_FORMAT = "h:mm a"
SHORT_DATE_FORMAT = "d MMM"
SHORT_DATE_WITH_YEAR_FORMAT = "d MMM y"
LONG_DATE_FORMAT = "EEEE, d MMMM y"

YESTERDAY = "Yesterday"
JUST_NOW = "Just now"


@lru_cache(maxsize=32)
def _amount_pattern(locale: str) -> str:
    # Keep the locale's grouping, force exactly two fraction digits.
    pattern = Locale.parse(locale).decimal_formats[None].pattern
    integer_part = pattern.split(";")[0].split(".")[0]
    return f"{integer_part}.00"


def to_major_units(minor_units: int) -> Decimal:
    return Decimal(minor_units) / MINOR_UNITS_PER_MAJOR


def format_number(minor_units: int, *, locale: str = DEFAULT_LOCALE) -> str:
    """Major-unit number without a currency symbol, e.g. ``500.00``."""
    return format_decimal(to_major_units(minor_units), format=_amount_pattern(locale), locale=locale)


def format_money(minor_units: int, *, locale: str = DEFAULT_LOCALE, currency: str = DEFAULT_CURRENCY) -> str:
    symbol = get_currency_symbol(currency, locale=locale)
    if minor_units < 0:
        return f"-{symbol}{format_number(-minor_units, locale=locale)}"
    return f"{symbol}{format_number(minor_units, locale=locale)}"


def format_signed_amount(
    minor_units: int,
    direction: Direction,
    status: str,
    *,
    locale: str = DEFAULT_LOCALE,
    currency: str = DEFAULT_CURRENCY,
) -> str:
    """Prefix ``+``/``-`` by direction; pending amounts are shown without a sign."""
    formatted = format_money(minor_units, locale=locale, currency=currency)
    if status.lower() in PENDING_STATUSES:
        return formatted
    return f"+{formatted}" if direction is Direction.CREDIT else f"-{formatted}"


def _now(now: Optional[datetime]) -> datetime:
    return as_utc(now) if now is not None else datetime.now(timezone.utc)


def _hours_between(earlier: datetime, later: datetime) -> float:
    return (as_utc(later) - as_utc(earlier)).total_seconds() / 3600


def format_transaction_time(
    timestamp: datetime,
    *,
    now: Optional[datetime] = None,
    tz: str = DEFAULT_TIMEZONE,
    locale: str = DEFAULT_LOCALE,
) -> str:
    """Clock time under a day old, ``Yesterday`` under two days, else a short date."""
    current = _now(now)
    zone = ZoneInfo(tz)
    local = as_utc(timestamp).astimezone(zone)
    hours = _hours_between(timestamp, current)

    if hours < 24:
        return format_time(local, CLOCK_FORMAT, tzinfo=zone, locale=locale)
    if hours < 48:
        return YESTERDAY
    if local.year != current.astimezone(zone).year:
        return format_date(local.date(), SHORT_DATE_WITH_YEAR_FORMAT, locale=locale)
    return format_date(local.date(), SHORT_DATE_FORMAT, locale=locale)


def format_relative_time(timestamp: datetime, *, now: Optional[datetime] = None) -> str:
    hours = _hours_between(timestamp, _now(now))
    if hours < 1:
        return JUST_NOW
    if hours < 24:
        return f"{math.floor(hours)}h ago"
    return f"{math.floor(hours / 24)}d ago"


def format_long_date(
    now: Optional[datetime] = None,
    *,
    tz: str = DEFAULT_TIMEZONE,
    locale: str = DEFAULT_LOCALE,
) -> str:
    local = _now(now).astimezone(ZoneInfo(tz))
    return format_date(local.date(), LONG_DATE_FORMAT, locale=locale)


def format_percentage(value: float) -> str:
    return f"{value:.1f}%"


def first_name(name: Optional[str], default: str = "User") -> str:
    if not name or not name.strip():
        return default
    return name.split()[0]


__all__ = [
    "DEFAULT_CURRENCY",
    "DEFAULT_LOCALE",
    "DEFAULT_TIMEZONE",
    "first_name",
    "format_long_date",
    "format_money",
    "format_number",
    "format_percentage",
    "format_relative_time",
    "format_signed_amount",
    "format_transaction_time",
    "to_major_units",
]
