from __future__ import annotations

import re
from datetime import date
from decimal import Decimal

from rikskurs.domain.currency import Currency, parse_currency
from rikskurs.domain.errors import InvalidInput, MissingParameter

CURRENCY_PATTERN = re.compile(r"^[A-Za-z]{3}$")
VALUE_PATTERN = re.compile(r"^\d+(\.\d+)?$")
DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_currency_param(raw: str | None, *, name: str) -> Currency:
    if not raw:
        raise MissingParameter(f"need {name} currency")
    if not CURRENCY_PATTERN.match(raw):
        raise InvalidInput(f"invalid {name} currency {raw!r}")
    return parse_currency(raw)


def parse_value_param(raw: str | None) -> Decimal:
    if not raw:
        raise MissingParameter("no value provided")
    if not VALUE_PATTERN.match(raw):
        raise InvalidInput(f"invalid value {raw!r}")
    return Decimal(raw)


def parse_date_param(raw: str | None, default: date) -> date:
    if not raw:
        return default
    message = f"invalid date {raw!r}, expected YYYY-MM-DD"
    if not DATE_PATTERN.match(raw):
        raise InvalidInput(message)
    try:
        return date.fromisoformat(raw)
    except ValueError as exc:
        raise InvalidInput(message) from exc


def format_decimal(value: Decimal) -> str:
    return f"{value:.6f}"


def format_bool(value: bool) -> str:
    return "true" if value else "false"


__all__ = [
    "format_bool",
    "format_decimal",
    "parse_currency_param",
    "parse_date_param",
    "parse_value_param",
]
