from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import StrEnum

from .currency import Currency, CurrencyPair


class Aggregation(StrEnum):
    DAILY = "D"
    WEEKLY = "W"
    MONTHLY = "M"
    QUARTERLY = "Q"
    YEARLY = "Y"


@dataclass(frozen=True)
class RateObservation:
    """One provider slot for a pair on a calendar day.

    ``value`` is ``None`` when the provider has the slot but published no rate.
    """

    base: Currency
    counter: Currency
    date: date
    value: Decimal | None

    @property
    def pair(self) -> CurrencyPair:
        return CurrencyPair(base=self.base, counter=self.counter)


@dataclass(frozen=True)
class DayStatus:
    date: date
    is_bank_day: bool
    week_year: int | None = None
    week_number: int | None = None
    quarter: int | None = None


__all__ = ["Aggregation", "DayStatus", "RateObservation"]
