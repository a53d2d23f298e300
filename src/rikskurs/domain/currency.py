from __future__ import annotations

from dataclasses import dataclass
from typing import NewType

Currency = NewType("Currency", str)


def parse_currency(raw: str) -> Currency:
    """Normalize a currency code. Never fails; unknown codes are left for the provider to ignore."""
    return Currency(raw.strip().upper())


@dataclass(frozen=True)
class CurrencyPair:
    base: Currency
    counter: Currency

    @classmethod
    def parse(cls, base: str, counter: str) -> CurrencyPair:
        return cls(base=parse_currency(base), counter=parse_currency(counter))

    def __str__(self) -> str:
        return f"{self.base}/{self.counter}"


__all__ = ["Currency", "CurrencyPair", "parse_currency"]
