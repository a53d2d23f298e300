from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Sequence

from rikskurs.domain.currency import Currency, CurrencyPair
from rikskurs.domain.observations import Aggregation, DayStatus, RateObservation


def observation(base: Currency, counter: Currency, day: date, value: str | None) -> RateObservation:
    return RateObservation(
        base=base,
        counter=counter,
        date=day,
        value=Decimal(value) if value is not None else None,
    )


@dataclass
class StubRateProvider:
    """Returns canned observations and records every query it receives."""

    observations: list[RateObservation] = field(default_factory=list)
    days: list[DayStatus] = field(default_factory=list)
    error: Exception | None = None
    rate_queries: list[dict[str, Any]] = field(default_factory=list)
    day_queries: list[dict[str, Any]] = field(default_factory=list)
    closed: bool = False

    def query_rates(
        self,
        pairs: Sequence[CurrencyPair],
        from_date: date,
        to_date: date,
        *,
        aggregation: Aggregation = Aggregation.DAILY,
        timeout: float | None = None,
    ) -> list[RateObservation]:
        self.rate_queries.append(
            {
                "pairs": list(pairs),
                "from_date": from_date,
                "to_date": to_date,
                "aggregation": aggregation,
                "timeout": timeout,
            }
        )
        if self.error is not None:
            raise self.error
        return list(self.observations)

    def query_days(self, from_date: date, to_date: date, *, timeout: float | None = None) -> list[DayStatus]:
        self.day_queries.append({"from_date": from_date, "to_date": to_date, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return list(self.days)

    def close(self) -> None:
        self.closed = True
