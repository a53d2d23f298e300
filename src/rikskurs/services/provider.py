from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from rikskurs.domain.currency import CurrencyPair
from rikskurs.domain.observations import Aggregation, DayStatus, RateObservation


class RateDataProvider(Protocol):
    """Range queries against an upstream rate source.

    ``timeout`` is the caller's time budget in seconds; ``None`` means the
    provider's own default. Failures are raised as-is for the caller to handle.
    """

    def query_rates(
        self,
        pairs: Sequence[CurrencyPair],
        from_date: date,
        to_date: date,
        *,
        aggregation: Aggregation = Aggregation.DAILY,
        timeout: float | None = None,
    ) -> list[RateObservation]: ...

    def query_days(self, from_date: date, to_date: date, *, timeout: float | None = None) -> list[DayStatus]: ...


__all__ = ["RateDataProvider"]
