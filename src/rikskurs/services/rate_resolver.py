from __future__ import annotations

import logging
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable

from rikskurs.domain.currency import Currency, CurrencyPair
from rikskurs.domain.errors import NoConversionRate, NoDataForPeriod
from rikskurs.domain.observations import Aggregation, RateObservation

from .provider import RateDataProvider

logger = logging.getLogger(__name__)

# Wide enough to bridge a full week without quotes (holidays plus weekends).
LOOKBACK_DAYS = 7


def lookback_window(as_of: date, days: int = LOOKBACK_DAYS) -> tuple[date, date]:
    if days < 0:
        raise ValueError("days must be >= 0")
    return as_of - timedelta(days=days), as_of


def select_latest(
    observations: Iterable[RateObservation],
    pair: CurrencyPair,
    window: tuple[date, date] | None = None,
) -> RateObservation:
    """Pick the most recent observation for exactly ``pair``, optionally inside an inclusive ``window``.

    Same-date observations keep the provider's order, so the first one seen wins.
    An absent value on the latest date is terminal: older observations are never
    used in its place.
    """
    matching = [obs for obs in observations if obs.base == pair.base and obs.counter == pair.counter]
    if window is not None:
        from_date, to_date = window
        matching = [obs for obs in matching if from_date <= obs.date <= to_date]
    if not matching:
        raise NoDataForPeriod()

    matching.sort(key=lambda obs: obs.date, reverse=True)
    latest = matching[0]
    if latest.value is None:
        raise NoConversionRate()
    return latest


class RateResolver:
    def __init__(self, provider: RateDataProvider, *, lookback_days: int = LOOKBACK_DAYS) -> None:
        self.provider = provider
        self.lookback_days = lookback_days

    def resolve_rate(
        self,
        base: Currency,
        counter: Currency,
        as_of: date,
        *,
        timeout: float | None = None,
    ) -> Decimal:
        pair = CurrencyPair(base=base, counter=counter)
        from_date, to_date = lookback_window(as_of, self.lookback_days)
        logger.debug("Resolving %s as of %s over [%s, %s]", pair, as_of, from_date, to_date)

        observations = self.provider.query_rates(
            [pair],
            from_date,
            to_date,
            aggregation=Aggregation.DAILY,
            timeout=timeout,
        )
        try:
            latest = select_latest(observations, pair, (from_date, to_date))
        except (NoDataForPeriod, NoConversionRate) as exc:
            logger.info("No rate for %s as of %s: %s", pair, as_of, exc)
            raise

        logger.debug("Resolved %s as of %s to %s (observed %s)", pair, as_of, latest.value, latest.date)
        assert latest.value is not None
        return latest.value

    def exchange_rate(
        self,
        base: Currency,
        counter: Currency,
        as_of: date,
        *,
        timeout: float | None = None,
    ) -> Decimal:
        return self.resolve_rate(base, counter, as_of, timeout=timeout)

    def convert(
        self,
        amount: Decimal,
        base: Currency,
        counter: Currency,
        as_of: date,
        *,
        timeout: float | None = None,
    ) -> Decimal:
        rate = self.resolve_rate(base, counter, as_of, timeout=timeout)
        return amount * rate


__all__ = ["LOOKBACK_DAYS", "RateResolver", "lookback_window", "select_latest"]
