from __future__ import annotations

import logging
from datetime import date

from rikskurs.domain.errors import NoDataForPeriod
from rikskurs.domain.observations import DayStatus

from .provider import RateDataProvider

logger = logging.getLogger(__name__)


class BankDayResolver:
    def __init__(self, provider: RateDataProvider) -> None:
        self.provider = provider

    def day_status(self, day: date, *, timeout: float | None = None) -> DayStatus:
        days = self.provider.query_days(day, day, timeout=timeout)
        if not days:
            logger.info("Provider returned no calendar entry for %s", day)
            raise NoDataForPeriod(f"no calendar data for {day.isoformat()}")
        return days[0]

    def is_bank_day(self, day: date, *, timeout: float | None = None) -> bool:
        return self.day_status(day, timeout=timeout).is_bank_day


__all__ = ["BankDayResolver"]
