from __future__ import annotations

from datetime import date

import pytest

from rikskurs.domain.errors import NoDataForPeriod
from rikskurs.domain.observations import DayStatus
from rikskurs.services.bank_days import BankDayResolver
from rikskurs.services.riksbank_client import RiksbankAPIError
from tests.helpers.stub_provider import StubRateProvider


@pytest.mark.parametrize("flag", [True, False])
def test_is_bank_day_returns_provider_flag(provider: StubRateProvider, flag: bool) -> None:
    day = date(2019, 1, 7)
    provider.days = [DayStatus(date=day, is_bank_day=flag)]

    assert BankDayResolver(provider).is_bank_day(day) is flag
    assert provider.day_queries == [{"from_date": day, "to_date": day, "timeout": None}]


def test_is_bank_day_forwards_timeout(provider: StubRateProvider) -> None:
    day = date(2019, 1, 6)
    provider.days = [DayStatus(date=day, is_bank_day=False)]

    BankDayResolver(provider).is_bank_day(day, timeout=3.0)

    assert provider.day_queries[0]["timeout"] == 3.0


def test_is_bank_day_fails_on_empty_response(provider: StubRateProvider) -> None:
    with pytest.raises(NoDataForPeriod):
        BankDayResolver(provider).is_bank_day(date(2019, 1, 7))


def test_day_status_exposes_calendar_metadata(provider: StubRateProvider) -> None:
    day = date(2019, 1, 7)
    provider.days = [DayStatus(date=day, is_bank_day=True, week_year=2019, week_number=2, quarter=1)]

    status = BankDayResolver(provider).day_status(day)

    assert status.week_number == 2
    assert status.quarter == 1


def test_provider_failure_propagates(provider: StubRateProvider) -> None:
    provider.error = RiksbankAPIError("boom")

    with pytest.raises(RiksbankAPIError):
        BankDayResolver(provider).is_bank_day(date(2019, 1, 7))
