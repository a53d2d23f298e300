from typing import Annotated

from fastapi import Depends, Request

from rikskurs.config import AppSettings, config
from rikskurs.services.bank_days import BankDayResolver
from rikskurs.services.provider import RateDataProvider
from rikskurs.services.rate_resolver import RateResolver


def get_settings() -> AppSettings:
    return config()


def get_provider(request: Request) -> RateDataProvider:
    return request.app.state.provider


def get_rate_resolver(provider: Annotated[RateDataProvider, Depends(get_provider)]) -> RateResolver:
    return RateResolver(provider)


def get_bank_day_resolver(provider: Annotated[RateDataProvider, Depends(get_provider)]) -> BankDayResolver:
    return BankDayResolver(provider)
