from .bank_days import BankDayResolver
from .provider import RateDataProvider
from .rate_resolver import LOOKBACK_DAYS, RateResolver
from .riksbank_client import RiksbankAPIError, RiksbankClient, RiksbankTimeoutError

__all__ = [
    "BankDayResolver",
    "LOOKBACK_DAYS",
    "RateDataProvider",
    "RateResolver",
    "RiksbankAPIError",
    "RiksbankClient",
    "RiksbankTimeoutError",
]
