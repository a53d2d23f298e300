from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Sequence

import requests
from requests import Response
from requests.adapters import HTTPAdapter
from urllib3.util import Retry

from rikskurs.config import AppSettings
from rikskurs.domain.currency import Currency, CurrencyPair
from rikskurs.domain.observations import Aggregation, DayStatus, RateObservation

logger = logging.getLogger(__name__)

# API docs: https://developer.api.riksbank.se/api-details#api=swea-api
HOME_CURRENCY = Currency("SEK")


class RiksbankAPIError(Exception):
    def __init__(self, message: str, *, status_code: int | None = None, payload: Any | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class RiksbankTimeoutError(RiksbankAPIError):
    pass


def series_id(currency: Currency) -> str:
    """SWEA series carrying the daily mid-price fixing of ``currency`` against the krona."""
    if currency == HOME_CURRENCY:
        return HOME_CURRENCY
    return f"SEK{currency}PMI"


class RiksbankClient:
    def __init__(
        self,
        *,
        base_url: str = "https://api.riksbank.se/swea/v1",
        api_key: str | None = None,
        timeout: float = 10.0,
        session: requests.Session | None = None,
        retry_attempts: int = 3,
        retry_backoff_seconds: float = 1,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._session = session or requests.Session()

        retries = Retry(
            total=retry_attempts,
            backoff_factor=retry_backoff_seconds,
            status_forcelist=[429],
            allowed_methods=frozenset({"GET"}),
            raise_on_status=False,
            # Retry waits stay within the request timeout.
            respect_retry_after_header=False,
            backoff_max=timeout,
        )
        adapter = HTTPAdapter(max_retries=retries)
        self._session.mount("https://", adapter)
        self._session.mount("http://", adapter)

    def close(self) -> None:
        self._session.close()

    @classmethod
    def from_settings(cls, settings: AppSettings) -> RiksbankClient:
        return cls(
            base_url=settings.riksbank_base_url,
            api_key=settings.riksbank_api_key,
            timeout=settings.request_timeout,
            retry_attempts=settings.retry_attempts,
            retry_backoff_seconds=settings.retry_backoff_seconds,
        )

    def query_rates(
        self,
        pairs: Sequence[CurrencyPair],
        from_date: date,
        to_date: date,
        *,
        aggregation: Aggregation = Aggregation.DAILY,
        timeout: float | None = None,
    ) -> list[RateObservation]:
        if aggregation is not Aggregation.DAILY:
            raise ValueError(f"cross rates are only published with daily aggregation, got {aggregation.name}")

        observations: list[RateObservation] = []
        for pair in pairs:
            path = (
                f"/CrossRates/{series_id(pair.base)}/{series_id(pair.counter)}"
                f"/{from_date.isoformat()}/{to_date.isoformat()}"
            )
            payload = self._request("GET", path, timeout=timeout)
            for entry in self._expect_list(payload):
                observations.append(self._parse_cross_rate(entry, pair))
        return observations

    def query_days(self, from_date: date, to_date: date, *, timeout: float | None = None) -> list[DayStatus]:
        path = f"/CalendarDays/{from_date.isoformat()}/{to_date.isoformat()}"
        payload = self._request("GET", path, timeout=timeout)
        return [self._parse_calendar_day(entry) for entry in self._expect_list(payload)]

    def _request(self, method: str, path: str, *, timeout: float | None = None) -> Any:
        url = f"{self.base_url}{path}"
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Ocp-Apim-Subscription-Key"] = self.api_key
        effective_timeout = self.timeout if timeout is None else timeout

        logger.debug("Riksbank request %s %s (timeout %.1fs)", method, url, effective_timeout)
        try:
            response = self._session.request(method, url, headers=headers, timeout=effective_timeout)
            if response.status_code == 404:
                # SWEA answers 404 when a window holds no observations at all.
                return []
            response.raise_for_status()
        except requests.HTTPError as exc:
            resp = exc.response
            status_code = getattr(resp, "status_code", None)
            message, error_payload = self._extract_error(resp)
            logger.warning("Riksbank request %s failed with status %s: %s", url, status_code, message)
            raise RiksbankAPIError(message, status_code=status_code, payload=error_payload) from exc
        except requests.Timeout as exc:
            logger.warning("Riksbank request %s timed out after %.1fs", url, effective_timeout)
            raise RiksbankTimeoutError("Riksbank request timed out") from exc
        except requests.RequestException as exc:
            status_code = getattr(getattr(exc, "response", None), "status_code", None)
            logger.warning("Riksbank request %s failed: %s", url, exc)
            raise RiksbankAPIError("Riksbank request failed", status_code=status_code) from exc

        if response.status_code == 204 or not response.content:
            return []

        try:
            return response.json()
        except ValueError as exc:
            raise RiksbankAPIError("Riksbank returned invalid JSON", payload=response.text) from exc

    @staticmethod
    def _expect_list(payload: Any) -> list[dict[str, Any]]:
        if not isinstance(payload, list) or not all(isinstance(entry, dict) for entry in payload):
            raise RiksbankAPIError("Riksbank returned unexpected payload type", payload=payload)
        return payload

    @classmethod
    def _parse_cross_rate(cls, entry: dict[str, Any], pair: CurrencyPair) -> RateObservation:
        date_raw = entry.get("date")
        if date_raw is None:
            raise RiksbankAPIError("Riksbank cross rate entry missing date", payload=entry)
        return RateObservation(
            base=pair.base,
            counter=pair.counter,
            date=cls._to_date(date_raw, entry),
            value=cls._to_decimal(entry.get("value"), entry),
        )

    @classmethod
    def _parse_calendar_day(cls, entry: dict[str, Any]) -> DayStatus:
        date_raw = entry.get("calendarDate")
        bank_day_raw = entry.get("swedishBankday")
        if date_raw is None or not isinstance(bank_day_raw, bool):
            raise RiksbankAPIError("Riksbank calendar entry missing calendarDate or swedishBankday", payload=entry)
        return DayStatus(
            date=cls._to_date(date_raw, entry),
            is_bank_day=bank_day_raw,
            week_year=entry.get("weekYear"),
            week_number=entry.get("weekNumber"),
            quarter=entry.get("quarterNumber"),
        )

    @staticmethod
    def _to_date(value: Any, entry: dict[str, Any]) -> date:
        try:
            return date.fromisoformat(str(value)[:10])
        except ValueError as exc:
            raise RiksbankAPIError(f"Riksbank returned malformed date {value!r}", payload=entry) from exc

    @staticmethod
    def _to_decimal(value: Any, entry: dict[str, Any]) -> Decimal | None:
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            raise RiksbankAPIError(f"Riksbank returned malformed rate {value!r}", payload=entry)
        try:
            rate = Decimal(str(value))
        except InvalidOperation as exc:
            raise RiksbankAPIError(f"Riksbank returned malformed rate {value!r}", payload=entry) from exc
        if not rate.is_finite():
            raise RiksbankAPIError(f"Riksbank returned malformed rate {value!r}", payload=entry)
        return rate

    @staticmethod
    def _extract_error(response: Response | None) -> tuple[str, Any | None]:
        message = "Riksbank request failed"
        payload: Any | None = None
        if response is None:
            return message, payload

        try:
            payload = response.json()
            if isinstance(payload, dict):
                message = payload.get("message") or payload.get("title") or message
        except ValueError:
            payload = response.text
        return message, payload


__all__ = ["HOME_CURRENCY", "RiksbankAPIError", "RiksbankClient", "RiksbankTimeoutError", "series_id"]
