import logging
from contextlib import asynccontextmanager
from time import perf_counter
from typing import Annotated, AsyncGenerator, Awaitable, Callable

from fastapi import Depends, FastAPI, Request, Response
from fastapi.responses import PlainTextResponse

from rikskurs.api.dependencies import get_bank_day_resolver, get_rate_resolver, get_settings
from rikskurs.api.endpoints import render_home
from rikskurs.api.params import (
    format_bool,
    format_decimal,
    parse_currency_param,
    parse_date_param,
    parse_value_param,
)
from rikskurs.config import AppSettings, config, default_as_of
from rikskurs.domain.errors import RateResolutionError, RequestParameterError
from rikskurs.services.bank_days import BankDayResolver
from rikskurs.services.rate_resolver import RateResolver
from rikskurs.services.riksbank_client import RiksbankAPIError, RiksbankClient, RiksbankTimeoutError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI) -> AsyncGenerator[None, None]:
    client = RiksbankClient.from_settings(config())
    fastapi_app.state.provider = client
    yield
    client.close()


app = FastAPI(lifespan=lifespan, default_response_class=PlainTextResponse)


@app.middleware("http")
async def log_process_time(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    start_time = perf_counter()
    response = await call_next(request)
    process_time = perf_counter() - start_time
    logger.info("%s %s -> %d in %.4fs", request.method, request.url.path, response.status_code, process_time)
    return response


@app.exception_handler(RequestParameterError)
async def request_parameter_error(request: Request, exc: RequestParameterError) -> PlainTextResponse:
    return PlainTextResponse(str(exc), status_code=422)


@app.exception_handler(RateResolutionError)
async def rate_resolution_error(request: Request, exc: RateResolutionError) -> PlainTextResponse:
    return PlainTextResponse(str(exc), status_code=404)


@app.exception_handler(RiksbankAPIError)
async def provider_error(request: Request, exc: RiksbankAPIError) -> PlainTextResponse:
    status_code = 504 if isinstance(exc, RiksbankTimeoutError) else 502
    return PlainTextResponse(str(exc), status_code=status_code)


@app.get("/")
def home(request: Request) -> PlainTextResponse:
    host = request.headers.get("host", request.url.netloc)
    return PlainTextResponse(render_home(host))


@app.get("/exchange/rate/{base}/{counter}")
@app.get("/exchange/rate/{base}/{counter}/{date}")
def exchange_rate(
    base: str,
    counter: str,
    resolver: Annotated[RateResolver, Depends(get_rate_resolver)],
    settings: Annotated[AppSettings, Depends(get_settings)],
    date: str | None = None,
) -> PlainTextResponse:
    as_of = parse_date_param(date, default_as_of(settings))
    base_currency = parse_currency_param(base, name="base")
    counter_currency = parse_currency_param(counter, name="counter")

    rate = resolver.exchange_rate(base_currency, counter_currency, as_of, timeout=settings.request_timeout)
    return PlainTextResponse(format_decimal(rate))


@app.get("/exchange/{value}/{base}/{counter}")
@app.get("/exchange/{value}/{base}/{counter}/{date}")
def exchange(
    value: str,
    base: str,
    counter: str,
    resolver: Annotated[RateResolver, Depends(get_rate_resolver)],
    settings: Annotated[AppSettings, Depends(get_settings)],
    date: str | None = None,
) -> PlainTextResponse:
    amount = parse_value_param(value)
    as_of = parse_date_param(date, default_as_of(settings))
    base_currency = parse_currency_param(base, name="base")
    counter_currency = parse_currency_param(counter, name="counter")

    converted = resolver.convert(amount, base_currency, counter_currency, as_of, timeout=settings.request_timeout)
    return PlainTextResponse(format_decimal(converted))


@app.get("/bank-day")
@app.get("/bank-day/{date}")
def bank_day(
    resolver: Annotated[BankDayResolver, Depends(get_bank_day_resolver)],
    settings: Annotated[AppSettings, Depends(get_settings)],
    date: str | None = None,
) -> PlainTextResponse:
    day = parse_date_param(date, default_as_of(settings))
    return PlainTextResponse(format_bool(resolver.is_bank_day(day, timeout=settings.request_timeout)))
