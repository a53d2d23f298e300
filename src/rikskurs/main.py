from __future__ import annotations

import argparse
import logging
import sys
from contextlib import closing
from typing import Sequence

import uvicorn

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
from rikskurs.services.provider import RateDataProvider
from rikskurs.services.rate_resolver import RateResolver
from rikskurs.services.riksbank_client import RiksbankAPIError, RiksbankClient

logger = logging.getLogger(__name__)


def serve(settings: AppSettings, *, host: str, port: int, certfile: str | None, keyfile: str | None) -> None:
    if bool(certfile) != bool(keyfile):
        raise SystemExit("--certfile and --keyfile must be given together")

    logger.info("Serving on %s:%d (%s)", host, port, "https" if certfile else "http")
    uvicorn.run(
        "rikskurs.api.app:app",
        host=host,
        port=port,
        ssl_certfile=certfile,
        ssl_keyfile=keyfile,
        log_level=settings.log_level.lower(),
    )


def run_command(args: argparse.Namespace, settings: AppSettings, provider: RateDataProvider) -> str:
    as_of = parse_date_param(getattr(args, "date", None), default_as_of(settings))
    if args.command == "bank-day":
        return format_bool(BankDayResolver(provider).is_bank_day(as_of))

    resolver = RateResolver(provider)
    base = parse_currency_param(args.base, name="base")
    counter = parse_currency_param(args.counter, name="counter")
    if args.command == "convert":
        amount = parse_value_param(args.value)
        return format_decimal(resolver.convert(amount, base, counter, as_of))
    return format_decimal(resolver.exchange_rate(base, counter, as_of))


def build_parser(settings: AppSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Exchange rates and bank days sourced from riksbank.se.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the plain-text HTTP API.")
    serve_parser.add_argument("--host", default=settings.host)
    serve_parser.add_argument("--port", type=int, default=settings.port)
    serve_parser.add_argument("--certfile", default=settings.ssl_certfile, help="TLS certificate (PEM).")
    serve_parser.add_argument("--keyfile", default=settings.ssl_keyfile, help="TLS private key (PEM).")

    rate_parser = subparsers.add_parser("rate", help="Print the exchange rate for a currency pair.")
    rate_parser.add_argument("base")
    rate_parser.add_argument("counter")
    rate_parser.add_argument("--date", default=None, help="As-of date (YYYY-MM-DD).")

    convert_parser = subparsers.add_parser("convert", help="Convert an amount between two currencies.")
    convert_parser.add_argument("value")
    convert_parser.add_argument("base")
    convert_parser.add_argument("counter")
    convert_parser.add_argument("--date", default=None, help="As-of date (YYYY-MM-DD).")

    day_parser = subparsers.add_parser("bank-day", help="Print whether a date is a Swedish bank day.")
    day_parser.add_argument("--date", default=None, help="Date to check (YYYY-MM-DD).")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    settings = config()
    logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s %(message)s")
    args = build_parser(settings).parse_args(argv)

    if args.command == "serve":
        serve(settings, host=args.host, port=args.port, certfile=args.certfile, keyfile=args.keyfile)
        return 0

    try:
        with closing(RiksbankClient.from_settings(settings)) as client:
            print(run_command(args, settings, client))
    except (RequestParameterError, RateResolutionError, RiksbankAPIError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
