from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Endpoint:
    description: str
    url: str
    example: str


HOME_DESCRIPTION = (
    "exchange rate and bank day http api with only plain text response values (data sourced from riksbank.se)"
)

ENDPOINTS: list[Endpoint] = [
    Endpoint("latest exchange rate for a currency pair", "/exchange/rate/{base}/{counter}", "/exchange/rate/sek/nok"),
    Endpoint(
        "exchange rate for currency pair on a specific date",
        "/exchange/rate/{base}/{counter}/{date}",
        "/exchange/rate/sek/nok/2019-01-01",
    ),
    Endpoint(
        "convert currency at the latest exchange rate",
        "/exchange/{value}/{base}/{counter}",
        "/exchange/1200.5/sek/nok",
    ),
    Endpoint(
        "convert currency at the exchange rate of a specific date",
        "/exchange/{value}/{base}/{counter}/{date}",
        "/exchange/1200.5/sek/nok/2019-01-01",
    ),
    Endpoint("whether today is a swedish bank day", "/bank-day", "/bank-day"),
    Endpoint("whether a specific date is a swedish bank day", "/bank-day/{date}", "/bank-day/2019-01-01"),
]


def render_home(host: str) -> str:
    rows = [("description", "url", "example")]
    rows.extend((ep.description, ep.url, f"{host}{ep.example}") for ep in ENDPOINTS)
    desc_width = max(len(row[0]) for row in rows)
    url_width = max(len(row[1]) for row in rows)

    lines = [HOME_DESCRIPTION, ""]
    for desc, url, example in rows:
        lines.append(f"{desc.ljust(desc_width)} {url.ljust(url_width)} {example}")
    return "\n".join(lines) + "\n"


__all__ = ["ENDPOINTS", "Endpoint", "HOME_DESCRIPTION", "render_home"]
