"""CSV quote adapter: one comma-separated record per symbol lookup."""

from __future__ import annotations

import csv
from decimal import Decimal, InvalidOperation

from portfolio_report.providers.http import ProviderError, fetch_text
from portfolio_report.providers.models import NormalizedQuote

# s = symbol, n = name, l1 = last trade price
QUOTE_FIELDS = "snl1"
PRICE_FIELD_INDEX = 2
MAX_QUOTE = Decimal("1e9")


def to_decimal(value: str | None) -> Decimal | None:
    if value is None:
        return None
    clean = value.strip().replace(",", "")
    if not clean:
        return None
    try:
        out = Decimal(clean)
    except InvalidOperation:
        return None
    if not out.is_finite():
        return None
    return out


def parse_quote_record(body: str, symbol: str) -> NormalizedQuote:
    lines = [line for line in body.splitlines() if line.strip()]
    if not lines:
        raise ProviderError("yahoo_csv", "BAD_RESPONSE", f"Empty quote response for {symbol}.")
    fields = next(csv.reader([lines[0]], skipinitialspace=True))
    if len(fields) <= PRICE_FIELD_INDEX:
        raise ProviderError("yahoo_csv", "BAD_RESPONSE", f"Malformed quote record for {symbol}.")
    price = to_decimal(fields[PRICE_FIELD_INDEX])
    if price is None or price < 0 or price > MAX_QUOTE:
        raise ProviderError("yahoo_csv", "BAD_RESPONSE", f"Non-numeric quote for {symbol}.")
    name = fields[1].strip() or None
    return NormalizedQuote(symbol=symbol, name=name, price=price, source="yahoo_csv")


class YahooCsvClient:
    def __init__(self, base_url: str, market_suffix: str = ".AX", timeout_seconds: float = 15.0) -> None:
        self.base_url = base_url
        self.market_suffix = market_suffix
        self.timeout_seconds = timeout_seconds

    def security_symbol(self, code: str) -> str:
        return f"{code.strip().upper()}{self.market_suffix}"

    @staticmethod
    def currency_pair_symbol(from_currency: str, to_currency: str) -> str:
        return f"{from_currency.strip().upper()}{to_currency.strip().upper()}=X"

    def get_quote(self, symbol: str) -> NormalizedQuote:
        body = fetch_text(
            self.base_url,
            provider="yahoo_csv",
            timeout_seconds=self.timeout_seconds,
            params={"s": symbol, "f": QUOTE_FIELDS},
        )
        return parse_quote_record(body, symbol)

    def get_security_price(self, code: str) -> Decimal:
        return self.get_quote(self.security_symbol(code)).price

    def get_exchange_rate(self, from_currency: str, to_currency: str) -> Decimal:
        return self.get_quote(self.currency_pair_symbol(from_currency, to_currency)).price
