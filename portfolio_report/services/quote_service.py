"""Quote lookups that report failure as data instead of raising."""

from __future__ import annotations

import logging
import time
from decimal import Decimal
from typing import Callable

from portfolio_report.providers.http import ProviderError
from portfolio_report.providers.yahoo_csv import YahooCsvClient
from portfolio_report.services.base import ServiceResult, normalize_code, normalize_currency, unavailable

LOGGER = logging.getLogger(__name__)


class QuoteService:
    def __init__(self, client: YahooCsvClient) -> None:
        self.client = client

    def _lookup(self, operation: str, subject: str, call: Callable[[], Decimal]) -> ServiceResult[Decimal]:
        started = time.perf_counter()
        try:
            price = call()
        except ProviderError as error:
            elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
            LOGGER.warning(
                "quote lookup failed: op=%s subject=%s provider=%s code=%s status=%s latency_ms=%s",
                operation,
                subject,
                error.provider,
                error.code,
                error.status,
                elapsed_ms,
            )
            return unavailable(f"Quote unavailable for {subject}.", error)
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
        LOGGER.info(
            "quote lookup complete: op=%s subject=%s price=%s latency_ms=%s",
            operation,
            subject,
            price,
            elapsed_ms,
        )
        return ServiceResult(data=price, source="yahoo_csv", fetched_at=time.time())

    def get_security_price(self, code: str) -> ServiceResult[Decimal]:
        try:
            clean = normalize_code(code)
        except ValueError:
            return unavailable("Quote unavailable: empty security code.")
        return self._lookup("get_security_price", clean, lambda: self.client.get_security_price(clean))

    def get_exchange_rate(self, from_currency: str, to_currency: str) -> ServiceResult[Decimal]:
        try:
            source = normalize_currency(from_currency)
            target = normalize_currency(to_currency)
        except ValueError:
            return unavailable("Exchange rate unavailable: empty currency code.")
        pair = f"{source}/{target}"
        return self._lookup("get_exchange_rate", pair, lambda: self.client.get_exchange_rate(source, target))
