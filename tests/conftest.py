from decimal import Decimal

import pytest

from portfolio_report.lib.report_sink import MemorySink
from portfolio_report.portfolio.portfolio_service import PortfolioService
from portfolio_report.providers.http import ProviderError
from portfolio_report.providers.yahoo_csv import YahooCsvClient
from portfolio_report.services.quote_service import QuoteService


class StubQuoteClient(YahooCsvClient):
    """Serves prices from a dict; unknown codes fail like the remote source does."""

    def __init__(self, prices: dict[str, str]) -> None:
        super().__init__("http://quotes.invalid/d/quotes.csv")
        self.prices = {code: Decimal(price) for code, price in prices.items()}
        self.calls: list[str] = []

    def get_security_price(self, code: str) -> Decimal:
        self.calls.append(code)
        if code not in self.prices:
            raise ProviderError("yahoo_csv", "BAD_RESPONSE", f"Non-numeric quote for {code}.AX.")
        return self.prices[code]


@pytest.fixture
def make_service():
    def _make(prices: dict[str, str], max_workers: int = 1) -> tuple[PortfolioService, MemorySink, StubQuoteClient]:
        client = StubQuoteClient(prices)
        sink = MemorySink()
        service = PortfolioService(QuoteService(client), sink, max_workers=max_workers)
        return service, sink, client

    return _make
