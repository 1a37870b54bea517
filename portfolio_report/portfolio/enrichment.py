"""Per-holding valuation and batch totals."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from portfolio_report.portfolio.models import EnrichedHolding, FullValuationRow, PortfolioSummary
from portfolio_report.services.quote_service import QuoteService


class HoldingEnricher:
    def __init__(self, quotes: QuoteService) -> None:
        self.quotes = quotes

    def enrich(self, code: str, company_name: str, quantity: int, buy_price: Decimal) -> EnrichedHolding:
        result = self.quotes.get_security_price(code)
        return EnrichedHolding.build(
            code=code,
            company_name=company_name,
            quantity=quantity,
            buy_price=buy_price,
            current_price=result.data if result.ok else None,
        )

    def enrich_row(self, row: FullValuationRow) -> EnrichedHolding:
        return self.enrich(row.code, row.company_name, row.quantity, row.buy_price)


def summarize_holdings(holdings: Iterable[EnrichedHolding]) -> PortfolioSummary:
    """Totals cover priced holdings only; unpriced ones are counted, not zeroed."""
    total_value = Decimal("0")
    total_profit = Decimal("0")
    priced = 0
    unpriced = 0
    for holding in holdings:
        if holding.value is None or holding.profit is None:
            unpriced += 1
            continue
        priced += 1
        total_value += holding.value
        total_profit += holding.profit
    return PortfolioSummary(
        total_value=total_value,
        total_profit=total_profit,
        priced_count=priced,
        unpriced_count=unpriced,
    )
