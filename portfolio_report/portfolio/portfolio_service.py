"""Portfolio report orchestration service."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, Sequence, TypeVar

from portfolio_report.lib.formatters import render_price_list, render_valuation_table
from portfolio_report.lib.report_sink import ReportSink
from portfolio_report.portfolio.classifier import build_batch
from portfolio_report.portfolio.data_loader import load_portfolio_csv
from portfolio_report.portfolio.enrichment import HoldingEnricher, summarize_holdings
from portfolio_report.portfolio.models import (
    EnrichedHolding,
    FullValuationRow,
    PortfolioBatch,
    PortfolioError,
    PortfolioRunResult,
    PriceOnlyRow,
    ReportMode,
    SimpleQuote,
    ValidationIssue,
)
from portfolio_report.services.quote_service import QuoteService

LOGGER = logging.getLogger(__name__)

RowT = TypeVar("RowT")
OutT = TypeVar("OutT")


def _quote_unavailable_issue(code: str) -> ValidationIssue:
    return ValidationIssue(field="code", code="quote_unavailable", message=f"Quote unavailable for {code}.")


class PortfolioService:
    def __init__(self, quotes: QuoteService, sink: ReportSink, max_workers: int = 1) -> None:
        self.quotes = quotes
        self.enricher = HoldingEnricher(quotes)
        self.sink = sink
        self.max_workers = max(1, max_workers)

    def _map_rows(self, call: Callable[[RowT], OutT], rows: Sequence[RowT]) -> list[OutT]:
        # executor.map yields in submission order, so output keeps file row order.
        if self.max_workers == 1 or len(rows) <= 1:
            return [call(row) for row in rows]
        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(rows))) as executor:
            return list(executor.map(call, rows))

    def _simple_quote(self, row: PriceOnlyRow) -> SimpleQuote:
        result = self.quotes.get_security_price(row.code)
        return SimpleQuote(code=row.code.upper(), price=result.data if result.ok else None)

    def _price_only_report(self, batch: PortfolioBatch) -> tuple[str, list[ValidationIssue]]:
        rows = [row for row in batch.rows if isinstance(row, PriceOnlyRow)]
        quotes = self._map_rows(self._simple_quote, rows)
        issues = [_quote_unavailable_issue(quote.code) for quote in quotes if quote.price is None]
        return render_price_list(quotes), issues

    def _full_valuation_report(self, batch: PortfolioBatch) -> tuple[str, list[ValidationIssue]]:
        rows = [row for row in batch.rows if isinstance(row, FullValuationRow)]
        holdings: list[EnrichedHolding] = self._map_rows(self.enricher.enrich_row, rows)
        summary = summarize_holdings(holdings)
        issues = [_quote_unavailable_issue(holding.code) for holding in holdings if holding.current_price is None]
        return render_valuation_table(holdings, summary), issues

    def run_portfolio(self, file_path: str) -> PortfolioRunResult:
        try:
            frame = load_portfolio_csv(file_path)
            batch = build_batch(frame, file_path)
        except PortfolioError as error:
            LOGGER.error("portfolio run aborted: path=%s code=%s", file_path, error.code)
            self.sink.error(error.message)
            return PortfolioRunResult(ok=False, file_path=file_path, error=error)

        LOGGER.info(
            "portfolio batch classified: path=%s mode=%s rows=%s skipped=%s",
            file_path,
            batch.mode.value,
            len(batch.rows),
            len(batch.issues),
        )
        if batch.mode is ReportMode.FULL_VALUATION:
            report, quote_issues = self._full_valuation_report(batch)
        else:
            report, quote_issues = self._price_only_report(batch)

        issues = list(batch.issues) + quote_issues
        self.sink.report(report)
        for issue in issues:
            self.sink.warning(issue.message)
        return PortfolioRunResult(ok=True, file_path=file_path, mode=batch.mode, report=report, issues=issues)

    def run_portfolios(self, file_paths: Iterable[str]) -> list[PortfolioRunResult]:
        return [self.run_portfolio(path) for path in file_paths]
