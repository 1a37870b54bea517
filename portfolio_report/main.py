"""Command-line entrypoints for the portfolio quote report."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from portfolio_report.config.settings import Settings, get_settings
from portfolio_report.lib.formatters import render_exchange_rate
from portfolio_report.lib.report_sink import ConsoleSink, ReportSink
from portfolio_report.portfolio.portfolio_service import PortfolioService
from portfolio_report.providers.yahoo_csv import YahooCsvClient
from portfolio_report.services.quote_service import QuoteService


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_quote_service(settings: Settings) -> QuoteService:
    client = YahooCsvClient(
        base_url=settings.quote_base_url,
        market_suffix=settings.market_suffix,
        timeout_seconds=settings.request_timeout_seconds,
    )
    return QuoteService(client)


def build_portfolio_service(settings: Settings, sink: ReportSink | None = None) -> PortfolioService:
    return PortfolioService(
        quotes=build_quote_service(settings),
        sink=sink or ConsoleSink(),
        max_workers=settings.quote_max_workers,
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Value ASX holdings from one or more CSV files.")
    parser.add_argument("paths", nargs="+", help="Holdings files (.csv or .txt)")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings)
    service = build_portfolio_service(settings)
    results = service.run_portfolios(args.paths)
    return 0 if all(result.ok for result in results) else 1


def fx_main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Look up one currency exchange rate.")
    parser.add_argument("from_currency", help="Three-letter source currency, e.g. AUD")
    parser.add_argument("to_currency", help="Three-letter target currency, e.g. USD")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings)
    sink = ConsoleSink()
    result = build_quote_service(settings).get_exchange_rate(args.from_currency, args.to_currency)
    if not result.ok:
        sink.error(result.error.message if result.error else "Exchange rate unavailable.")
        return 1
    sink.report(render_exchange_rate(args.from_currency, args.to_currency, result.data))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
