from decimal import Decimal

from portfolio_report.lib.formatters import (
    SENTINEL,
    ColumnSpec,
    format_currency,
    format_price,
    render_exchange_rate,
    render_price_list,
    render_table,
    render_valuation_table,
)
from portfolio_report.portfolio.enrichment import summarize_holdings
from portfolio_report.portfolio.models import EnrichedHolding, SimpleQuote


def test_format_currency() -> None:
    assert format_currency(Decimal("7000")) == "$7,000.00"
    assert format_currency(Decimal("70"), 3) == "$70.000"
    assert format_currency(Decimal("-500")) == "-$500.00"
    assert format_currency(Decimal("0.005")) == "$0.01"
    assert format_currency(None) == SENTINEL


def test_format_price_uses_sentinel_for_negligible_values() -> None:
    assert format_price(Decimal("0.0001")) == SENTINEL
    assert format_price(Decimal("0")) == SENTINEL
    assert format_price(Decimal("4.2")) == "$4.20"


def test_render_table_aligns_columns() -> None:
    columns = (ColumnSpec("Name", lambda row: row[0], "<"), ColumnSpec("N", lambda row: row[1]))
    lines = render_table(columns, [("a", "1"), ("bbb", "22")])
    assert lines == ["Name   N", "----  --", "a      1", "bbb   22"]


def test_price_list_keeps_input_order() -> None:
    output = render_price_list([SimpleQuote("ZZZ", Decimal("1.5")), SimpleQuote("AAA", None)])
    lines = output.splitlines()
    assert lines[2].startswith("ZZZ")
    assert lines[2].endswith("$1.50")
    assert lines[3].startswith("AAA")
    assert lines[3].endswith(SENTINEL)


def test_valuation_table_sorts_by_company_and_shows_sentinels() -> None:
    holdings = [
        EnrichedHolding.build("WBC", "Westpac", 10, Decimal("20"), None),
        EnrichedHolding.build("CBA", "Commbank", 100, Decimal("70.00"), Decimal("75.00")),
    ]
    output = render_valuation_table(holdings, summarize_holdings(holdings))
    lines = output.splitlines()
    assert lines[0].split() == ["Company", "Shares", "Buy", "Price", "Cost", "Current", "Price", "Value", "Profit"]
    assert lines[2].startswith("Commbank")
    assert "$70.000" in lines[2] and "$7,000.00" in lines[2] and "$7,500.00" in lines[2]
    assert lines[3].startswith("Westpac")
    assert lines[3].count(SENTINEL) == 3
    assert "0.00" not in lines[3].replace("$20.000", "").replace("$200.00", "")
    assert lines[-1].startswith("Total value: $7,500.00  Total profit: $500.00")
    assert "1 holding(s) without a quote excluded" in lines[-1]


def test_render_exchange_rate() -> None:
    assert render_exchange_rate("aud", "usd", Decimal("0.65432")) == "AUD/USD: 0.6543"
    assert render_exchange_rate("AUD", "USD", None) == f"AUD/USD: {SENTINEL}"


def test_format_currency_handles_values_beyond_default_precision() -> None:
    assert format_currency(Decimal("1e27")) == "$1,000,000,000,000,000,000,000,000,000.00"
    assert format_currency(Decimal("-123456789012345678901234567.891"), 3) == "-$123,456,789,012,345,678,901,234,567.891"


def test_summary_line_uses_sentinel_when_nothing_is_priced() -> None:
    holdings = [EnrichedHolding.build("CBA", "Commbank", 100, Decimal("70.00"), None)]
    line = render_valuation_table(holdings, summarize_holdings(holdings)).splitlines()[-1]
    assert line.startswith(f"Total value: {SENTINEL}  Total profit: {SENTINEL}")
    assert "$0.00" not in line
