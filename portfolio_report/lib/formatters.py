"""Report formatting helpers."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import TYPE_CHECKING, Callable, Generic, Literal, Sequence, TypeVar

if TYPE_CHECKING:
    from portfolio_report.portfolio.models import EnrichedHolding, PortfolioSummary, SimpleQuote

SENTINEL = "N/A"
NEGLIGIBLE_PRICE = Decimal("0.001")
COLUMN_GAP = "  "

R = TypeVar("R")


def _rounded(value: Decimal, decimals: int) -> Decimal:
    # quantize raises once the result needs more digits than the context precision
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + decimals + 2)
        return value.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)


def format_currency(value: Decimal | None, decimals: int = 2) -> str:
    if value is None:
        return SENTINEL
    rounded = _rounded(value, decimals)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${rounded.copy_abs():,.{decimals}f}"


def format_price(value: Decimal | None, decimals: int = 2) -> str:
    """Currency, or the sentinel when the quote is missing or negligible."""
    if value is None or abs(value) < NEGLIGIBLE_PRICE:
        return SENTINEL
    return format_currency(value, decimals)


def format_rate(value: Decimal | None, decimals: int = 4) -> str:
    if value is None:
        return SENTINEL
    return f"{_rounded(value, decimals):.{decimals}f}"


@dataclass(frozen=True)
class ColumnSpec(Generic[R]):
    header: str
    render: Callable[[R], str]
    align: Literal["<", ">"] = ">"


def render_table(columns: Sequence[ColumnSpec[R]], rows: Sequence[R]) -> list[str]:
    cells = [[column.render(row) for column in columns] for row in rows]
    widths = [
        max([len(column.header)] + [len(line[index]) for line in cells])
        for index, column in enumerate(columns)
    ]

    def _line(values: Sequence[str]) -> str:
        parts = [f"{value:{column.align}{width}}" for value, column, width in zip(values, columns, widths)]
        return COLUMN_GAP.join(parts).rstrip()

    header = _line([column.header for column in columns])
    rule = COLUMN_GAP.join("-" * width for width in widths)
    return [header, rule] + [_line(line) for line in cells]


PRICE_LIST_COLUMNS: tuple[ColumnSpec[SimpleQuote], ...] = (
    ColumnSpec("Code", lambda quote: quote.code, "<"),
    ColumnSpec("Price", lambda quote: format_price(quote.price)),
)

VALUATION_COLUMNS: tuple[ColumnSpec[EnrichedHolding], ...] = (
    ColumnSpec("Company", lambda h: h.company_name or h.code, "<"),
    ColumnSpec("Shares", lambda h: f"{h.quantity:,}"),
    ColumnSpec("Buy Price", lambda h: format_currency(h.buy_price, 3)),
    ColumnSpec("Cost", lambda h: format_currency(h.cost)),
    ColumnSpec("Current Price", lambda h: format_currency(h.current_price, 3)),
    ColumnSpec("Value", lambda h: format_currency(h.value)),
    ColumnSpec("Profit", lambda h: format_currency(h.profit)),
)


def render_price_list(quotes: Sequence[SimpleQuote]) -> str:
    return "\n".join(render_table(PRICE_LIST_COLUMNS, quotes))


def render_summary_line(summary: PortfolioSummary) -> str:
    if summary.priced_count == 0:
        total_value, total_profit = SENTINEL, SENTINEL
    else:
        total_value, total_profit = format_currency(summary.total_value), format_currency(summary.total_profit)
    line = f"Total value: {total_value}  Total profit: {total_profit}"
    if summary.unpriced_count:
        line += f"  ({summary.unpriced_count} holding(s) without a quote excluded)"
    return line


def render_valuation_table(holdings: Sequence[EnrichedHolding], summary: PortfolioSummary) -> str:
    ordered = sorted(holdings, key=lambda holding: holding.company_name)
    lines = render_table(VALUATION_COLUMNS, ordered)
    lines.append("")
    lines.append(render_summary_line(summary))
    return "\n".join(lines)


def render_exchange_rate(from_currency: str, to_currency: str, rate: Decimal | None) -> str:
    return f"{from_currency.strip().upper()}/{to_currency.strip().upper()}: {format_rate(rate)}"
