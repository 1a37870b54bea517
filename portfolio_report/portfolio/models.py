"""Typed portfolio models."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Literal, Union

PortfolioErrorCode = Literal["invalid_file_path", "file_parse_error", "unrecognized_schema"]


class ReportMode(str, Enum):
    PRICE_ONLY = "price_only"
    FULL_VALUATION = "full_valuation"
    REJECTED = "rejected"


@dataclass
class PortfolioError(Exception):
    """File-level failure; the whole report for this path is abandoned."""

    code: PortfolioErrorCode
    message: str
    path: str | None = None

    def __str__(self) -> str:
        return self.message


@dataclass
class ValidationIssue:
    field: str
    message: str
    row: int | None = None
    code: str = "invalid_value"


@dataclass(frozen=True)
class PriceOnlyRow:
    code: str


@dataclass(frozen=True)
class FullValuationRow:
    code: str
    company_name: str
    quantity: int
    buy_price: Decimal


PortfolioRow = Union[PriceOnlyRow, FullValuationRow]


@dataclass(frozen=True)
class PortfolioBatch:
    mode: ReportMode
    rows: tuple[PortfolioRow, ...]
    issues: tuple[ValidationIssue, ...] = ()


@dataclass(frozen=True)
class SimpleQuote:
    code: str
    price: Decimal | None


@dataclass(frozen=True)
class EnrichedHolding:
    code: str
    company_name: str
    quantity: int
    buy_price: Decimal
    current_price: Decimal | None
    value: Decimal | None
    cost: Decimal
    profit: Decimal | None

    @classmethod
    def build(
        cls,
        code: str,
        company_name: str,
        quantity: int,
        buy_price: Decimal,
        current_price: Decimal | None,
    ) -> "EnrichedHolding":
        cost = buy_price * quantity
        value = current_price * quantity if current_price is not None else None
        profit = value - cost if value is not None else None
        return cls(
            code=code,
            company_name=company_name,
            quantity=quantity,
            buy_price=buy_price,
            current_price=current_price,
            value=value,
            cost=cost,
            profit=profit,
        )


@dataclass(frozen=True)
class PortfolioSummary:
    total_value: Decimal
    total_profit: Decimal
    priced_count: int
    unpriced_count: int


@dataclass
class PortfolioRunResult:
    ok: bool
    file_path: str
    mode: ReportMode | None = None
    report: str | None = None
    issues: list[ValidationIssue] = field(default_factory=list)
    error: PortfolioError | None = None
