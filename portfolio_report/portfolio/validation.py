"""Row-level parsing of holdings into typed rows."""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

import pandas as pd

from portfolio_report.portfolio.models import FullValuationRow, PriceOnlyRow, ValidationIssue

LOGGER = logging.getLogger(__name__)

MAX_QUANTITY = 10**12
MAX_BUY_PRICE = Decimal("1e9")


def _to_decimal(value: object) -> Decimal | None:
    clean = str(value if value is not None else "").strip().replace(",", "").lstrip("$")
    if not clean:
        return None
    try:
        out = Decimal(clean)
    except InvalidOperation:
        return None
    return out if out.is_finite() else None


def parse_quantity(value: object) -> int | None:
    number = _to_decimal(value)
    if number is None or number < 0 or number > MAX_QUANTITY or number != number.to_integral_value():
        return None
    return int(number)


def parse_buy_price(value: object) -> Decimal | None:
    number = _to_decimal(value)
    if number is None or number < 0 or number > MAX_BUY_PRICE:
        return None
    return number


def _cell_text(row: pd.Series, column: str) -> str:
    value = row[column]
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ""
    return str(value).strip()


def _row_code(row: pd.Series, code_column: str) -> str:
    return _cell_text(row, code_column).upper()


def _missing_code_issue(row_num: int) -> ValidationIssue:
    LOGGER.warning("row skipped: row=%s reason=missing_code", row_num)
    return ValidationIssue(field="code", row=row_num, code="missing_code", message=f"Row {row_num} has no security code.")


def parse_price_only_rows(frame: pd.DataFrame, code_column: str) -> tuple[list[PriceOnlyRow], list[ValidationIssue]]:
    rows: list[PriceOnlyRow] = []
    issues: list[ValidationIssue] = []
    for position, (_, row) in enumerate(frame.iterrows()):
        row_num = position + 2
        code = _row_code(row, code_column)
        if not code:
            issues.append(_missing_code_issue(row_num))
            continue
        rows.append(PriceOnlyRow(code=code))
    return rows, issues


def parse_full_valuation_rows(
    frame: pd.DataFrame,
    code_column: str,
    company_column: str | None,
) -> tuple[list[FullValuationRow], list[ValidationIssue]]:
    rows: list[FullValuationRow] = []
    issues: list[ValidationIssue] = []
    for position, (_, row) in enumerate(frame.iterrows()):
        row_num = position + 2
        code = _row_code(row, code_column)
        if not code:
            issues.append(_missing_code_issue(row_num))
            continue

        quantity = parse_quantity(row["quantity"])
        buy_price = parse_buy_price(row["price"])
        if quantity is None or buy_price is None:
            bad_field = "quantity" if quantity is None else "price"
            LOGGER.warning("row skipped: row=%s code=%s reason=malformed_%s", row_num, code, bad_field)
            issues.append(
                ValidationIssue(
                    field=bad_field,
                    row=row_num,
                    code="malformed_row",
                    message=f"Row {row_num} ({code}): {bad_field} {row[bad_field]!r} is not a valid non-negative number.",
                )
            )
            continue

        company_name = _cell_text(row, company_column) if company_column else ""
        rows.append(FullValuationRow(code=code, company_name=company_name, quantity=quantity, buy_price=buy_price))
    return rows, issues
