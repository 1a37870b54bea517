"""Header-driven report mode detection."""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from portfolio_report.portfolio.models import PortfolioBatch, PortfolioError, ReportMode
from portfolio_report.portfolio.validation import parse_full_valuation_rows, parse_price_only_rows

CODE_COLUMNS = ("asx", "code")
QUANTITY_COLUMN = "quantity"
BUY_PRICE_COLUMN = "price"
COMPANY_COLUMN = "company"


def _normalize_headers(headers: Iterable[str]) -> set[str]:
    return {str(header).strip().lower() for header in headers}


def code_column(headers: Iterable[str]) -> str | None:
    normalized = _normalize_headers(headers)
    for candidate in CODE_COLUMNS:
        if candidate in normalized:
            return candidate
    return None


def classify(headers: Iterable[str]) -> ReportMode:
    """Pick the report shape from the header set alone."""
    normalized = _normalize_headers(headers)
    if code_column(normalized) is None:
        return ReportMode.REJECTED
    if QUANTITY_COLUMN in normalized and BUY_PRICE_COLUMN in normalized:
        return ReportMode.FULL_VALUATION
    return ReportMode.PRICE_ONLY


def build_batch(frame: pd.DataFrame, file_path: str | None = None) -> PortfolioBatch:
    """Classify once and convert every row to the matching typed row."""
    frame = frame.rename(columns=lambda col: str(col).strip().lower())
    mode = classify(frame.columns)
    column = code_column(frame.columns)
    if mode is ReportMode.REJECTED or column is None:
        raise PortfolioError(
            "unrecognized_schema",
            f"File does not have a recognized header (expected one of {', '.join(CODE_COLUMNS)}): {file_path}",
            file_path,
        )
    if mode is ReportMode.FULL_VALUATION:
        company = COMPANY_COLUMN if COMPANY_COLUMN in frame.columns else None
        rows, issues = parse_full_valuation_rows(frame, column, company)
    else:
        rows, issues = parse_price_only_rows(frame, column)
    return PortfolioBatch(mode=mode, rows=tuple(rows), issues=tuple(issues))
