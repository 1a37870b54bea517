from decimal import Decimal

import pandas as pd
import pytest

from portfolio_report.portfolio.classifier import build_batch, classify
from portfolio_report.portfolio.models import FullValuationRow, PortfolioError, PriceOnlyRow, ReportMode


@pytest.mark.parametrize(
    ("headers", "expected"),
    [
        ({"asx"}, ReportMode.PRICE_ONLY),
        ({"ASX", "Company"}, ReportMode.PRICE_ONLY),
        ({"asx", "price"}, ReportMode.PRICE_ONLY),
        ({"asx", "price", "quantity"}, ReportMode.FULL_VALUATION),
        ({" Asx ", "PRICE", "Quantity", "company"}, ReportMode.FULL_VALUATION),
        ({"code", "quantity", "price"}, ReportMode.FULL_VALUATION),
        ({"ticker", "quantity", "price"}, ReportMode.REJECTED),
        (set(), ReportMode.REJECTED),
    ],
)
def test_classify(headers: set[str], expected: ReportMode) -> None:
    assert classify(headers) is expected


def test_build_batch_price_only_rows() -> None:
    frame = pd.DataFrame({"asx": ["cce", "ANZ"]})
    batch = build_batch(frame)
    assert batch.mode is ReportMode.PRICE_ONLY
    assert batch.rows == (PriceOnlyRow("CCE"), PriceOnlyRow("ANZ"))
    assert batch.issues == ()


def test_build_batch_full_valuation_rows_with_and_without_company() -> None:
    with_company = pd.DataFrame({"asx": ["cba"], "quantity": ["100"], "price": ["70.00"], "company": ["Commbank"]})
    without_company = pd.DataFrame({"asx": ["cba"], "quantity": ["100"], "price": ["70.00"]})
    assert build_batch(with_company).rows == (FullValuationRow("CBA", "Commbank", 100, Decimal("70.00")),)
    assert build_batch(without_company).rows == (FullValuationRow("CBA", "", 100, Decimal("70.00")),)


def test_build_batch_rejects_missing_code_column() -> None:
    frame = pd.DataFrame({"ticker": ["CBA"]})
    with pytest.raises(PortfolioError) as excinfo:
        build_batch(frame, "holdings.csv")
    assert excinfo.value.code == "unrecognized_schema"
    assert "holdings.csv" in excinfo.value.message
