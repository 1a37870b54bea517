"""Portfolio file loading helpers."""

from __future__ import annotations

import os

import pandas as pd

from portfolio_report.portfolio.models import PortfolioError

ALLOWED_EXTENSIONS = {".csv", ".txt"}


def is_readable_csv(file_path: str) -> bool:
    if not file_path:
        return False
    ext = os.path.splitext(file_path)[1].lower()
    if ext not in ALLOWED_EXTENSIONS:
        return False
    return os.path.isfile(file_path) and os.access(file_path, os.R_OK)


def load_portfolio_csv(file_path: str) -> pd.DataFrame:
    """Read a holdings file as strings with lower-cased, trimmed headers."""
    absolute_path = file_path if os.path.isabs(file_path) else os.path.abspath(file_path)
    if not is_readable_csv(absolute_path):
        raise PortfolioError(
            "invalid_file_path",
            f"Portfolio input must be an existing .csv or .txt file: {file_path}",
            file_path,
        )
    try:
        frame = pd.read_csv(
            absolute_path,
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
            index_col=False,
        )
    except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError, OSError) as error:
        raise PortfolioError("file_parse_error", f"Could not parse portfolio file {file_path}: {error}", file_path) from error
    frame.columns = [str(col).strip().lower() for col in frame.columns]
    return frame
