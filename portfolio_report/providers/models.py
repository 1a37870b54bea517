"""Normalized data models shared across providers and services."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal

ProviderName = Literal["yahoo_csv"]


@dataclass(frozen=True)
class NormalizedQuote:
    symbol: str
    name: str | None
    price: Decimal
    source: ProviderName
