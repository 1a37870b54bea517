"""Shared service helpers."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Generic, TypeVar

from portfolio_report.providers.http import ProviderError

T = TypeVar("T")

QUOTE_UNAVAILABLE = "QUOTE_UNAVAILABLE"


@dataclass
class ErrorEnvelope:
    code: str
    message: str
    retriable: bool = True
    provider: str | None = None
    provider_code: str | None = None


@dataclass
class ServiceResult(Generic[T]):
    data: T | None
    source: str | None = None
    error: ErrorEnvelope | None = None
    fetched_at: float | None = None

    @property
    def ok(self) -> bool:
        return self.data is not None and self.error is None


def normalize_code(code: str) -> str:
    clean = (code or "").strip().upper()
    if not clean:
        raise ValueError("Security code must not be empty.")
    return clean


def normalize_currency(currency: str) -> str:
    clean = (currency or "").strip().upper()
    if not clean:
        raise ValueError("Currency code must not be empty.")
    return clean


def unavailable(message: str, error: ProviderError | None = None) -> ServiceResult:
    envelope = ErrorEnvelope(code=QUOTE_UNAVAILABLE, message=message)
    if error is not None:
        envelope.provider = error.provider
        envelope.provider_code = error.code
        envelope.retriable = error.code in {"RATE_LIMIT", "NETWORK", "UPSTREAM", "BAD_RESPONSE"}
    return ServiceResult(data=None, error=envelope, fetched_at=time.time())
