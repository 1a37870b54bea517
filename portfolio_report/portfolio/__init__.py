"""Portfolio valuation domain package."""

from portfolio_report.portfolio.models import EnrichedHolding, ReportMode, SimpleQuote
from portfolio_report.portfolio.portfolio_service import PortfolioService

__all__ = ["EnrichedHolding", "PortfolioService", "ReportMode", "SimpleQuote"]
