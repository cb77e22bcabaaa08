"""Dividend tracker models."""

from dividendtracker.models.dividend import DividendFrequency, DividendRecord, parse_dividend_frequency
from dividendtracker.models.quote import QuoteRecord
from dividendtracker.models.snapshot import StockSnapshot
from dividendtracker.models.transaction import StockTransaction, TransactionOperation
from dividendtracker.models.portfolio import PortfolioData

__all__ = [
    "DividendFrequency",
    "DividendRecord",
    "parse_dividend_frequency",
    "QuoteRecord",
    "StockSnapshot",
    "StockTransaction",
    "TransactionOperation",
    "PortfolioData",
]
