"""dividendtracker — personal dividend portfolio tracking.

Records buy/sell transactions in a local JSON file and enriches holdings
with live quote and dividend data from IEX Cloud.

Quick start::

    from dividendtracker import create_client_from_env, create_store_from_env
    store = create_store_from_env()
    client = create_client_from_env()
    for ticker in store.load().tickers():
        print(client.get_stock_data(ticker))
"""

from __future__ import annotations

from dividendtracker.client import StockDataClient
from dividendtracker.config import (
    IEX_BASE_URL,
    DividendTrackerConfig,
    ProviderType,
    load_config_from_env,
)
from dividendtracker.errors import (
    DecodeError,
    DividendTrackerError,
    DividendTrackerErrorCode,
    NetworkError,
    NoDataError,
    PortfolioStoreError,
)
from dividendtracker.models.dividend import DividendFrequency, DividendRecord, parse_dividend_frequency
from dividendtracker.models.portfolio import PortfolioData
from dividendtracker.models.quote import QuoteRecord
from dividendtracker.models.snapshot import StockSnapshot
from dividendtracker.models.transaction import StockTransaction, TransactionOperation
from dividendtracker.portfolio import DEFAULT_PORTFOLIO_FILENAME, PortfolioStore

__version__ = "0.1.0"

__all__ = [
    # Client
    "StockDataClient",
    "create_client_from_env",
    # Portfolio
    "PortfolioStore",
    "create_store_from_env",
    "DEFAULT_PORTFOLIO_FILENAME",
    # Config
    "DividendTrackerConfig",
    "ProviderType",
    "IEX_BASE_URL",
    "load_config_from_env",
    # Errors
    "DividendTrackerError",
    "DividendTrackerErrorCode",
    "NetworkError",
    "DecodeError",
    "NoDataError",
    "PortfolioStoreError",
    # Models
    "DividendFrequency",
    "DividendRecord",
    "parse_dividend_frequency",
    "QuoteRecord",
    "StockSnapshot",
    "StockTransaction",
    "TransactionOperation",
    "PortfolioData",
]


def create_client_from_env() -> StockDataClient:
    """Zero-config factory — reads provider and token from env vars.

    See ``load_config_from_env`` for the variables read.
    """
    return StockDataClient(load_config_from_env())


def create_store_from_env() -> PortfolioStore:
    """Portfolio store at ``DIVIDEND_TRACKER_PORTFOLIO`` or the home-directory default."""
    return PortfolioStore(load_config_from_env().portfolio_path)
