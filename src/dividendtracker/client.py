"""StockDataClient — combines dividend and quote lookups into snapshots."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from dividendtracker.config import DividendTrackerConfig, ProviderType
from dividendtracker.errors import DividendTrackerError
from dividendtracker.models.dividend import DividendRecord
from dividendtracker.models.quote import QuoteRecord
from dividendtracker.models.snapshot import StockSnapshot
from dividendtracker.providers import create_provider
from dividendtracker.providers.base import BaseQuoteProvider

logger = logging.getLogger(__name__)


class StockDataClient:
    """Fetch dividend and quote data for a ticker and derive a snapshot.

    Usage::

        from dividendtracker import create_client_from_env
        client = create_client_from_env()
        snap = client.get_stock_data("AAPL")
        print(snap.div_yield)

    Calls are serial and uncached; every ``get_stock_data`` issues two
    provider requests.
    """

    def __init__(
        self,
        config: DividendTrackerConfig | None = None,
        provider: BaseQuoteProvider | None = None,
    ) -> None:
        self.config = config or DividendTrackerConfig()

        if provider is not None:
            self.provider = provider
        else:
            kwargs: dict[str, Any] = {}
            if self.config.provider is ProviderType.IEX:
                kwargs["base_url"] = self.config.base_url
                kwargs["api_token"] = self.config.api_token
                kwargs["timeout"] = self.config.timeout
            self.provider = create_provider(self.config.provider, **kwargs)

    def fetch_dividend_data(self, ticker: str, token: str | None = None) -> DividendRecord:
        return self.provider.get_dividend(ticker, token)

    def fetch_quote_data(self, ticker: str, token: str | None = None) -> QuoteRecord:
        return self.provider.get_quote(ticker, token)

    def get_stock_data(self, ticker: str, token: str | None = None) -> StockSnapshot:
        """Fetch dividend then quote data and combine them.

        The first failing call propagates as-is; the quote is not requested
        when the dividend lookup fails.
        """
        dividend = self.fetch_dividend_data(ticker, token)
        quote = self.fetch_quote_data(ticker, token)
        return StockSnapshot.from_records(dividend, quote)

    def get_stock_data_many(
        self,
        tickers: Iterable[str],
        token: str | None = None,
    ) -> dict[str, StockSnapshot | DividendTrackerError]:
        """Snapshot each ticker in turn, collecting per-ticker errors."""
        results: dict[str, StockSnapshot | DividendTrackerError] = {}
        for ticker in tickers:
            try:
                results[ticker] = self.get_stock_data(ticker, token)
            except DividendTrackerError as exc:
                logger.warning("Could not fetch stock data for %s: %s", ticker, exc)
                results[ticker] = exc
        return results
