"""Mock provider for testing and offline use — no API token required."""

from __future__ import annotations

from dividendtracker.errors import NoDataError
from dividendtracker.models.dividend import DividendRecord
from dividendtracker.models.quote import QuoteRecord
from dividendtracker.providers.base import BaseQuoteProvider


class MockProvider(BaseQuoteProvider):
    """In-memory provider that returns preloaded records.

    Symbols without preloaded dividends raise ``NoDataError``; symbols
    without a preloaded quote get a zero-valued quote. Every call is
    appended to ``calls`` as ``(method, symbol)``.
    """

    def __init__(self) -> None:
        self._dividends: dict[str, list[DividendRecord]] = {}
        self._quotes: dict[str, QuoteRecord] = {}
        self.calls: list[tuple[str, str]] = []

    # --- Pre-load helpers ---

    def set_dividends(self, symbol: str, records: list[DividendRecord]) -> None:
        self._dividends[symbol] = records

    def set_quote(self, symbol: str, quote: QuoteRecord) -> None:
        self._quotes[symbol] = quote

    # --- Provider implementation ---

    def get_dividend(self, symbol: str, token: str | None = None) -> DividendRecord:
        self.calls.append(("get_dividend", symbol))
        records = self._dividends.get(symbol, [])
        if not records:
            raise NoDataError(symbol)
        return records[0]

    def get_quote(self, symbol: str, token: str | None = None) -> QuoteRecord:
        self.calls.append(("get_quote", symbol))
        return self._quotes.get(symbol, QuoteRecord(symbol=symbol))
