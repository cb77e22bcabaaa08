"""Abstract base class for quote providers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from dividendtracker.models.dividend import DividendRecord
from dividendtracker.models.quote import QuoteRecord


class BaseQuoteProvider(ABC):
    """Abstract base for quote providers.

    ``token`` on each call overrides whatever token the provider was
    constructed with.
    """

    @abstractmethod
    def get_dividend(self, symbol: str, token: str | None = None) -> DividendRecord:
        """Fetch the latest dividend paid over the trailing year.

        Raises:
            NoDataError: The provider has no dividends for ``symbol``.
            NetworkError: The request failed.
            DecodeError: The response body was not the expected JSON.
        """
        ...

    @abstractmethod
    def get_quote(self, symbol: str, token: str | None = None) -> QuoteRecord:
        """Fetch the current quote for a symbol."""
        ...

    def capabilities(self) -> set[str]:
        return {"dividends", "quotes"}
