"""Dividend tracker error types."""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class DividendTrackerErrorCode(Enum):
    """Error classification codes."""

    NETWORK = "network"
    DECODE = "decode"
    NO_DATA = "no_data"
    AUTH_FAILED = "auth_failed"
    STORAGE = "storage"


class DividendTrackerError(Exception):
    """Dividend tracker exception with error code and retryable flag.

    Attributes:
        message: Human-readable error description.
        code: Structured error code for programmatic handling.
        retryable: Whether repeating the call could succeed.
    """

    def __init__(
        self,
        message: str,
        code: DividendTrackerErrorCode = DividendTrackerErrorCode.NETWORK,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.retryable = retryable


class NetworkError(DividendTrackerError):
    """Transport failure while calling the quote provider."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=DividendTrackerErrorCode.NETWORK, retryable=True)


class DecodeError(DividendTrackerError):
    """Provider response body could not be decoded."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=DividendTrackerErrorCode.DECODE)


class NoDataError(DividendTrackerError):
    """Provider returned no dividend records for a ticker."""

    def __init__(self, symbol: str) -> None:
        super().__init__(
            f"No dividend data was returned for ticker: {symbol}",
            code=DividendTrackerErrorCode.NO_DATA,
        )
        self.symbol = symbol


class PortfolioStoreError(DividendTrackerError):
    """Portfolio file could not be resolved, read, decoded or written."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message, code=DividendTrackerErrorCode.STORAGE)
        self.path = path
