"""Dividend tracker configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

IEX_BASE_URL = "https://cloud.iexapis.com/stable/stock"


class ProviderType(Enum):
    """Supported quote provider backends."""

    IEX = "iex"
    MOCK = "mock"


@dataclass
class DividendTrackerConfig:
    """Configuration for StockDataClient and PortfolioStore.

    Attributes:
        provider: Quote provider backend.
        api_token: Provider API token, sent as the ``token`` query parameter.
        base_url: Provider base URL, without trailing slash.
        timeout: HTTP timeout in seconds (None = transport default).
        portfolio_path: Portfolio file (None = ``~/.dividend_portfolio_tracker``).
    """

    provider: ProviderType = ProviderType.IEX
    api_token: str | None = None
    base_url: str = IEX_BASE_URL
    timeout: float | None = None
    portfolio_path: Path | None = None


def load_config_from_env() -> DividendTrackerConfig:
    """Build a config from environment variables.

    Environment variables:
        DIVIDEND_TRACKER_PROVIDER: Provider backend — "iex" or "mock" (default: "iex").
        IEX_API_TOKEN: Provider API token.
        IEX_BASE_URL: Provider base URL.
        DIVIDEND_TRACKER_TIMEOUT: HTTP timeout in seconds (default: unset).
        DIVIDEND_TRACKER_PORTFOLIO: Portfolio file path.
    """
    timeout = os.getenv("DIVIDEND_TRACKER_TIMEOUT")
    portfolio = os.getenv("DIVIDEND_TRACKER_PORTFOLIO")
    return DividendTrackerConfig(
        provider=ProviderType(os.getenv("DIVIDEND_TRACKER_PROVIDER", "iex").strip().lower()),
        api_token=os.getenv("IEX_API_TOKEN") or None,
        base_url=os.getenv("IEX_BASE_URL", IEX_BASE_URL).rstrip("/"),
        timeout=float(timeout) if timeout else None,
        portfolio_path=Path(portfolio).expanduser() if portfolio else None,
    )
