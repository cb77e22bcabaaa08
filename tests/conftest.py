"""Shared fixtures for dividendtracker tests."""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Ensure src/ is on the path for editable-style imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from dividendtracker.models.dividend import DividendRecord
from dividendtracker.models.quote import QuoteRecord
from dividendtracker.portfolio import PortfolioStore
from dividendtracker.providers.mock import MockProvider

DIVIDEND_PAYLOAD = [
    {
        "amount": 0.24,
        "exDate": "2024-02-09",
        "paymentDate": "2024-02-15",
        "frequency": "quarterly",
    },
    {
        "amount": 0.23,
        "exDate": "2023-11-10",
        "paymentDate": "2023-11-16",
        "frequency": "quarterly",
    },
]

QUOTE_PAYLOAD = {
    "companyName": "Apple Inc",
    "change": 1.25,
    "changePercent": 0.0066,
    "latestPrice": 192.0,
    "peRatio": 29.8,
    "week52High": 199.62,
    "week52Low": 164.08,
    "ytdChange": 0.034,
    "symbol": "AAPL",
    "volume": 53_000_000,
}


def make_response(payload=None, *, json_error: Exception | None = None, http_error=None) -> MagicMock:
    """Fake ``requests.Response`` returning ``payload`` from ``json()``."""
    resp = MagicMock()
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = payload
    if http_error is not None:
        resp.raise_for_status.side_effect = http_error
    return resp


@pytest.fixture
def session() -> MagicMock:
    return MagicMock()


@pytest.fixture
def mock_provider() -> MockProvider:
    return MockProvider()


@pytest.fixture
def sample_dividend() -> DividendRecord:
    return DividendRecord(
        symbol="AAPL",
        amount=2.0,
        ex_date="2024-02-09",
        payment_date="2024-02-15",
        frequency="quarterly",
    )


@pytest.fixture
def sample_quote() -> QuoteRecord:
    return QuoteRecord(
        symbol="AAPL",
        company_name="Apple Inc",
        change=1.25,
        change_percent=0.0066,
        latest_price=100.0,
        pe_ratio=29.8,
        week52_high=199.62,
        week52_low=164.08,
        ytd_change=0.034,
    )


@pytest.fixture
def portfolio_path(tmp_path) -> Path:
    return tmp_path / ".dividend_portfolio_tracker"


@pytest.fixture
def store(portfolio_path) -> PortfolioStore:
    return PortfolioStore(portfolio_path)
