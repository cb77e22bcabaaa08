"""Quote data model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def _num(payload: dict[str, Any], key: str) -> float:
    value = payload.get(key)
    return float(value) if value is not None else 0.0


@dataclass(frozen=True)
class QuoteRecord:
    """Point-in-time market quote.

    Attributes:
        symbol: Ticker symbol, as requested.
        company_name: Company display name.
        change: Absolute change since previous close.
        change_percent: Change since previous close, as a fraction.
        latest_price: Latest traded price.
        pe_ratio: Price/earnings ratio.
        week52_high: 52-week high.
        week52_low: 52-week low.
        ytd_change: Year-to-date change, as a fraction.
    """

    symbol: str
    company_name: str = ""
    change: float = 0.0
    change_percent: float = 0.0
    latest_price: float = 0.0
    pe_ratio: float = 0.0
    week52_high: float = 0.0
    week52_low: float = 0.0
    ytd_change: float = 0.0

    @classmethod
    def from_payload(cls, symbol: str, payload: dict[str, Any]) -> QuoteRecord:
        """Build from a provider quote object; absent or null fields become zero."""
        return cls(
            symbol=symbol,
            company_name=str(payload.get("companyName") or ""),
            change=_num(payload, "change"),
            change_percent=_num(payload, "changePercent"),
            latest_price=_num(payload, "latestPrice"),
            pe_ratio=_num(payload, "peRatio"),
            week52_high=_num(payload, "week52High"),
            week52_low=_num(payload, "week52Low"),
            ytd_change=_num(payload, "ytdChange"),
        )
