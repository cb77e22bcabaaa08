"""Dividend record data model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class DividendFrequency(Enum):
    """Provider payment frequency strings and their annual multiplier."""

    ANNUAL = ("annual", 1)
    SEMI_ANNUAL = ("semi-annual", 2)
    QUARTERLY = ("quarterly", 4)
    MONTHLY = ("monthly", 12)
    UNKNOWN = ("", 0)

    def __init__(self, label: str, multiplier: int) -> None:
        self.label = label
        self.multiplier = multiplier

    @classmethod
    def parse(cls, value: str) -> DividendFrequency:
        """Map a provider frequency string; unrecognized values give UNKNOWN."""
        for member in cls:
            if member is not cls.UNKNOWN and member.label == value:
                return member
        return cls.UNKNOWN


def parse_dividend_frequency(value: str) -> int:
    """Return the number of payments per year for a frequency string (0 if unknown)."""
    return DividendFrequency.parse(value).multiplier


@dataclass(frozen=True)
class DividendRecord:
    """Single dividend payment from the trailing-year dividend endpoint.

    Attributes:
        symbol: Ticker symbol, as requested.
        amount: Dividend amount per share.
        ex_date: Ex-dividend date, as sent by the provider.
        payment_date: Payment date, as sent by the provider.
        frequency: Provider frequency string ("quarterly", "monthly", ...).
    """

    symbol: str
    amount: float = 0.0
    ex_date: str = ""
    payment_date: str = ""
    frequency: str = ""

    @property
    def multiplier(self) -> int:
        return parse_dividend_frequency(self.frequency)

    @property
    def annualized_amount(self) -> float:
        """Amount scaled to a full year of payments."""
        return self.amount * self.multiplier

    @classmethod
    def from_payload(cls, symbol: str, payload: dict[str, Any]) -> DividendRecord:
        return cls(
            symbol=symbol,
            amount=float(payload.get("amount") or 0.0),
            ex_date=str(payload.get("exDate") or ""),
            payment_date=str(payload.get("paymentDate") or ""),
            frequency=str(payload.get("frequency") or ""),
        )
