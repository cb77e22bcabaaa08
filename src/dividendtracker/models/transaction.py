"""Stock transaction data model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import IntEnum
from typing import Any


class TransactionOperation(IntEnum):
    """Transaction direction, stored as an integer tag."""

    PURCHASE = 0
    SELL = 1


@dataclass(frozen=True)
class StockTransaction:
    """One persisted buy or sell.

    Attributes:
        shares: Number of shares.
        price: Price per share at transaction time.
        timestamp: Transaction time in seconds since the epoch.
        operation: Purchase or sell.
    """

    shares: int
    price: float
    timestamp: int
    operation: TransactionOperation = TransactionOperation.PURCHASE

    @property
    def signed_shares(self) -> int:
        """Shares with sales counted negative."""
        return -self.shares if self.operation is TransactionOperation.SELL else self.shares

    @property
    def date(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)

    def to_dict(self) -> dict[str, Any]:
        return {
            "Shares": self.shares,
            "Price": self.price,
            "PurchaseDate": self.timestamp,
            "Operation": int(self.operation),
        }

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> StockTransaction:
        return cls(
            shares=int(payload.get("Shares", 0)),
            price=float(payload.get("Price", 0.0)),
            timestamp=int(payload.get("PurchaseDate", 0)),
            operation=TransactionOperation(int(payload.get("Operation", 0))),
        )
