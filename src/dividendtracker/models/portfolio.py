"""Portfolio data model — transactions grouped by ticker."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pandas as pd

from dividendtracker.models.transaction import StockTransaction, TransactionOperation


@dataclass
class PortfolioData:
    """Mapping of ticker to its transactions, oldest first.

    Tickers are kept in the case the caller used.
    """

    stocks: dict[str, list[StockTransaction]] = field(default_factory=dict)

    def add(self, ticker: str, transaction: StockTransaction) -> None:
        self.stocks.setdefault(ticker, []).append(transaction)

    def tickers(self) -> list[str]:
        return sorted(self.stocks)

    def transactions(self, ticker: str) -> list[StockTransaction]:
        return list(self.stocks.get(ticker, []))

    def shares_held(self, ticker: str) -> int:
        """Net shares: purchases minus sales."""
        return sum(t.signed_shares for t in self.stocks.get(ticker, []))

    def __len__(self) -> int:
        return len(self.stocks)

    # ---- serialization ----

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        return {
            ticker: [t.to_dict() for t in transactions]
            for ticker, transactions in self.stocks.items()
        }

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> PortfolioData:
        if not isinstance(payload, dict):
            raise ValueError(f"expected a JSON object, got {type(payload).__name__}")
        stocks: dict[str, list[StockTransaction]] = {}
        for ticker, entries in payload.items():
            if not isinstance(entries, list):
                raise ValueError(f"expected a list of transactions for {ticker!r}")
            if not all(isinstance(e, dict) for e in entries):
                raise ValueError(f"malformed transaction for {ticker!r}")
            stocks[ticker] = [StockTransaction.from_dict(e) for e in entries]
        return cls(stocks=stocks)

    # ---- frames ----

    def to_frame(self) -> pd.DataFrame:
        """One row per transaction, in ticker then append order."""
        records = [
            {
                "ticker": ticker,
                "date": t.date,
                "operation": t.operation.name.lower(),
                "shares": t.shares,
                "price": t.price,
            }
            for ticker, transactions in self.stocks.items()
            for t in transactions
        ]
        return pd.DataFrame(records, columns=["ticker", "date", "operation", "shares", "price"])

    def summarize(self) -> pd.DataFrame:
        """Per-ticker net shares, net invested amount and transaction count."""
        df = self.to_frame()
        if df.empty:
            return pd.DataFrame(
                columns=["shares", "invested", "transactions"],
                index=pd.Index([], name="ticker"),
            )

        sign = df["operation"].map({
            TransactionOperation.PURCHASE.name.lower(): 1,
            TransactionOperation.SELL.name.lower(): -1,
        })
        df = df.assign(
            signed_shares=df["shares"] * sign,
            cash=df["shares"] * df["price"] * sign,
        )
        grouped = df.groupby("ticker", sort=True)
        return pd.DataFrame({
            "shares": grouped["signed_shares"].sum(),
            "invested": grouped["cash"].sum(),
            "transactions": grouped.size(),
        })
