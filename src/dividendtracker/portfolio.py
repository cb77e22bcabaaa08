"""PortfolioStore — transactions persisted to a single JSON file.

Each mutation reloads the whole file, appends one transaction and rewrites
the file through a temp file + ``os.replace``. Concurrent writers are not
coordinated: the last one wins.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from datetime import date, datetime, time
from pathlib import Path

from dividendtracker.errors import PortfolioStoreError
from dividendtracker.models.portfolio import PortfolioData
from dividendtracker.models.transaction import StockTransaction, TransactionOperation

logger = logging.getLogger(__name__)

DEFAULT_PORTFOLIO_FILENAME = ".dividend_portfolio_tracker"


def default_portfolio_path() -> Path:
    """``~/.dividend_portfolio_tracker`` for the current user."""
    try:
        home = Path.home()
    except (KeyError, RuntimeError) as exc:
        logger.error("Unable to resolve home directory: %s", exc)
        raise PortfolioStoreError(f"Unable to resolve home directory: {exc}") from exc
    return home / DEFAULT_PORTFOLIO_FILENAME


def to_epoch_seconds(when: datetime | date) -> int:
    """Seconds since the epoch; naive values and bare dates are local time."""
    if not isinstance(when, datetime):
        when = datetime.combine(when, time.min)
    return int(when.timestamp())


class PortfolioStore:
    """Read and append stock transactions in a JSON portfolio file.

    File shape::

        {"AAPL": [{"Shares": 10, "Price": 150.0, "PurchaseDate": 1700000000, "Operation": 0}]}

    Args:
        path: Portfolio file. Defaults to ``~/.dividend_portfolio_tracker``,
            resolved once here.
    """

    def __init__(self, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else default_portfolio_path()

    # ---------------------------------------------------------------- read

    def load(self) -> PortfolioData:
        """Load the portfolio, creating an empty file if none exists."""
        if not self.path.exists():
            self._create_empty()
            return PortfolioData()

        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.error("Unable to read portfolio file %s: %s", self.path, exc)
            raise PortfolioStoreError(f"Unable to read {self.path}: {exc}", self.path) from exc

        if not raw.strip():
            return PortfolioData()

        try:
            return PortfolioData.from_dict(json.loads(raw))
        except (ValueError, TypeError) as exc:
            logger.error("Unable to decode portfolio file %s: %s", self.path, exc)
            raise PortfolioStoreError(f"Unable to decode {self.path}: {exc}", self.path) from exc

    # --------------------------------------------------------------- write

    def save(self, portfolio: PortfolioData) -> None:
        """Replace the file contents with ``portfolio``."""
        payload = json.dumps(portfolio.to_dict())
        fd = None
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f"{self.path.name}.", suffix=".tmp",
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fd = None
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as exc:
            logger.error("Error occurred while saving portfolio data to %s: %s", self.path, exc)
            raise PortfolioStoreError(f"Unable to write {self.path}: {exc}", self.path) from exc
        finally:
            if fd is not None:
                os.close(fd)
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
        logger.debug("Saved %d tickers to %s", len(portfolio), self.path)

    def record_purchase(
        self, ticker: str, shares: int, price: float, when: datetime | date,
    ) -> StockTransaction:
        return self._record(ticker, shares, price, when, TransactionOperation.PURCHASE)

    def record_sale(
        self, ticker: str, shares: int, price: float, when: datetime | date,
    ) -> StockTransaction:
        return self._record(ticker, shares, price, when, TransactionOperation.SELL)

    def append_transaction(self, ticker: str, transaction: StockTransaction) -> PortfolioData:
        """Load, append ``transaction`` under ``ticker``, and save."""
        portfolio = self.load()
        portfolio.add(ticker, transaction)
        self.save(portfolio)
        return portfolio

    # ------------------------------------------------------------ internal

    def _record(
        self,
        ticker: str,
        shares: int,
        price: float,
        when: datetime | date,
        operation: TransactionOperation,
    ) -> StockTransaction:
        transaction = StockTransaction(
            shares=shares,
            price=price,
            timestamp=to_epoch_seconds(when),
            operation=operation,
        )
        self.append_transaction(ticker, transaction)
        return transaction

    def _create_empty(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.touch()
        except OSError as exc:
            logger.error("Error occurred while creating portfolio file %s: %s", self.path, exc)
            raise PortfolioStoreError(f"Unable to create {self.path}: {exc}", self.path) from exc
        logger.debug("Created empty portfolio file %s", self.path)
