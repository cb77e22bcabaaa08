"""Snapshot data model — combines a quote with trailing dividend data."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from dividendtracker.models.dividend import DividendRecord
from dividendtracker.models.quote import QuoteRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StockSnapshot:
    """Caller-facing view of a stock with derived dividend figures.

    Attributes:
        symbol: Ticker symbol.
        company_name: Company display name.
        day_change: Absolute change since previous close.
        day_change_percent: Change since previous close, as a fraction.
        ytd_change: Year-to-date change, as a fraction.
        latest_price: Latest traded price.
        pe_ratio: Price/earnings ratio.
        week52_high: 52-week high.
        week52_low: 52-week low.
        div_annual: Latest dividend amount times payments per year.
        div_yield: ``div_annual`` as a percentage of ``latest_price``.
        div_ex_date: Ex-date of the latest dividend.
        div_payment_date: Payment date of the latest dividend.
    """

    symbol: str
    company_name: str
    day_change: float
    day_change_percent: float
    ytd_change: float
    latest_price: float
    pe_ratio: float
    week52_high: float
    week52_low: float
    div_annual: float
    div_yield: float
    div_ex_date: str = ""
    div_payment_date: str = ""

    @classmethod
    def from_records(cls, dividend: DividendRecord, quote: QuoteRecord) -> StockSnapshot:
        div_annual = dividend.annualized_amount
        if quote.latest_price == 0:
            # Yield is undefined without a price; report it as zero.
            logger.warning("Latest price for %s is 0; dividend yield set to 0", quote.symbol)
            div_yield = 0.0
        else:
            div_yield = div_annual / quote.latest_price * 100

        return cls(
            symbol=quote.symbol,
            company_name=quote.company_name,
            day_change=quote.change,
            day_change_percent=quote.change_percent,
            ytd_change=quote.ytd_change,
            latest_price=quote.latest_price,
            pe_ratio=quote.pe_ratio,
            week52_high=quote.week52_high,
            week52_low=quote.week52_low,
            div_annual=div_annual,
            div_yield=div_yield,
            div_ex_date=dividend.ex_date,
            div_payment_date=dividend.payment_date,
        )
