"""Tests for data models."""

from datetime import datetime, timezone

import pytest

from dividendtracker.models.dividend import DividendFrequency, DividendRecord, parse_dividend_frequency
from dividendtracker.models.quote import QuoteRecord
from dividendtracker.models.snapshot import StockSnapshot
from dividendtracker.models.transaction import StockTransaction, TransactionOperation


class TestDividendFrequency:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("annual", 1),
            ("semi-annual", 2),
            ("quarterly", 4),
            ("monthly", 12),
        ],
    )
    def test_known_frequencies(self, value, expected):
        assert parse_dividend_frequency(value) == expected

    @pytest.mark.parametrize("value", ["", "weekly", "Quarterly", "irregular", "blank"])
    def test_unrecognized_maps_to_zero(self, value):
        assert parse_dividend_frequency(value) == 0
        assert DividendFrequency.parse(value) is DividendFrequency.UNKNOWN

    def test_parse_returns_member(self):
        assert DividendFrequency.parse("semi-annual") is DividendFrequency.SEMI_ANNUAL


class TestDividendRecord:
    def test_from_payload(self):
        rec = DividendRecord.from_payload("AAPL", {
            "amount": 0.24,
            "exDate": "2024-02-09",
            "paymentDate": "2024-02-15",
            "frequency": "quarterly",
        })
        assert rec.symbol == "AAPL"
        assert rec.amount == 0.24
        assert rec.ex_date == "2024-02-09"
        assert rec.payment_date == "2024-02-15"
        assert rec.multiplier == 4

    def test_missing_fields_default_to_zero_values(self):
        rec = DividendRecord.from_payload("T", {})
        assert rec.amount == 0.0
        assert rec.ex_date == ""
        assert rec.frequency == ""
        assert rec.annualized_amount == 0.0

    def test_unknown_frequency_gives_zero_annual(self):
        rec = DividendRecord(symbol="X", amount=1.5, frequency="unspecified")
        assert rec.annualized_amount == 0.0

    def test_frozen(self):
        rec = DividendRecord(symbol="X", amount=1.0)
        with pytest.raises(AttributeError):
            rec.amount = 2.0  # type: ignore[misc]


class TestQuoteRecord:
    def test_from_payload(self):
        q = QuoteRecord.from_payload("MSFT", {
            "companyName": "Microsoft Corporation",
            "change": -2.5,
            "changePercent": -0.006,
            "latestPrice": 410.0,
            "peRatio": 35.1,
            "week52High": 430.82,
            "week52Low": 309.45,
            "ytdChange": 0.09,
        })
        assert q.company_name == "Microsoft Corporation"
        assert q.change == -2.5
        assert q.latest_price == 410.0
        assert q.week52_low == 309.45

    def test_null_and_missing_fields(self):
        q = QuoteRecord.from_payload("BRK.A", {"companyName": "Berkshire", "peRatio": None})
        assert q.pe_ratio == 0.0
        assert q.latest_price == 0.0
        assert q.company_name == "Berkshire"


class TestStockSnapshot:
    def test_quarterly_yield(self, sample_dividend, sample_quote):
        snap = StockSnapshot.from_records(sample_dividend, sample_quote)
        assert snap.div_annual == pytest.approx(8.0)
        assert snap.div_yield == pytest.approx(8.0)

    def test_copies_quote_and_dividend_fields(self, sample_dividend, sample_quote):
        snap = StockSnapshot.from_records(sample_dividend, sample_quote)
        assert snap.company_name == "Apple Inc"
        assert snap.day_change == 1.25
        assert snap.day_change_percent == 0.0066
        assert snap.ytd_change == 0.034
        assert snap.pe_ratio == 29.8
        assert snap.week52_high == 199.62
        assert snap.week52_low == 164.08
        assert snap.div_ex_date == "2024-02-09"
        assert snap.div_payment_date == "2024-02-15"

    def test_zero_price_gives_zero_yield(self, sample_dividend, caplog):
        quote = QuoteRecord(symbol="AAPL", latest_price=0.0)
        snap = StockSnapshot.from_records(sample_dividend, quote)
        assert snap.div_annual == pytest.approx(8.0)
        assert snap.div_yield == 0.0
        assert "dividend yield set to 0" in caplog.text

    def test_monthly(self):
        div = DividendRecord(symbol="O", amount=0.25, frequency="monthly")
        quote = QuoteRecord(symbol="O", latest_price=60.0)
        snap = StockSnapshot.from_records(div, quote)
        assert snap.div_annual == pytest.approx(3.0)
        assert snap.div_yield == pytest.approx(5.0)


class TestStockTransaction:
    def test_wire_format(self):
        t = StockTransaction(shares=10, price=150.0, timestamp=1_705_276_800,
                             operation=TransactionOperation.SELL)
        assert t.to_dict() == {
            "Shares": 10,
            "Price": 150.0,
            "PurchaseDate": 1_705_276_800,
            "Operation": 1,
        }
        assert StockTransaction.from_dict(t.to_dict()) == t

    def test_signed_shares(self):
        buy = StockTransaction(shares=10, price=1.0, timestamp=0)
        sell = StockTransaction(shares=4, price=1.0, timestamp=0, operation=TransactionOperation.SELL)
        assert buy.signed_shares == 10
        assert sell.signed_shares == -4

    def test_date_is_utc(self):
        t = StockTransaction(shares=1, price=1.0, timestamp=1_705_276_800)
        assert t.date == datetime(2024, 1, 15, tzinfo=timezone.utc)

    def test_unknown_operation_rejected(self):
        with pytest.raises(ValueError):
            StockTransaction.from_dict({"Shares": 1, "Price": 1.0, "PurchaseDate": 0, "Operation": 7})
