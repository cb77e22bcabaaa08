"""IEX Cloud quote provider.

Talks to the ``/stock/{symbol}/dividends/1y`` and ``/stock/{symbol}/quote``
REST endpoints with ``requests``; the API token travels as the ``token``
query parameter.
"""

from __future__ import annotations

import logging
import os
from typing import Any

import requests

from dividendtracker.config import IEX_BASE_URL
from dividendtracker.errors import (
    DecodeError,
    DividendTrackerError,
    DividendTrackerErrorCode,
    NetworkError,
    NoDataError,
)
from dividendtracker.models.dividend import DividendRecord
from dividendtracker.models.quote import QuoteRecord
from dividendtracker.providers.base import BaseQuoteProvider

logger = logging.getLogger(__name__)


class IEXCloudProvider(BaseQuoteProvider):
    """Fetch dividends and quotes from IEX Cloud.

    Capabilities: dividends, quotes.
    """

    def __init__(
        self,
        base_url: str = IEX_BASE_URL,
        api_token: str | None = None,
        timeout: float | None = None,
        session: Any = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_token = api_token or os.getenv("IEX_API_TOKEN")
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    # ------------------------------------------------------------ dividends

    def get_dividend(self, symbol: str, token: str | None = None) -> DividendRecord:
        data = self._get_json(f"{symbol}/dividends/1y", token, what="dividend")
        if not isinstance(data, list):
            logger.error("Unexpected dividend payload for %s: %s", symbol, type(data).__name__)
            raise DecodeError(
                f"Expected a JSON array of dividends for {symbol}, got {type(data).__name__}"
            )
        if not data:
            raise NoDataError(symbol)
        first = data[0]
        if not isinstance(first, dict):
            raise DecodeError(f"Malformed dividend entry for {symbol}: {first!r}")
        try:
            return DividendRecord.from_payload(symbol, first)
        except (TypeError, ValueError) as exc:
            logger.error("Malformed dividend fields for %s: %s", symbol, exc)
            raise DecodeError(f"Malformed dividend entry for {symbol}: {exc}") from exc

    # --------------------------------------------------------------- quotes

    def get_quote(self, symbol: str, token: str | None = None) -> QuoteRecord:
        data = self._get_json(f"{symbol}/quote", token, what="quote")
        if not isinstance(data, dict):
            logger.error("Unexpected quote payload for %s: %s", symbol, type(data).__name__)
            raise DecodeError(
                f"Expected a JSON object quote for {symbol}, got {type(data).__name__}"
            )
        try:
            return QuoteRecord.from_payload(symbol, data)
        except (TypeError, ValueError) as exc:
            logger.error("Malformed quote fields for %s: %s", symbol, exc)
            raise DecodeError(f"Malformed quote for {symbol}: {exc}") from exc

    # ------------------------------------------------------------ internals

    def request_url(self, path: str, token: str) -> str:
        return f"{self.base_url}/{path}?token={token}"

    def _resolve_token(self, token: str | None) -> str:
        resolved = token or self.api_token
        if not resolved:
            raise DividendTrackerError(
                "IEX Cloud API token required. Set IEX_API_TOKEN env var or pass a token.",
                code=DividendTrackerErrorCode.AUTH_FAILED,
            )
        return resolved

    def _get_json(self, path: str, token: str | None, what: str) -> Any:
        resolved = self._resolve_token(token)
        url = self.request_url(path, resolved)
        logger.debug("GET %s", self.request_url(path, "***"))

        try:
            resp = self.session.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            # requests embeds the full URL, token included, in its messages.
            reason = str(exc).replace(resolved, "***")
            logger.error("Error occurred while requesting %s data: %s", what, reason)
            raise NetworkError(f"IEX Cloud {what} request failed: {reason}") from exc

        try:
            return resp.json()
        except ValueError as exc:
            logger.error("Error occurred while decoding %s data: %s", what, exc)
            raise DecodeError(f"IEX Cloud {what} response is not valid JSON: {exc}") from exc
