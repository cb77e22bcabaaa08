"""Quote providers and the factory that builds one from a ProviderType."""

from __future__ import annotations

from typing import Any

from dividendtracker.config import ProviderType
from dividendtracker.providers.base import BaseQuoteProvider


def create_provider(provider_type: ProviderType, **kwargs: Any) -> BaseQuoteProvider:
    """Build the provider for ``provider_type``.

    The IEX provider module is only imported when asked for, so offline
    use with the mock provider never loads ``requests``.
    """
    if provider_type is ProviderType.IEX:
        from dividendtracker.providers.iex import IEXCloudProvider

        return IEXCloudProvider(**kwargs)
    if provider_type is ProviderType.MOCK:
        from dividendtracker.providers.mock import MockProvider

        return MockProvider()
    raise ValueError(f"Unsupported provider: {provider_type!r}")


__all__ = ["BaseQuoteProvider", "create_provider"]
