from __future__ import annotations

from typing import Optional

import httpx

from ryandata_address_metadata.remote.client import ServiceClient
from ryandata_address_metadata.remote.config import DEFAULT_SERVICE_URL, ServiceClientConfig
from ryandata_address_metadata.remote.decorators import (
    CachingClientDecorator,
    NullifyingClientDecorator,
)


def create_client(
    config: Optional[ServiceClientConfig] = None,
    *,
    cache: Optional[bool] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> NullifyingClientDecorator:
    """Compose the HTTP client with its decorators.

    Args:
        config: Client configuration. Defaults to environment-driven settings.
        cache: Override config.cache to enable or disable result caching.
        transport: Custom httpx transport (e.g. httpx.MockTransport in tests).

    Returns:
        Nullifying client wrapping the (optionally caching) HTTP client.
    """
    config = config or ServiceClientConfig()
    client = ServiceClient(config=config, transport=transport)
    use_cache = config.cache if cache is None else cache
    inner = CachingClientDecorator(client, maxsize=config.cache_size) if use_cache else client
    return NullifyingClientDecorator(inner)


__all__ = [
    "DEFAULT_SERVICE_URL",
    "CachingClientDecorator",
    "NullifyingClientDecorator",
    "ServiceClient",
    "ServiceClientConfig",
    "create_client",
]
