"""Decorators composable around any metadata client."""

from __future__ import annotations

import asyncio
import logging
from collections import OrderedDict
from typing import TypeVar

from ryandata_address_metadata.models import CommonMetadata, require_argument
from ryandata_address_metadata.protocols import MetadataClientProtocol

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=CommonMetadata)


class NullifyingClientDecorator:
    """Turns records without an identifier into None.

    The service reports a missing record as an empty payload; after this
    decorator every consumer only ever sees a present record or None.
    """

    def __init__(self, client: MetadataClientProtocol) -> None:
        self._client = require_argument(client, "client")

    @property
    def client(self) -> MetadataClientProtocol:
        """The decorated client."""
        return self._client

    async def query(self, identifier: str, model: type[M]) -> M | None:
        require_argument(identifier, "identifier")
        result = await self._client.query(identifier, model)
        if result is None or not result.id:
            logger.debug("No metadata record for %s", identifier)
            return None
        return result

    async def aclose(self) -> None:
        await self._client.aclose()


class CachingClientDecorator:
    """Remembers up to maxsize query results, evicting the least recently used.

    Concurrent queries for the same identifier and model share one fetch.
    Failed fetches are not remembered. Cancelling one caller does not cancel
    a fetch other callers are waiting on.
    """

    def __init__(self, client: MetadataClientProtocol, maxsize: int = 512) -> None:
        self._client = require_argument(client, "client")
        self.maxsize = max(1, maxsize)
        self._results: OrderedDict[tuple[str, type], CommonMetadata | None] = OrderedDict()
        self._pending: dict[tuple[str, type], asyncio.Future] = {}

    async def query(self, identifier: str, model: type[M]) -> M | None:
        require_argument(identifier, "identifier")
        cache_key = (identifier, model)

        if cache_key in self._results:
            logger.debug("Cache hit for %s", identifier)
            self._results.move_to_end(cache_key)
            return self._results[cache_key]  # type: ignore[return-value]

        pending = self._pending.get(cache_key)
        if pending is None:
            pending = asyncio.ensure_future(self._fetch(cache_key, identifier, model))
            self._pending[cache_key] = pending
        return await asyncio.shield(pending)

    async def _fetch(
        self, cache_key: tuple[str, type], identifier: str, model: type[M]
    ) -> M | None:
        try:
            result = await self._client.query(identifier, model)
        finally:
            self._pending.pop(cache_key, None)
        self._results[cache_key] = result
        self._results.move_to_end(cache_key)
        while len(self._results) > self.maxsize:
            self._results.popitem(last=False)
        return result

    def clear(self) -> None:
        """Forget every remembered result."""
        self._results.clear()

    def __len__(self) -> int:
        return len(self._results)

    async def aclose(self) -> None:
        self.clear()
        await self._client.aclose()
